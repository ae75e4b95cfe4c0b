"""CLI package for SuggestShaper command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from SuggestShaper.cli.runner import CommandRunner
from SuggestShaper.cli.ui import cli


def main() -> None:
    """Run SuggestShaper CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()

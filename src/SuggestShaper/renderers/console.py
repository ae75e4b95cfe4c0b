"""Console output: results are echoed to stdout as JSON."""

from __future__ import annotations

from typing import Any, Mapping

import click

from SuggestShaper.renderers.base import OutputWriter
from SuggestShaper.renderers.json import dumps


class ConsoleOutputWriter(OutputWriter):
    """Echo each result to stdout, leaving stderr to the logger."""

    def write_result(self, name: str, payload: Mapping[str, Any]) -> None:
        del name
        click.echo(dumps(dict(payload)))

    def finalize(self, action: str) -> None:
        """No-op for console output."""

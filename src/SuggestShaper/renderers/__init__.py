"""Output renderers for command results.

Exports the OutputWriter base class, the client options renderer, and a
factory that instantiates writers based on configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from SuggestShaper.renderers.base import MultiOutputWriter, OutputWriter
from SuggestShaper.renderers.console import ConsoleOutputWriter
from SuggestShaper.renderers.json import JsonFileWriter, render_client_options, render_status

if TYPE_CHECKING:
    from SuggestShaper.config import AppConfig


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer fanning out to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "OutputWriter",
    "create_output_writer",
    "render_client_options",
    "render_status",
]

"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Callable, Protocol

import click

from SuggestShaper.config import AppConfig
from SuggestShaper.renderers import OutputWriter, create_output_writer
from SuggestShaper.services import create_autosuggest_feature
from SuggestShaper.services.feature import AutosuggestFeature
from SuggestShaper.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> None: ...


CommandFactory = Callable[[AutosuggestFeature, OutputWriter], Command]


class CommandRunner:
    """Run one CLI command with logging and error handling."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self, action: str, factory: CommandFactory) -> None:
        """Configure logging, build components, and execute a command.

        Args:
            action: The CLI command name (e.g., 'mapping').
            factory: Builds the command from the feature and output writer.

        Raises:
            click.Abort: When the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            feature = create_autosuggest_feature(self.config)
            output_writer = create_output_writer(self.config)
            factory(feature, output_writer).execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e

"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from SuggestShaper.cli.commands import EndpointCommand, MappingCommand, StatusCommand, SyncCommand
from SuggestShaper.cli.runner import CommandRunner
from SuggestShaper.config import DEFAULT_CONFIG_PATH, load_config_with_defaults

_INPUT_FILE = click.Path(path_type=Path, dir_okay=False, exists=True)


@click.group(help="SuggestShaper: shape search indexes and endpoints for typeahead suggestions.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged over the defaults.",
)
@click.option(
    "--defaults",
    "default_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the default YAML config.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path, default_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()
    ctx.obj = load_config_with_defaults(config_path, default_path=default_path)


@cli.command("mapping")
@click.argument("input_path", type=_INPUT_FILE)
@click.pass_context
def mapping_cmd(ctx: click.Context, input_path: Path) -> None:
    """Augment the mapping document in INPUT_PATH with suggest fields."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda feature, writer: MappingCommand(feature=feature, output_writer=writer, input_path=input_path),
    )


@cli.command("sync")
@click.argument("input_path", type=_INPUT_FILE)
@click.pass_context
def sync_cmd(ctx: click.Context, input_path: Path) -> None:
    """Add term suggestions to the document payload(s) in INPUT_PATH."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda feature, writer: SyncCommand(feature=feature, output_writer=writer, input_path=input_path),
    )


@cli.command("endpoint")
@click.pass_context
def endpoint_cmd(ctx: click.Context) -> None:
    """Print the typeahead client options."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda feature, writer: EndpointCommand(feature=feature, output_writer=writer),
    )


@cli.command("status")
@click.pass_context
def status_cmd(ctx: click.Context) -> None:
    """Print the feature requirements status."""
    CommandRunner(ctx.obj).run(
        ctx.command.name,
        lambda feature, writer: StatusCommand(feature=feature, output_writer=writer),
    )

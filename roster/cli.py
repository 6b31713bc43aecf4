"""Roster CLI — the main entry point for the student registry shell."""

import logging
from dataclasses import replace

import click
from rich.console import Console

from roster import __version__

console = Console(highlight=False, soft_wrap=True)

LOG_FORMAT = "[%(levelname)s %(name)s] %(message)s"


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """Manage an in-memory, id-sorted registry of students."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# ── Shell ────────────────────────────────────────────────────────────


@main.command()
@click.option("--capacity", "-c", type=click.IntRange(min=0), default=None, help="Maximum number of students")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None, help="YAML config file")
@click.option("--no-pause", is_flag=True, help="Do not wait for Enter after each command")
@click.pass_context
def shell(ctx: click.Context, capacity: int | None, config_path: str | None, no_pause: bool):
    """Start the interactive student management menu.

    Reads menu choices from stdin, so a prepared input file can be piped in.
    """
    from roster.config import ConfigError, load_config
    from roster.registry.sorted_registry import SortedRegistry
    from roster.shell.console import ConsoleShell

    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    verbose = ctx.obj["verbose"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level_number,
        format=LOG_FORMAT,
    )

    if capacity is not None:
        config = replace(config, capacity=capacity)
    if no_pause:
        config = replace(config, pause=False)

    logging.getLogger(__name__).debug("Starting shell with %s", config)
    registry = SortedRegistry(config.capacity)
    ConsoleShell(
        registry,
        console=console,
        stdin=click.get_text_stream("stdin"),
        pause=config.pause,
    ).run()


if __name__ == "__main__":
    main()

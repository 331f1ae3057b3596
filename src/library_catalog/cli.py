"""Command line interface for library catalog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .console_io import ConsoleIO, create_console
from .domain.entities import Catalog
from .exceptions import LibraryCatalogError
from .menu import CatalogShell
from .models.config import Config, create_default_config, load_config

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _setup_logging(level: str) -> None:
    """Send log records to stderr so the menu transcript stays clean."""
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="library-catalog")
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Debug logging to stderr'
)
@click.option(
    '--no-color',
    is_flag=True,
    help='Disable styled output'
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool, no_color: bool):
    """Manage an in-memory catalog of books, magazines and newspapers.

    Without a command, runs the interactive menu. Nothing is saved when
    the program exits.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        cfg = load_config(config) if config else Config()
    except LibraryCatalogError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    _setup_logging("DEBUG" if verbose else cfg.log_level)
    logger.debug("Starting menu with config %s", cfg)

    io = ConsoleIO(
        console=create_console(color=cfg.display.color and not no_color),
        stdin=sys.stdin,
        reprompt_on_invalid=cfg.input.reprompt_on_invalid,
    )
    shell = CatalogShell(Catalog(), io, separator=cfg.display.separator)
    ctx.exit(shell.run())


@cli.command('init-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
def init_config(path: Path):
    """Write the default configuration to PATH."""
    try:
        create_default_config(path)
    except OSError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    console.print(f"[green]Wrote default configuration to {escape(str(path))}[/green]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()

"""Main CLI entry point for depgraph-view."""

import click
from .commands.component import component
from .commands.version import version
from .. import __version__
from ..utils.logging import get_logger

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="depgraph", message="%(prog)s version %(version)s")
def cli():
    """depgraph - Connected components of build dependency graphs."""
    pass


cli.add_command(component)
cli.add_command(version)

"""Version command - show depgraph-view version."""

import click
from ... import __version__


@click.command()
def version():
    """Show depgraph version."""
    click.echo(f"depgraph version {__version__}")

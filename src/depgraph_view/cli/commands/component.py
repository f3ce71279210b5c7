"""Component command - show the connected component around seed projects."""

import json
import sys
from pathlib import Path
import click
from ...contracts.component_output import ComponentOutput
from ...utils.errors import DepGraphError
from ...utils.logging import get_logger
from ..utils import run_component, format_error
from ..utils.file_resolver import resolve_file_path

logger = get_logger("cli.component")


@click.command()
@click.argument('workspace', type=click.Path(exists=False))
@click.argument('seeds', nargs=-1, required=True)
@click.option('--as-user', 'actor', default=None, help='Apply read permissions of this user')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON instead of human-readable')
@click.option('--output', '-o', type=click.Path(), help='Save output to file')
@click.option('--config', 'config_path', type=click.Path(), default=None, help='Additional config YAML file')
@click.option('--ascii', 'ascii_mode', is_flag=True, help='Use ASCII characters only')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
@click.option('--verbose', is_flag=True, help='Enable debug logging')
def component(workspace, seeds, actor, as_json, output, config_path, ascii_mode, quiet, verbose):
    """
    Show the projects, dependencies, sub-jobs and copied artifacts
    connected to SEEDS in WORKSPACE.
    """
    try:
        try:
            workspace_path = resolve_file_path(workspace)
        except FileNotFoundError as e:
            click.echo(format_error(str(e)), err=True)
            sys.exit(1)

        if not quiet:
            click.echo(f"Loading workspace: {workspace_path}", err=True)

        result, settings = run_component(
            str(workspace_path),
            list(seeds),
            actor=actor,
            config_path=config_path,
            verbose=verbose
        )

        if as_json:
            output_text = _format_json_output(result)
        else:
            from ...presentation.human_formatter import format_component_summary
            ascii_mode = True if ascii_mode or settings["output"].get("ascii") else None
            output_text = format_component_summary(result, ascii_mode=ascii_mode)

        if output:
            output_path = Path(output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(output_text)
            if not quiet:
                click.echo(f"Output saved to: {output_path}", err=True)
        else:
            try:
                click.echo(output_text)
            except UnicodeEncodeError:
                click.echo(output_text.encode('ascii', errors='replace').decode('ascii'))

    except DepGraphError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Component calculation failed: {e}"), err=True)
        sys.exit(1)


def _format_json_output(output: ComponentOutput) -> str:
    """Format ComponentOutput as JSON string."""
    return json.dumps(output.model_dump(), indent=2)

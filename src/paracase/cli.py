"""Command-line interface for paracase using click."""

import logging
import sys
from pathlib import Path
import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .core.config import load_config
from .core.errors import TransformError
from .core.transform import CaseDirective, transform as transform_html


console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Send log records through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
def main(ctx):
    """Paracase - change the case of paragraph text in HTML fragments."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='TOML config file (default: user config directory)'
)
@click.option('--host', help='Interface to bind to (default: 0.0.0.0)')
@click.option('--port', '-p', type=int, help='Port to listen on (default: 8080)')
@click.option('--debug', is_flag=True, help='Run Flask in debug mode')
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Verbose output'
)
def serve(config_path, host, port, debug, verbose):
    """
    Run the HTTP transform service.

    Examples:
        paracase serve
        paracase serve --port 9000
        paracase serve --config ./paracase.toml
    """
    from .server.app import run_server

    try:
        config = load_config(config_path).merged(host=host, port=port, debug=debug or None)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error loading config:[/bold red] {e}")
        sys.exit(1)

    setup_logging('DEBUG' if verbose else config.log_level)
    console.print(f"[bold blue]Paracase[/bold blue] listening on http://{config.host}:{config.port}")
    run_server(config)


@main.command()
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option(
    '--case', 'case',
    type=click.Choice([member.value for member in CaseDirective]),
    required=True,
    help='Case to apply to paragraph text'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Verbose output'
)
def transform(source, case, verbose):
    """
    Transform an HTML file (or stdin) and print the result.

    Examples:
        paracase transform page.html --case uppercase
        echo '<p>Hi</p>' | paracase transform --case lowercase
    """
    setup_logging('DEBUG' if verbose else 'WARNING')

    try:
        result = transform_html(source.read(), CaseDirective(case))
    except TransformError as e:
        console.print(f"[bold red]Error transforming {source.name}:[/bold red] {e}")
        sys.exit(1)

    click.echo(result)


@main.command()
def version():
    """Show version information."""
    click.echo(f"Paracase version {__version__}")


if __name__ == '__main__':
    main()

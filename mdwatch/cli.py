"""Command-line interface for mdwatch.

This module defines the ``mdwatch`` command using the Click framework. It
loads defaults from mdwatch.yaml, applies command line overrides, and runs a
WatchSession until it is interrupted or hits a fatal error.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import __version__
from .config import ON_UNSUPPORTED_CHOICES, WatchConfig, load_config
from .errors import MdwatchError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command()
@click.version_option(version=__version__, prog_name="mdwatch")
@click.option(
    "-i",
    "--input",
    "input_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory containing the Markdown files to watch [default: .]",
)
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory the converted HTML files are written to [default: .]",
)
@click.option(
    "-t",
    "--template",
    "template",
    type=str,
    help="Template file; the converted page is available as {{ html }}",
)
@click.option(
    "--debounce",
    type=float,
    help="Seconds a file must stay quiet before it is converted [default: 1.0]",
)
@click.option(
    "--on-unsupported",
    type=click.Choice(ON_UNSUPPORTED_CHOICES),
    help="Abort or skip when a non-Markdown file is saved [default: error]",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostics",
)
def cli(
    input_dir: Path | None,
    output_dir: Path | None,
    template: str | None,
    debounce: float | None,
    on_unsupported: str | None,
    log_level: str,
):
    """Convert Markdown files to HTML whenever they are saved."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    from .session import WatchSession

    overrides = {
        "input": input_dir,
        "output": output_dir,
        "template": template,
        "debounce": debounce,
        "on_unsupported": on_unsupported,
    }
    try:
        values = load_config(Path.cwd())
        values.update({key: value for key, value in overrides.items() if value is not None})
        config = WatchConfig.from_mapping(values)
        session = WatchSession(config)
        session.run()
    except KeyboardInterrupt:
        click.echo("Stopped watching.")
    except (MdwatchError, OSError, UnicodeDecodeError) as exc:
        _fail(str(exc))


def _fail(message: str) -> None:
    """Report a fatal error and exit with status 1."""
    click.echo(click.style(f"ERROR: {message}", fg="red", bold=True), err=True)
    raise SystemExit(1)


def main():
    """Entry point for the CLI application."""
    cli()

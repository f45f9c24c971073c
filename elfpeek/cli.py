"""
elfpeek CLI -- ELF64 Header Inspector
======================================

Click-based command-line interface that prints the ELF64 file header of
a binary in ``readelf -h`` format.

Usage::

    # Text report
    elfpeek /usr/bin/true

    # JSON report
    elfpeek /usr/bin/true --json

    # Also save the report to a file
    elfpeek /usr/bin/true --output header.json

    # Debug logging on stderr
    elfpeek /usr/bin/true --verbose

Exit status is 0 on success, 2 when no path is given and 1 for every
other failure.

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from shared.config import ElfPeekConfig
from shared.console import ToolConsole
from shared.logger import ToolLogger

from elfpeek import __version__
from elfpeek.core.engine import HeaderEngine
from elfpeek.core.errors import ArgumentMissing, ElfPeekError
from elfpeek.output.report import render_json, render_text, write_report
from elfpeek.parsers.fields import ELFCLASS64


@click.command("elfpeek")
@click.argument("path", required=False, type=click.Path())
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Print the header as JSON instead of text.",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the report to this file (.json selects JSON).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a TOML configuration file.",
)
@click.version_option(__version__, prog_name="elfpeek")
def readelf_cli(
    path: str | None,
    json_output: bool,
    output_path: str | None,
    verbose: bool,
    config_path: str | None,
) -> None:
    """Display the ELF64 file header of PATH.

    Examples:

    \b
        elfpeek /usr/bin/true
        elfpeek ./a.out --json
    """
    console = ToolConsole()

    try:
        config = ElfPeekConfig.load(config_path)
    except (OSError, ValueError) as exc:
        console.error(f"Invalid configuration: {exc}")
        sys.exit(1)

    settings = config.global_settings
    logger = ToolLogger(
        "readelf",
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
        console_output=verbose,
    )

    try:
        if path is None:
            raise ArgumentMissing("PATH")
        header = HeaderEngine(config=config, logger=logger).inspect(path)
    except ElfPeekError as exc:
        logger.error("%s", exc, error=type(exc).__name__)
        # with --verbose the log handler already wrote it to stderr
        if not verbose:
            console.error(str(exc))
        sys.exit(exc.exit_code)

    ei_class = header.e_ident.ei_class
    if ei_class.raw != ELFCLASS64:
        console.warning(f"File class is {ei_class.display}; fields decoded with the ELF64 layout")

    if json_output or config.readelf.output_format == "json":
        click.echo(render_json(header, path))
    else:
        click.echo(render_text(header))

    if output_path:
        if Path(output_path).suffix.lower() == ".json":
            content = render_json(header, path)
        else:
            content = render_text(header)
        try:
            saved = write_report(content, output_path)
        except OSError as exc:
            console.error(f"Cannot write report {output_path}: {exc}")
            sys.exit(1)
        console.success(f"Report saved: {saved}")


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Entry point for the ``elfpeek`` console script."""
    readelf_cli()


if __name__ == "__main__":
    main()

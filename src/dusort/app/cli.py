"""Command-line interface for dusort."""

from __future__ import annotations

from pathlib import Path
from typing import Final

import click

from dusort.core.config import ConfigurationError, build_report_config
from dusort.core.exceptions import FatalScanError
from dusort.core.reporter import render_report, summarize
from dusort.utils.formatting import select_formatter
from dusort.utils.logging import DEFAULT_LOG_LEVEL, configure_logging

# Exit code for fatal scan errors (argument errors exit with click's usage code 2)
EXIT_SCAN_ERROR: Final[int] = 1


# Import version from package
try:
    from importlib.metadata import version
    __version__ = version("dusort")
except ImportError:
    __version__ = "unknown"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "directory",
    type=click.Path(path_type=Path),
    default=".",
    required=False,
)
@click.option(
    '--bytes', '-b', 'bytes_only',
    is_flag=True,
    help='Print size in bytes'
)
@click.option(
    '--localfs', '-x', 'stay_on_filesystem',
    is_flag=True,
    help='Do not descend into directories on other filesystems'
)
@click.option(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Diagnostics verbosity on stderr (DEBUG, INFO, WARNING, ERROR)'
)
@click.version_option(version=__version__, prog_name='dusort')
@click.pass_context
def cli(
    ctx: click.Context,
    directory: Path,
    bytes_only: bool,
    stay_on_filesystem: bool,
    log_level: str,
) -> None:
    """Show the size of each entry in DIRECTORY, smallest first.

    Subdirectories are summed recursively. A directory holding a
    `.nobackup` file is counted as the size of that file alone.
    Unreadable entries are reported on stderr and counted as zero.

    Examples:

        # Current directory, human-readable sizes
        dusort

        # Exact byte counts, staying on one filesystem
        dusort --bytes --localfs /srv
    """
    try:
        config = build_report_config(
            directory=directory,
            bytes_only=bytes_only,
            stay_on_filesystem=stay_on_filesystem,
            log_level=log_level,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    configure_logging(log_level=config.log_level)

    try:
        report = summarize(config.directory, config)
    except FatalScanError as e:
        click.echo(str(e), err=True)
        ctx.exit(EXIT_SCAN_ERROR)

    for error in report.errors:
        click.echo(error.render(), err=True)

    for line in render_report(report, select_formatter(config.bytes_only)):
        click.echo(line)

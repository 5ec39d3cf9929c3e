"""CLI command that summarizes NOAA climate TDV files per region."""

import logging
import sys

import click

from ..config import load_config
from ..errors import CapacityExceededError, ConfigError, FileOpenError
from ..pipeline import analyze_files
from ..report.render import render

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file",
)
@click.option(
    "--tz",
    "timezone",
    type=str,
    help="Time zone for max/min dates: UTC (default), local, or an IANA name",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Stop at the first file that cannot be opened",
)
@click.option(
    "--zero-invalid",
    is_flag=True,
    help="Read unparsable numbers as 0 instead of skipping the line",
)
@click.option(
    "--max-regions",
    type=click.IntRange(min=1),
    help="Fail if more distinct regions than this are seen",
)
@click.option(
    "--show-pressure",
    is_flag=True,
    help="Include average pressure in each region block",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every skipped line")
def main(files, config, timezone, strict, zero_invalid, max_regions, show_pressure, verbose):
    """Summarize climate observations per region.

    Each FILE is a tab-delimited NOAA extract. Files are read in the order
    given and the report is printed to stdout; progress and diagnostics go
    to stderr.

    Examples:
        climatesum data_tn.tdv data_wa.tdv

        climatesum --tz America/Chicago --show-pressure data_tn.tdv
    """
    if verbose:
        logging.getLogger("climatesum").setLevel(logging.DEBUG)

    try:
        cfg = load_config(
            config,
            timezone=timezone,
            missing_files="halt" if strict else None,
            invalid_numbers="zero" if zero_invalid else None,
            max_regions=max_regions,
            show_pressure=True if show_pressure else None,
        )
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    try:
        summary = analyze_files(files, cfg)
    except (FileOpenError, CapacityExceededError) as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    click.echo(render(summary.store, tz=cfg.timezone, show_pressure=cfg.show_pressure), nl=False)

    if not summary.ok:
        logger.warning(
            f"Report is partial: {len(summary.files_failed)} file(s) unreadable, "
            f"{summary.malformed} malformed line(s) skipped"
        )


if __name__ == "__main__":
    main()

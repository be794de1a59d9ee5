"""
Click CLI implementation for the date calculator.

This module provides the ``datecalc`` command, which prints the number of
full days between two dates given as YYYY-MM-DD.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click

from src.constants import USAGE_TEXT

from .calendar_rules import LEAP_YEAR_RULE_CHOICES, parse_leap_year_rule
from .config import DateCalcConfig
from .difference import compute_difference
from .exceptions import ConfigurationError, DateCalcError
from .models import DayDifferenceResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def print_error(message: str) -> None:
    """Print error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def print_warning(message: str) -> None:
    """Print warning message to stderr."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def print_result(result: DayDifferenceResult, as_json: bool = False) -> None:
    """Print a day difference as a text line or a JSON object."""
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(result.format_line())


def load_cli_config(config_file: Optional[str], verbose: bool) -> DateCalcConfig:
    """
    Load configuration for a CLI run.

    An explicit config file must load cleanly; problems with the default
    file fall back to built-in defaults.

    Raises:
        ConfigurationError: If an explicit config file is invalid
    """
    if config_file:
        return DateCalcConfig.load_from_file(Path(config_file))

    try:
        return DateCalcConfig.load_from_file()
    except ConfigurationError as e:
        env_rule = os.getenv("DATECALC_LEAP_RULE")
        if env_rule is not None and env_rule.strip().lower() not in LEAP_YEAR_RULE_CHOICES:
            print_warning(f"Ignoring invalid DATECALC_LEAP_RULE '{env_rule}'")
            click.echo("  Using default configuration", err=True)
        elif verbose:
            print_warning(f"Could not load config file: {e}")
            click.echo("  Using default configuration", err=True)
        return DateCalcConfig()


@click.command()
@click.argument("dates", nargs=-1, metavar="FROMDATE TILLDATE")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject invalid calendar dates and reversed date order",
)
@click.option(
    "--leap-rule",
    type=click.Choice(LEAP_YEAR_RULE_CHOICES, case_sensitive=False),
    help="Leap year rule (default: gregorian)",
)
@click.option("--json", "output_json", is_flag=True, help="JSON output")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file",
)
def cli(
    dates: tuple[str, ...],
    strict: Optional[bool],
    leap_rule: Optional[str],
    output_json: bool,
    verbose: bool,
    config_file: Optional[str],
) -> None:
    """
    Compute the number of full days between two dates.

    Dates are given as YYYY-MM-DD and are clamped into the range
    1901-01-01 to 2999-12-31.

    \b
    Examples:
      datecalc 1983-06-02 1983-06-22        # 19 days
      datecalc 1983-06-02 1983-06-03        # 0 days
      datecalc --leap-rule legacy 1901-01-01 2999-12-31
    """
    if len(dates) < 2:
        click.echo(USAGE_TEXT)
        return

    try:
        config = load_cli_config(config_file, verbose)
    except ConfigurationError as e:
        print_error(str(e))
        sys.exit(1)

    # Apply command-line overrides
    if strict is not None:
        config.strict = strict
    if leap_rule:
        config.leap_year_rule = parse_leap_year_rule(leap_rule)
    if verbose:
        config.verbose = True
    if output_json:
        config.json_output = True

    if config.verbose:
        logging.getLogger().setLevel(logging.INFO)

    from_text, till_text = dates[0], dates[1]
    if len(dates) > 2:
        logger.info(f"Ignoring extra arguments: {' '.join(dates[2:])}")

    try:
        result = compute_difference(
            from_text,
            till_text,
            rule=config.leap_year_rule,
            strict=config.strict,
        )
    except DateCalcError as e:
        print_error(str(e))
        sys.exit(1)

    logger.info(
        f"Computed {result.days} full days between {result.from_date} and "
        f"{result.till_date} using the {config.leap_year_rule.value} leap year rule"
    )
    print_result(result, as_json=config.json_output)


def main() -> None:
    """Main entry point for the CLI."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    cli()


__all__ = ["cli", "main"]

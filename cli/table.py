"""
Table Subcommand Module

Runs the pass-through check over the range table number = 0..size-1.
Every entry is checked; all failures are reported.
"""

import logging
import sys
from typing import Optional

import click

from propcheck.scenario import run_table_suite

from .shared_options import (
    config_option,
    expect_failures_option,
    failure_rule_option,
    load_runner_config,
    log_file_option,
    log_level_option,
    report_option,
    write_report,
)


logger = logging.getLogger(__name__)


@click.command(name="table", help="Check the pass-through property over a fixed range table")
@click.option(
    "--size",
    type=click.IntRange(min=0),
    default=None,
    help="Number of table entries (overrides config)",
)
@click.option(
    "--workers", "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Thread pool size (overrides config)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="List passing entries as well as failures",
)
@failure_rule_option()
@expect_failures_option()
@config_option()
@report_option()
@log_level_option()
@log_file_option()
def table_command(
    size: Optional[int],
    workers: Optional[int],
    verbose: bool,
    failure_rule: Optional[bool],
    expect_failures: bool,
    config_file: Optional[str],
    report_path: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Check the pass-through property over a fixed range table.

    Examples:
        # Default table of 1000 entries
        propcheck table

        # Show the failure rule tripping on entry 666
        propcheck table --failure-rule

        # Treat the failure rule's failures as expected
        propcheck table --failure-rule --expect-failures
    """
    config = load_runner_config(config_file, {
        "table_size": size,
        "workers": workers,
        "log_level": log_level.lower() if log_level else None,
        "log_file": log_file,
        "mock": {"failure_rule": failure_rule},
    })

    click.echo(f"Checking {config.table_size} table entries...")

    report = run_table_suite(config, expect_configured_failures=expect_failures)

    click.echo(report.format_human(quiet_on_success=config.quiet_on_success and not verbose))

    if report_path:
        write_report(report_path, report.to_dict())
        click.echo(f"\nReport saved: {report_path}")

    if not report.passed:
        sys.exit(1)

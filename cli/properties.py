"""
Property Subcommand Module

Runs the pass-through property over randomly generated inputs. The run
stops at the first failing input and reports it together with the seed
needed to reproduce it.
"""

import logging
import sys
from typing import Optional

import click

from propcheck.errors import UnregisteredTypeError
from propcheck.scenario import run_property_suite

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


@click.command(name="property", help="Check the pass-through property over random inputs")
@click.option(
    "--iterations", "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Number of random inputs to check (overrides config)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for the random source (overrides config)",
)
@failure_rule_option()
@expect_failures_option()
@config_option()
@report_option()
@log_level_option()
@log_file_option()
def property_command(
    iterations: Optional[int],
    seed: Optional[int],
    failure_rule: Optional[bool],
    expect_failures: bool,
    config_file: Optional[str],
    report_path: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Check the pass-through property over random inputs.

    Examples:
        # Smoke run
        propcheck property --iterations 1

        # Reproduce a failing run
        propcheck property --seed 1234 --failure-rule

        # Write a JSON report
        propcheck property -n 10000 --report property.json
    """
    config = load_runner_config(config_file, {
        "iterations": iterations,
        "seed": seed,
        "log_level": log_level.lower() if log_level else None,
        "log_file": log_file,
        "mock": {"failure_rule": failure_rule},
    })

    try:
        report = run_property_suite(config, expect_configured_failures=expect_failures)
    except UnregisteredTypeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not (report.passed and config.quiet_on_success):
        click.echo(report.format_human())

    if report_path:
        write_report(report_path, report.to_dict())
        click.echo(f"Report saved: {report_path}")

    if not report.passed:
        sys.exit(1)

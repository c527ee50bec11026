"""
Shared CLI Option Decorators

This module provides reusable Click decorators for options common to the
property and table subcommands, plus the helpers that turn those options
into a RunnerConfig.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from propcheck.config.manager import ConfigurationManager
from propcheck.config.schema import RunnerConfig
from propcheck.errors import ConfigurationError
from propcheck.utils.logging_config import logging_config


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            'config_file',
            default=None,
            type=click.Path(),
            help=help or 'Path to configuration file'
        )(f)
    return decorator


def failure_rule_option(help=None):
    """Decorator toggling the mock failure rule."""
    def decorator(f):
        return click.option(
            '--failure-rule/--no-failure-rule',
            default=None,
            help=help or 'Make the mock fail when number equals the failure trigger'
        )(f)
    return decorator


def expect_failures_option(help=None):
    """Decorator marking failure-rule inputs as expected failures."""
    def decorator(f):
        return click.option(
            '--expect-failures',
            is_flag=True,
            help=help or 'Count failures caused by the failure rule as expected'
        )(f)
    return decorator


def report_option(help=None):
    """Decorator for JSON report output."""
    def decorator(f):
        return click.option(
            '--report', '-r',
            'report_path',
            default=None,
            type=click.Path(),
            help=help or 'Write a JSON report to this path'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level (overrides config)'
        )(f)
    return decorator


def log_file_option(help=None):
    """Decorator for log file options."""
    def decorator(f):
        return click.option(
            '--log-file',
            default=None,
            type=click.Path(),
            help=help or 'Also write logs to this file'
        )(f)
    return decorator


def load_runner_config(config_file: Optional[str], overrides: Dict[str, Any]) -> RunnerConfig:
    """Load the layered configuration and configure logging from it.

    Exits with status 1 on configuration errors.
    """
    try:
        config = ConfigurationManager().load_configuration(
            config_file=config_file, cli_overrides=overrides
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging_config.reset()
    logging_config.configure_logging(level=config.log_level, log_file=config.log_file)
    logging_config.log_configuration_details({
        'iterations': config.iterations,
        'seed': config.seed,
        'table_size': config.table_size,
        'workers': config.workers,
        'failure_rule': config.mock.failure_rule,
        'failure_trigger': config.mock.failure_trigger,
    })
    return config


def write_report(path: str, data: dict):
    """Write a JSON report to disk."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

"""
Config Subcommand Module

Shows the effective configuration, lists the environment variables it
reads and writes configuration templates.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import click

from propcheck.config.environment import EnvironmentVariables
from propcheck.config.manager import ConfigurationManager
from propcheck.errors import ConfigurationError


@click.group(name="config", help="Inspect and initialize propcheck configuration")
def config_group():
    """Inspect and initialize propcheck configuration."""
    pass


@config_group.command(name="show", help="Print the effective configuration as YAML")
@click.option("--config", "config_file", type=click.Path(), default=None,
              help="Path to configuration file")
def show(config_file: Optional[str]):
    """Print the effective configuration after all layers are merged."""
    manager = ConfigurationManager()
    try:
        config = manager.load_configuration(config_file=config_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(manager.yaml_parser.serialize_to_yaml(config))


@config_group.command(name="init", help="Write a commented configuration template")
@click.option("--output", "-o", type=click.Path(), default=".propcheck/config.yaml",
              help="Where to write the template (default: .propcheck/config.yaml)")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(output: str, force: bool):
    """Write a commented configuration template with default values."""
    if Path(output).exists() and not force:
        click.echo(f"Error: {output} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    ConfigurationManager().save_configuration(None, output)
    click.echo(f"Configuration template written: {output}")


@config_group.command(name="env", help="List the PROPCHECK_* environment variables")
def env():
    """List supported environment variables, their purpose and current values."""
    for name, description in EnvironmentVariables.get_variable_documentation().items():
        value = os.environ.get(name)
        current = f" (set: {value})" if value is not None else ""
        click.echo(f"{name}{current}")
        click.echo(f"    {description}")

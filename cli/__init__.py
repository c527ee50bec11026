"""
CLI Package for propcheck

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import os
import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from propcheck import __version__
from .properties import property_command
from .table import table_command
from .config import config_group


@click.group()
@click.version_option(version=__version__, prog_name='propcheck')
def main():
    """propcheck CLI - Run property-based and table-driven checks of the demo app.

    Property runs draw random inputs and stop at the first failing one;
    table runs check every entry of a fixed range table and report all
    failures. The exit code is 0 when the run passes and 1 otherwise.
    """
    pass


# Register subcommands
main.add_command(property_command)
main.add_command(table_command)
main.add_command(config_group)


# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()

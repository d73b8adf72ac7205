"""
ConfigGuard CLI - Main entry point
"""
import click

from configguard import __version__
from configguard.cli.scan import scan


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    ConfigGuard - Hardcoded secret detection for Elixir configuration

    Finds secrets written as literals in config/*.exs files and reports
    the exact line of each literal.

        configguard scan path/to/app
        configguard scan path/to/app --format json --out findings.json
    """


cli.add_command(scan)


if __name__ == '__main__':
    cli()

#!/usr/bin/env python3
"""
Sifbox CLI
A Python CLI tool for bootstrapping local sifnoded test networks.
"""

import click

from sifbox import __version__
from sifbox.commands.network import network
from sifbox.commands.relayer import relayer


@click.group()
@click.version_option(version=__version__)
def cli():
    """Sifbox CLI - Bootstrap local sifnoded networks and their relayer."""
    pass


cli.add_command(network)
cli.add_command(relayer)


def main():
    """Main entry point for the sifbox CLI."""
    cli()


if __name__ == "__main__":
    main()

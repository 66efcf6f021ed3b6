"""
Network command - CLI interface for bootstrapping a local sifnoded network.

This module provides the network command group with two subcommands:
1. run - Generate, bootstrap and start a local network
2. create-sample - Create a sample bootstrap configuration file
"""

import sys

import click
from rich.markup import escape

from sifbox.commands.errors import SifboxError
from sifbox.commands.network.config import (
    create_sample_config,
    resolve_bootstrap_arguments,
)
from sifbox.commands.network.run import run_network_sync
from sifbox.commands.utils import console, setup_logging, shell_exit_code


@click.group()
def network():
    """
    Bootstrap a disposable local sifnoded network for integration tests.

    • run: Generate the network, prepare genesis and start sifnoded
    • create-sample: Generate a sample configuration file
    """
    pass


@network.command()
@click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False), required=False
)
@click.option("--chain-id", help="Chain ID of the generated network")
@click.option("--validators", "n_validators", type=int, help="Number of validators to generate")
@click.option("--network-dir", type=click.Path(), help="Directory sifgen writes the network into")
@click.option("--seed-ip", "seed_ip_address", help="IP address of the seed node")
@click.option(
    "--network-config-file",
    type=click.Path(),
    help="File sifgen writes the validator topology to",
)
@click.option(
    "--whitelist-file",
    type=click.Path(),
    help="Denom whitelist JSON loaded into genesis",
)
@click.option("--go-bin", type=click.Path(), help="Directory holding sifgen and sifnoded")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def run(
    config_file,
    chain_id,
    n_validators,
    network_dir,
    seed_ip_address,
    network_config_file,
    whitelist_file,
    go_bin,
    verbose,
):
    """
    Bootstrap a fresh local network and keep sifnoded running.

    This command will:
    1. Generate the network topology with sifgen
    2. Import the primary validator key and register it in genesis
    3. Create and fund the admin account and grant it its roles
    4. Load the denom whitelist
    5. Start sifnoded attached to this terminal

    The network directory and the test keyring must be fresh; re-running
    against a used keyring fails at the key import. Exits with the status
    sifnoded exits with.
    """
    setup_logging(verbose)
    try:
        args = resolve_bootstrap_arguments(
            config_file,
            {
                "chain_id": chain_id,
                "n_validators": n_validators,
                "network_dir": network_dir,
                "seed_ip_address": seed_ip_address,
                "network_config_file": network_config_file,
                "whitelist_file": whitelist_file,
            },
        )
        exit_code = run_network_sync(args, go_bin=go_bin)
    except SifboxError as e:
        console.print(f"[red]✗ Network bootstrap failed: {escape(str(e))}[/red]")
        sys.exit(1)
    sys.exit(shell_exit_code(exit_code))


@network.command()
@click.argument("output", type=click.Path(), default="sifbox-network.yml")
def create_sample(output):
    """
    Create a sample bootstrap configuration file.

    The file lists every setting with its default value and can be passed
    to `network run` and `relayer init`.
    """
    create_sample_config(output)

"""
Network run pipeline.

This module wires the bootstrap pieces together:
- Generating the network topology with sifgen
- Bootstrapping the primary validator's keyring and genesis
- Starting sifnoded and waiting for it to exit
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from rich.table import Table

from sifbox.commands.binaries import BinaryLocator
from sifbox.commands.command_runner import CommandRunner, SupervisedProcess
from sifbox.commands.constants import NODE_RPC_LADDR
from sifbox.commands.network.generator import NetworkConfigGenerator
from sifbox.commands.network.models import BootstrapArguments, BootstrapResult
from sifbox.commands.network.sequencer import ValidatorBootstrapSequencer
from sifbox.commands.network.supervisor import NodeProcessSupervisor
from sifbox.commands.utils import console


@dataclass
class NetworkRun:
    """A bootstrapped network and the daemon keeping it alive."""

    bootstrap: BootstrapResult
    node: SupervisedProcess


def print_summary(args: BootstrapArguments, result: BootstrapResult) -> None:
    table = Table(title="Local network", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Chain ID", str(args.chain_id))
    table.add_row("Validator", result.identity.moniker)
    table.add_row("Home", str(result.identity.node_home))
    table.add_row("Operator", result.operator_address)
    table.add_row("Admin", result.admin.address)
    table.add_row("RPC", NODE_RPC_LADDR)
    console.print(table)


async def run_network(
    args: BootstrapArguments,
    locator: BinaryLocator,
    runner: Optional[CommandRunner] = None,
) -> NetworkRun:
    """
    Bootstrap a fresh local network and start its node.

    Each stage needs the previous one's output, so they run one after the
    other; the first failure propagates and nothing is cleaned up.

    Args:
        args: Bootstrap settings
        locator: Resolves the sifgen and sifnoded binaries
        runner: Command runner, a fresh CommandRunner if None

    Returns:
        NetworkRun whose node completion resolves when sifnoded exits
    """
    runner = runner or CommandRunner()

    generator = NetworkConfigGenerator(locator.sifgen, runner)
    records = await generator.generate(
        args.require("chain_id"),
        args.require("n_validators"),
        args.require("network_dir"),
        args.require("seed_ip_address"),
        args.require("network_config_file"),
    )

    sifnoded = locator.sifnoded
    sequencer = ValidatorBootstrapSequencer(sifnoded, runner)
    result = await sequencer.bootstrap(
        records,
        args.require("network_dir"),
        args.require("chain_id"),
        args.require("whitelist_file"),
    )
    print_summary(args, result)

    node = await NodeProcessSupervisor(sifnoded, runner).start(
        result.identity.node_home
    )
    return NetworkRun(bootstrap=result, node=node)


async def run_network_until_exit(
    args: BootstrapArguments,
    locator: BinaryLocator,
    runner: Optional[CommandRunner] = None,
) -> int:
    """Bootstrap the network and wait for sifnoded to exit."""
    network = await run_network(args, locator, runner)
    try:
        exit_code = await network.node.wait()
    finally:
        if network.node.running:
            await network.node.stop()

    style = "green" if exit_code == 0 else "red"
    console.print(f"[{style}]sifnoded exited with status {exit_code}[/{style}]")
    return exit_code


def run_network_sync(
    args: BootstrapArguments, go_bin: Optional[str] = None
) -> int:
    """
    Synchronous wrapper for a network run.

    Returns:
        The exit code of sifnoded
    """
    return asyncio.run(run_network_until_exit(args, BinaryLocator(go_bin)))

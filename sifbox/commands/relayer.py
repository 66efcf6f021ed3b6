"""
Relayer Bootstrap - runs `ebrelayer init` against a running node.
"""

import asyncio
import dataclasses
import sys
from typing import Optional

import click
from rich.markup import escape

from sifbox.commands.binaries import BinaryLocator
from sifbox.commands.command_runner import CommandRunner, SupervisedProcess
from sifbox.commands.constants import KEYRING_BACKEND
from sifbox.commands.errors import ConfigurationError, SifboxError
from sifbox.commands.network.config import resolve_bootstrap_arguments
from sifbox.commands.network.models import BootstrapArguments, ValidatorRecord
from sifbox.commands.utils import console, setup_logging, shell_exit_code


class RelayerBootstrap:
    """Builds and launches the relayer's init command."""

    def __init__(
        self,
        args: BootstrapArguments,
        ebrelayer: str,
        runner: Optional[CommandRunner] = None,
    ):
        self.args = args
        self.ebrelayer = ebrelayer
        self.runner = runner or CommandRunner()

    def cmd(self) -> tuple[str, list[str]]:
        validator = self.args.require("validator_values")
        tcp_url = self.args.require("tcp_url")
        return self.ebrelayer, [
            "init",
            tcp_url,
            self.args.require("websocket_address"),
            validator.moniker,
            validator.mnemonic,
            "--chain-id",
            str(self.args.require("chain_net")),
            "--node",
            tcp_url,
            "--keyring-backend",
            KEYRING_BACKEND,
            "--from",
            validator.moniker,
            "--symbol-translator-file",
            self.args.require("symbol_translator_file"),
            "--relayerdb-path",
            self.args.require("relayer_db_path"),
        ]

    async def run(self) -> SupervisedProcess:
        program, args = self.cmd()
        console.print(
            f"[cyan]Starting ebrelayer for {self.args.validator_values.moniker} against {self.args.tcp_url}...[/cyan]"
        )
        process = await self.runner.supervise(program, args)
        console.print(f"[green]✓ ebrelayer started (PID: {process.pid})[/green]")
        return process


async def run_relayer_until_exit(relayer: RelayerBootstrap) -> int:
    process = await relayer.run()
    try:
        return await process.wait()
    finally:
        if process.running:
            await process.stop()


@click.group()
def relayer():
    """Initialize and run the ebrelayer against a local node."""
    pass


@relayer.command()
@click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False), required=False
)
@click.option("--moniker", help="Validator moniker the relayer signs as")
@click.option("--mnemonic", help="Mnemonic of the relaying validator")
@click.option("--tcp-url", help="Tendermint RPC URL of the node")
@click.option("--websocket-address", help="Web3 websocket provider address")
@click.option("--chain-net", type=int, help="Network descriptor passed as --chain-id")
@click.option("--symbol-translator-file", type=click.Path(), help="Symbol translator JSON file")
@click.option("--relayer-db-path", type=click.Path(), help="Relayer database directory")
@click.option("--go-bin", type=click.Path(), help="Directory holding the ebrelayer binary")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def init(
    config_file,
    moniker,
    mnemonic,
    tcp_url,
    websocket_address,
    chain_net,
    symbol_translator_file,
    relayer_db_path,
    go_bin,
    verbose,
):
    """
    Run `ebrelayer init` attached to this terminal.

    Settings come from CONFIG_FILE (see `sifbox network create-sample`),
    with command-line options taking precedence. Exits with the relayer's
    exit status.
    """
    setup_logging(verbose)
    try:
        args = resolve_bootstrap_arguments(
            config_file,
            {
                "tcp_url": tcp_url,
                "websocket_address": websocket_address,
                "chain_net": chain_net,
                "symbol_translator_file": symbol_translator_file,
                "relayer_db_path": relayer_db_path,
            },
        )
        if moniker or mnemonic:
            current = args.validator_values
            moniker = moniker or (current.moniker if current else None)
            mnemonic = mnemonic or (current.mnemonic if current else None)
            if not (moniker and mnemonic):
                raise ConfigurationError(
                    "--moniker and --mnemonic must be given together",
                    field="validator_values",
                )
            args = dataclasses.replace(
                args,
                validator_values=ValidatorRecord(
                    moniker=moniker,
                    mnemonic=mnemonic,
                    password=current.password if current else "",
                ),
            )
        bootstrap = RelayerBootstrap(args, BinaryLocator(go_bin).ebrelayer)
        exit_code = asyncio.run(run_relayer_until_exit(bootstrap))
    except SifboxError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)
    sys.exit(shell_exit_code(exit_code))

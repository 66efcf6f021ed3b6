"""
Node Process Supervisor - runs `sifnoded start` attached to the terminal.
"""

from pathlib import Path
from typing import Union

from sifbox.commands.command_runner import CommandRunner, SupervisedProcess
from sifbox.commands.constants import MINIMUM_GAS_PRICES, NODE_RPC_LADDR
from sifbox.commands.utils import console


class NodeProcessSupervisor:
    """Starts the node daemon; the network lives until its completion resolves."""

    def __init__(self, sifnoded: str, runner: CommandRunner):
        self.sifnoded = sifnoded
        self.runner = runner

    def cmd(self, node_home: Union[str, Path]) -> list[str]:
        return [
            "start",
            "--minimum-gas-prices",
            MINIMUM_GAS_PRICES,
            "--rpc.laddr",
            NODE_RPC_LADDR,
            "--home",
            str(node_home),
        ]

    async def start(self, node_home: Union[str, Path]) -> SupervisedProcess:
        console.print(f"[cyan]Starting sifnoded (home {node_home})...[/cyan]")
        process = await self.runner.supervise(self.sifnoded, self.cmd(node_home))
        console.print(
            f"[green]✓ sifnoded started (PID: {process.pid}), RPC on {NODE_RPC_LADDR}[/green]"
        )
        return process

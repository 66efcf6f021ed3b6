import sys

import pytest
from conftest import FakeRunner

from sifbox.commands.command_runner import CommandRunner
from sifbox.commands.network.supervisor import NodeProcessSupervisor


@pytest.mark.asyncio
async def test_start_binds_rpc_and_home():
    runner = FakeRunner()

    process = await NodeProcessSupervisor("/go/bin/sifnoded", runner).start(
        "/tmp/net/validators/localnet/val0/.sifnoded"
    )

    assert process.program == "/go/bin/sifnoded"
    assert process.args == [
        "start",
        "--minimum-gas-prices",
        "0.5rowan",
        "--rpc.laddr",
        "tcp://0.0.0.0:26657",
        "--home",
        "/tmp/net/validators/localnet/val0/.sifnoded",
    ]
    assert runner.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("exit_code", [0, 9])
async def test_completion_reports_real_exit_code(exit_code):
    """A stand-in daemon that ignores its arguments and exits with exit_code."""

    class ExitingSupervisor(NodeProcessSupervisor):
        def cmd(self, node_home):
            return ["-c", f"import sys; sys.exit({exit_code})"]

    process = await ExitingSupervisor(sys.executable, CommandRunner()).start("/unused")

    assert await process.wait() == exit_code

"""
End-to-end tests of the network run pipeline against fake binaries.
"""

from unittest.mock import MagicMock

import pytest
from conftest import ADMIN_ADDRESS, OPERATOR_ADDRESS, FakeRunner

from sifbox.commands.errors import (
    ConfigGenerationFailed,
    ConfigParseFailed,
    ConfigurationError,
)
from sifbox.commands.network.config import build_bootstrap_arguments
from sifbox.commands.network.run import run_network, run_network_until_exit


@pytest.fixture
def locator():
    locator = MagicMock()
    locator.sifgen = "/go/bin/sifgen"
    locator.sifnoded = "/go/bin/sifnoded"
    return locator


@pytest.mark.asyncio
async def test_localnet_scenario(bootstrap_settings, locator, fake_runner):
    args = build_bootstrap_arguments(bootstrap_settings)
    home = f"{bootstrap_settings['network_dir']}/validators/localnet/val0/.sifnoded"

    network = await run_network(args, locator, fake_runner)

    programs = [program for program, _, _ in fake_runner.calls]
    assert programs == ["/go/bin/sifgen"] + ["/go/bin/sifnoded"] * 8

    calls = fake_runner.calls
    assert calls[1][1][2] == "val0" and calls[1][2] == "m0"
    assert calls[2][1][5] == "val0"
    assert calls[3][1] == ["add-genesis-validators", OPERATOR_ADDRESS, "--home", home]
    for _, args_, _ in calls[5:8]:
        assert args_[1] == ADMIN_ADDRESS
        assert args_[-2:] == ["--home", home]
    assert calls[8][1][1] == bootstrap_settings["whitelist_file"]

    assert len(fake_runner.supervised) == 1
    daemon = fake_runner.supervised[0]
    assert daemon is network.node
    assert daemon.program == "/go/bin/sifnoded"
    assert daemon.args == [
        "start",
        "--minimum-gas-prices",
        "0.5rowan",
        "--rpc.laddr",
        "tcp://0.0.0.0:26657",
        "--home",
        home,
    ]
    assert network.bootstrap.admin.address == ADMIN_ADDRESS


@pytest.mark.asyncio
async def test_generator_failure_runs_nothing_else(bootstrap_settings, locator):
    runner = FakeRunner(fail_on="network create")
    args = build_bootstrap_arguments(bootstrap_settings)

    with pytest.raises(ConfigGenerationFailed):
        await run_network(args, locator, runner)

    assert runner.commands == ["network create"]
    assert runner.supervised == []


@pytest.mark.asyncio
async def test_empty_topology_fails_before_keyring(bootstrap_settings, locator):
    runner = FakeRunner(validators=[])
    args = build_bootstrap_arguments(bootstrap_settings)

    with pytest.raises(ConfigParseFailed):
        await run_network(args, locator, runner)

    assert runner.commands == ["network create"]


@pytest.mark.asyncio
async def test_missing_setting_is_reported_when_needed(bootstrap_settings, locator):
    bootstrap_settings["whitelist_file"] = ""
    runner = FakeRunner()
    args = build_bootstrap_arguments(bootstrap_settings)

    with pytest.raises(ConfigurationError) as excinfo:
        await run_network(args, locator, runner)

    assert excinfo.value.field == "whitelist_file"
    assert runner.commands == ["network create"]


@pytest.mark.asyncio
@pytest.mark.parametrize("exit_code", [0, 1])
async def test_until_exit_returns_daemon_exit_code(
    bootstrap_settings, locator, exit_code
):
    runner = FakeRunner(daemon_exit_code=exit_code)
    args = build_bootstrap_arguments(bootstrap_settings)

    assert await run_network_until_exit(args, locator, runner) == exit_code
    assert runner.supervised[0].stopped is False

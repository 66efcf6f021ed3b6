"""Pytest configuration for sifbox tests.

Provides a recording stand-in for CommandRunner that behaves like
well-formed sifgen/sifnoded/ebrelayer binaries.
"""

import json
from pathlib import Path
from typing import Optional

import pytest
import yaml

from sifbox.commands.errors import ExternalCommandFailed

OPERATOR_ADDRESS = "sifvaloper1qx7d5mfs0uy0cpxkyppvnxp5vqkyjvaz8tgqfw"
ADMIN_ADDRESS = "sif1admin9w2nzlc4d7yv8s0jkmj3qm5q6t2cx0qvhm"


class FakeProcess:
    """Stands in for SupervisedProcess."""

    def __init__(self, program, args, exit_code=0, pid=4242):
        self.program = program
        self.args = list(args)
        self.exit_code = exit_code
        self.pid = pid
        self.running = True
        self.stopped = False

    async def wait(self):
        self.running = False
        return self.exit_code

    async def stop(self, timeout=None):
        self.stopped = True
        self.running = False
        return self.exit_code


class FakeRunner:
    """Records every invocation and answers like the real binaries.

    The keyring is modelled so a second import of the same moniker fails.
    """

    def __init__(
        self,
        validators: Optional[list[dict]] = None,
        fail_on: Optional[str] = None,
        daemon_exit_code: int = 0,
    ):
        self.validators = (
            validators
            if validators is not None
            else [{"moniker": "val0", "mnemonic": "m0", "password": "p0"}]
        )
        self.fail_on = fail_on
        self.daemon_exit_code = daemon_exit_code
        self.keyring: set[str] = set()
        self.calls: list[tuple[str, list[str], Optional[str]]] = []
        self.supervised: list[FakeProcess] = []

    @property
    def commands(self) -> list[str]:
        """The subcommand of each call, e.g. 'keys add' or 'set-genesis-oracle-admin'."""
        names = []
        for _, args, _ in self.calls:
            if args[0] in ("keys", "network"):
                names.append(" ".join(args[:2]))
            else:
                names.append(args[0])
        return names

    async def run(self, program, args, stdin=None):
        args = [str(arg) for arg in args]
        self.calls.append((program, args, stdin))

        if self.fail_on and self.fail_on in " ".join(args):
            raise ExternalCommandFailed(program, args, 1, f"{self.fail_on} failed")

        if args[:2] == ["network", "create"]:
            Path(args[-1]).write_text(yaml.safe_dump(self.validators))
            return ""
        if args[:2] == ["keys", "add"]:
            name = args[2]
            if name in self.keyring:
                raise ExternalCommandFailed(
                    program, args, 1, f"Error: {name} already exists"
                )
            self.keyring.add(name)
            if "--output" in args:
                return json.dumps({"name": name, "address": ADMIN_ADDRESS})
            return ""
        if args[:2] == ["keys", "show"]:
            return OPERATOR_ADDRESS
        return ""

    async def supervise(self, program, args):
        process = FakeProcess(program, args, exit_code=self.daemon_exit_code)
        self.supervised.append(process)
        return process


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def bootstrap_settings(tmp_path):
    """Flat settings for a one-validator network under tmp_path."""
    whitelist = tmp_path / "whitelisted-denoms.json"
    whitelist.write_text("[]")
    return {
        "chain_id": "localnet",
        "n_validators": 1,
        "network_dir": str(tmp_path / "net"),
        "seed_ip_address": "10.10.1.1",
        "network_config_file": str(tmp_path / "network.yml"),
        "whitelist_file": str(whitelist),
    }

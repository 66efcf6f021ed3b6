"""
Validator Bootstrap Sequencer - prepares the primary validator's keyring
and genesis file.

Steps run strictly in order, each awaiting the previous one:

1. import the validator mnemonic into the test keyring
2. read the validator's bech32 operator address
3. register the operator address as a genesis validator
4. create the admin key and read its address
5. fund the admin account in genesis
6. make the admin the oracle admin
7. make the admin the whitelister admin
8. load the denom whitelist into genesis

The keyring and genesis file are shared external state with a single
writer: this sequence. A failing step stops the run and leaves earlier
mutations in place; the network directory is meant to be thrown away.
"""

import logging
from pathlib import Path
from typing import Sequence

from sifbox.commands.command_runner import CommandRunner
from sifbox.commands.constants import (
    ADMIN_GENESIS_BALANCE,
    ADMIN_KEY_NAME,
    ADMIN_KEY_STDIN,
    KEYRING_BACKEND,
)
from sifbox.commands.errors import ConfigParseFailed
from sifbox.commands.network.models import (
    AdminAccount,
    BootstrapResult,
    ValidatorIdentity,
    ValidatorRecord,
)
from sifbox.commands.network.parsing import extract_address, extract_operator_address
from sifbox.commands.utils import console

logger = logging.getLogger(__name__)


class ValidatorBootstrapSequencer:
    """Drives sifnoded keys and genesis subcommands for one validator."""

    def __init__(self, sifnoded: str, runner: CommandRunner):
        self.sifnoded = sifnoded
        self.runner = runner

    async def _sifnoded(self, args: Sequence[str], stdin=None) -> str:
        return await self.runner.run(self.sifnoded, list(args), stdin=stdin)

    async def import_key(self, identity: ValidatorIdentity) -> None:
        """Recover the validator key from its mnemonic.

        Fails if the keyring already holds the moniker.
        """
        await self._sifnoded(
            [
                "keys",
                "add",
                identity.moniker,
                "--recover",
                "--keyring-backend",
                KEYRING_BACKEND,
            ],
            stdin=identity.mnemonic,
        )

    async def read_operator_key(self, identity: ValidatorIdentity) -> str:
        output = await self._sifnoded(
            [
                "keys",
                "show",
                "-a",
                "--bech",
                "val",
                identity.moniker,
                "--keyring-backend",
                KEYRING_BACKEND,
            ]
        )
        return extract_operator_address(output)

    async def register_genesis_validator(
        self, identity: ValidatorIdentity, operator_address: str
    ) -> None:
        await self._sifnoded(
            [
                "add-genesis-validators",
                operator_address,
                "--home",
                str(identity.node_home),
            ]
        )

    async def create_admin_account(self) -> AdminAccount:
        output = await self._sifnoded(
            [
                "keys",
                "add",
                ADMIN_KEY_NAME,
                "--keyring-backend",
                KEYRING_BACKEND,
                "--output",
                "json",
            ],
            stdin=ADMIN_KEY_STDIN,
        )
        return AdminAccount(address=extract_address(output))

    async def fund_admin_account(
        self, identity: ValidatorIdentity, admin: AdminAccount
    ) -> None:
        await self._sifnoded(
            [
                "add-genesis-account",
                admin.address,
                ADMIN_GENESIS_BALANCE,
                "--home",
                str(identity.node_home),
            ]
        )

    async def set_oracle_admin(
        self, identity: ValidatorIdentity, admin: AdminAccount
    ) -> None:
        await self._sifnoded(
            [
                "set-genesis-oracle-admin",
                admin.address,
                "--home",
                str(identity.node_home),
            ]
        )

    async def set_whitelister_admin(
        self, identity: ValidatorIdentity, admin: AdminAccount
    ) -> None:
        await self._sifnoded(
            [
                "set-genesis-whitelister-admin",
                admin.address,
                "--home",
                str(identity.node_home),
            ]
        )

    async def set_denom_whitelist(
        self, identity: ValidatorIdentity, whitelist_file: str
    ) -> None:
        await self._sifnoded(
            [
                "set-gen-denom-whitelist",
                str(whitelist_file),
                "--home",
                str(identity.node_home),
            ]
        )

    async def bootstrap(
        self,
        records: Sequence[ValidatorRecord],
        network_dir: str,
        chain_id: str,
        whitelist_file: str,
    ) -> BootstrapResult:
        """
        Bootstrap the primary validator, records[0]. Other records are
        left for sifgen's own configuration.

        Raises:
            ConfigParseFailed: If records is empty
            ExternalCommandFailed: If any sifnoded invocation fails
            OutputParseFailed: If a command's output lacks an address
        """
        if not records:
            raise ConfigParseFailed("Network config has no validator records")
        if len(records) > 1:
            logger.info(
                "Bootstrapping %s; ignoring %d other validator(s)",
                records[0].moniker,
                len(records) - 1,
            )

        identity = ValidatorIdentity.from_record(records[0], network_dir, chain_id)
        console.print(
            f"[cyan]Bootstrapping validator {identity.moniker} ({identity.node_home})[/cyan]"
        )

        await self.import_key(identity)
        console.print(f"[green]✓ Imported key {identity.moniker}[/green]")

        operator_address = await self.read_operator_key(identity)
        console.print(f"[green]✓ Operator address {operator_address}[/green]")

        await self.register_genesis_validator(identity, operator_address)
        console.print("[green]✓ Registered genesis validator[/green]")

        admin = await self.create_admin_account()
        console.print(f"[green]✓ Created admin account {admin.address}[/green]")

        await self.fund_admin_account(identity, admin)
        await self.set_oracle_admin(identity, admin)
        await self.set_whitelister_admin(identity, admin)
        console.print("[green]✓ Funded admin and granted oracle/whitelister roles[/green]")

        await self.set_denom_whitelist(identity, whitelist_file)
        console.print(
            f"[green]✓ Loaded denom whitelist {Path(whitelist_file).name}[/green]"
        )

        return BootstrapResult(
            identity=identity, operator_address=operator_address, admin=admin
        )

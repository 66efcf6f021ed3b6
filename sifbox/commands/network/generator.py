"""
Network Config Generator Adapter - runs `sifgen network create` and loads
the validator topology it writes.
"""

import logging
from typing import Any

import yaml

from sifbox.commands.command_runner import CommandRunner
from sifbox.commands.constants import (
    FIELD_MNEMONIC,
    FIELD_MONIKER,
    FIELD_PASSWORD,
    KEYRING_BACKEND,
)
from sifbox.commands.errors import (
    ConfigGenerationFailed,
    ConfigParseFailed,
    ExternalCommandFailed,
)
from sifbox.commands.network.models import ValidatorRecord
from sifbox.commands.utils import console

logger = logging.getLogger(__name__)


def _parse_record(index: int, entry: Any, config_file: str) -> ValidatorRecord:
    if not isinstance(entry, dict):
        raise ConfigParseFailed(
            f"Validator record {index} is not a mapping", config_file=config_file
        )
    for field in (FIELD_MONIKER, FIELD_MNEMONIC):
        if not entry.get(field):
            raise ConfigParseFailed(
                f"Validator record {index} has no {field}",
                config_file=config_file,
                details={"field": field, "index": index},
            )
    password = entry.get(FIELD_PASSWORD)
    return ValidatorRecord(
        moniker=str(entry[FIELD_MONIKER]),
        mnemonic=str(entry[FIELD_MNEMONIC]),
        password="" if password is None else str(password),
    )


def load_network_config(config_file: str) -> list[ValidatorRecord]:
    """
    Parse a generated topology file into validator records.

    Raises:
        ConfigParseFailed: If the file is missing, malformed, or empty
    """
    try:
        with open(config_file, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseFailed(
            f"Cannot read network config: {e}", config_file=config_file
        ) from e
    except yaml.YAMLError as e:
        raise ConfigParseFailed(
            f"Invalid YAML format: {e}", config_file=config_file
        ) from e

    if not isinstance(document, list):
        raise ConfigParseFailed(
            "Network config must be a list of validator records",
            config_file=config_file,
        )
    if not document:
        raise ConfigParseFailed(
            "Network config has no validator records", config_file=config_file
        )
    return [
        _parse_record(index, entry, config_file) for index, entry in enumerate(document)
    ]


class NetworkConfigGenerator:
    """Asks sifgen for a topology; never invents validators itself."""

    def __init__(self, sifgen: str, runner: CommandRunner):
        self.sifgen = sifgen
        self.runner = runner

    def cmd(
        self,
        chain_id: str,
        n_validators: int,
        network_dir: str,
        seed_ip_address: str,
        network_config_file: str,
    ) -> list[str]:
        return [
            "network",
            "create",
            "--keyring-backend",
            KEYRING_BACKEND,
            chain_id,
            str(n_validators),
            str(network_dir),
            seed_ip_address,
            str(network_config_file),
        ]

    async def generate(
        self,
        chain_id: str,
        n_validators: int,
        network_dir: str,
        seed_ip_address: str,
        network_config_file: str,
    ) -> list[ValidatorRecord]:
        """
        Create the network tree and return its validator records.

        Raises:
            ConfigGenerationFailed: If sifgen exits non-zero
            ConfigParseFailed: If the written topology file is unusable
        """
        args = self.cmd(
            chain_id, n_validators, network_dir, seed_ip_address, network_config_file
        )
        console.print(
            f"[cyan]Generating {n_validators}-validator network {chain_id} in {network_dir}...[/cyan]"
        )
        try:
            await self.runner.run(self.sifgen, args)
        except ConfigGenerationFailed:
            raise
        except ExternalCommandFailed as e:
            raise ConfigGenerationFailed(
                e.program, e.command_args, e.exit_code, e.stderr
            ) from e

        records = load_network_config(network_config_file)
        logger.debug(
            "Loaded %d validator record(s): %s",
            len(records),
            ", ".join(record.moniker for record in records),
        )
        console.print(
            f"[green]✓ Network config generated ({len(records)} validator(s))[/green]"
        )
        return records

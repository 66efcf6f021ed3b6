"""
Records threaded through a network bootstrap run.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from sifbox.commands.constants import (
    DEFAULT_CHAIN_ID,
    DEFAULT_CHAIN_NET,
    DEFAULT_N_VALIDATORS,
    DEFAULT_NETWORK_CONFIG_FILE,
    DEFAULT_NETWORK_DIR,
    DEFAULT_RELAYER_DB_PATH,
    DEFAULT_SEED_IP_ADDRESS,
    DEFAULT_TCP_URL,
    DEFAULT_WEBSOCKET_ADDRESS,
    DEFAULT_WHITELIST_FILE,
    NODE_HOME_DIRNAME,
    VALIDATORS_DIRNAME,
)
from sifbox.commands.errors import ConfigurationError


@dataclass(frozen=True)
class ValidatorRecord:
    """One validator entry of the generated network topology."""

    moniker: str
    mnemonic: str
    password: str = ""


@dataclass(frozen=True)
class ValidatorIdentity:
    """A topology record bound to its directory in the network tree."""

    moniker: str
    mnemonic: str
    password: str
    chain_home_dir: Path

    @classmethod
    def from_record(
        cls, record: ValidatorRecord, network_dir: str, chain_id: str
    ) -> "ValidatorIdentity":
        chain_home_dir = Path(network_dir) / VALIDATORS_DIRNAME / chain_id / record.moniker
        return cls(
            moniker=record.moniker,
            mnemonic=record.mnemonic,
            password=record.password,
            chain_home_dir=chain_home_dir,
        )

    @property
    def node_home(self) -> Path:
        """The --home directory holding this validator's genesis file."""
        return self.chain_home_dir / NODE_HOME_DIRNAME


@dataclass(frozen=True)
class AdminAccount:
    address: str


@dataclass(frozen=True)
class BootstrapResult:
    """Everything the sequencer derived for the primary validator."""

    identity: ValidatorIdentity
    operator_address: str
    admin: AdminAccount


@dataclass(frozen=True)
class BootstrapArguments:
    """Settings for a bootstrap run.

    Nothing is checked at construction; a command that needs a setting calls
    require(), which raises ConfigurationError if the setting is unset.
    """

    websocket_address: Optional[str] = DEFAULT_WEBSOCKET_ADDRESS
    tcp_url: Optional[str] = DEFAULT_TCP_URL
    chain_net: Optional[int] = DEFAULT_CHAIN_NET
    chain_id: Optional[str] = DEFAULT_CHAIN_ID
    # Relayer database file; accepted in settings files, no command reads it
    db_path: Optional[str] = None
    validator_values: Optional[ValidatorRecord] = None
    symbol_translator_file: Optional[str] = None
    relayer_db_path: Optional[str] = DEFAULT_RELAYER_DB_PATH
    network_dir: Optional[str] = DEFAULT_NETWORK_DIR
    seed_ip_address: Optional[str] = DEFAULT_SEED_IP_ADDRESS
    network_config_file: Optional[str] = DEFAULT_NETWORK_CONFIG_FILE
    whitelist_file: Optional[str] = DEFAULT_WHITELIST_FILE
    n_validators: Optional[int] = DEFAULT_N_VALIDATORS

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def require(self, name: str) -> Any:
        value = getattr(self, name)
        if value is None or value == "":
            raise ConfigurationError(
                f"Missing required setting: {name}",
                field=name,
                code="MISSING_SETTING",
            )
        return value

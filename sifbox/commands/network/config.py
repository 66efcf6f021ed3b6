"""
Configuration management for network bootstrap runs.
"""

import dataclasses
from typing import Any, Optional

import yaml

from sifbox.commands.errors import ConfigurationError
from sifbox.commands.network.models import BootstrapArguments, ValidatorRecord
from sifbox.commands.utils import console

INTEGER_SETTINGS = ("chain_net", "n_validators")


def _validator_values(value: Any, config_path: str) -> Optional[ValidatorRecord]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ConfigurationError(
            "'validator_values' must be a mapping with moniker and mnemonic",
            config_file=config_path,
            field="validator_values",
        )
    try:
        return ValidatorRecord(
            moniker=str(value["moniker"]),
            mnemonic=str(value["mnemonic"]),
            password=str(value.get("password", "")),
        )
    except KeyError as e:
        raise ConfigurationError(
            f"'validator_values' is missing {e.args[0]!r}",
            config_file=config_path,
            field="validator_values",
        ) from e


def build_bootstrap_arguments(
    settings: dict[str, Any], config_path: str = "<cli>"
) -> BootstrapArguments:
    """
    Build BootstrapArguments from a flat settings mapping.

    Keys left out keep their defaults; keys with a None value are dropped
    so CLI options that were not given do not clobber file values.

    Raises:
        ConfigurationError: On unknown keys or values of the wrong type
    """
    known = set(BootstrapArguments.field_names())
    # YAML keys are not always strings (`1: foo`)
    unknown = sorted(str(key) for key in settings if key not in known)
    if unknown:
        raise ConfigurationError(
            f"Unknown setting(s): {', '.join(unknown)}",
            config_file=config_path,
        )

    values = {key: value for key, value in settings.items() if value is not None}
    for key in INTEGER_SETTINGS:
        if key in values:
            try:
                values[key] = int(values[key])
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"'{key}' must be an integer, got {values[key]!r}",
                    config_file=config_path,
                    field=key,
                ) from e
    if "validator_values" in values:
        values["validator_values"] = _validator_values(
            values["validator_values"], config_path
        )
    return BootstrapArguments(**values)


def load_bootstrap_config(config_path: str) -> dict[str, Any]:
    """Load bootstrap settings from a YAML file."""
    try:
        with open(config_path, encoding="utf-8") as file:
            config = yaml.safe_load(file)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Bootstrap configuration file not found: {config_path}",
            config_file=config_path,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read bootstrap configuration: {e}", config_file=config_path
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML format: {str(e)}", config_file=config_path
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            "Bootstrap configuration must be a mapping of settings",
            config_file=config_path,
        )
    return config


def resolve_bootstrap_arguments(
    config_path: Optional[str], overrides: dict[str, Any]
) -> BootstrapArguments:
    """Merge file settings with CLI overrides. CLI options take precedence."""
    settings = load_bootstrap_config(config_path) if config_path else {}
    settings.update(
        {key: value for key, value in overrides.items() if value is not None}
    )
    return build_bootstrap_arguments(settings, config_path or "<cli>")


def create_sample_config(output_path: str = "sifbox-network.yml") -> None:
    """Create a sample bootstrap configuration file."""
    sample_config = dataclasses.asdict(BootstrapArguments())
    sample_config["db_path"] = "/tmp/ebrelayer.db"
    sample_config["symbol_translator_file"] = "./symbol_translator.json"
    sample_config["validator_values"] = {
        "moniker": "sifnode-validator",
        "mnemonic": "<24 word mnemonic of the relaying validator>",
        "password": "",
    }

    with open(output_path, "w") as file:
        yaml.dump(sample_config, file, default_flow_style=False, indent=2)

    console.print(
        f"[green]✓ Sample bootstrap configuration created: {output_path}[/green]"
    )

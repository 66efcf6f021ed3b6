"""Extraction of typed values from sifnoded command output."""

import json

from sifbox.commands.constants import FIELD_ADDRESS
from sifbox.commands.errors import OutputParseFailed


def extract_address(output: str) -> str:
    """Return the `address` field of a `keys add --output json` document.

    Raises:
        OutputParseFailed: If the output is not a JSON object with a
            non-empty address
    """
    try:
        document = json.loads(output)
    except json.JSONDecodeError as e:
        raise OutputParseFailed(
            f"Key output is not valid JSON: {e}", field=FIELD_ADDRESS, output=output
        ) from e

    address = document.get(FIELD_ADDRESS) if isinstance(document, dict) else None
    if not isinstance(address, str) or not address:
        raise OutputParseFailed(
            "Key output has no address", field=FIELD_ADDRESS, output=output
        )
    return address


def extract_operator_address(output: str) -> str:
    """Return the bech32 valoper address printed by `keys show -a --bech val`."""
    address = output.strip()
    if not address:
        raise OutputParseFailed(
            "keys show printed no operator address",
            field="operator_address",
            output=output,
        )
    return address

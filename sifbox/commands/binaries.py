"""
Binary Locator - resolves the sifnoded, sifgen and ebrelayer executables.
"""

import logging
import os
from pathlib import Path
from shutil import which
from typing import Optional, Union

from sifbox.commands.constants import (
    EBRELAYER_BINARY,
    SIFGEN_BINARY,
    SIFNODED_BINARY,
)
from sifbox.commands.errors import ConfigurationError

logger = logging.getLogger(__name__)


class BinaryLocator:
    """Finds executables in a Go bin directory or on PATH."""

    def __init__(self, go_bin: Optional[Union[str, Path]] = None):
        """
        Initialize the BinaryLocator.

        Args:
            go_bin: Directory `go install` placed the binaries in. If None,
                falls back to $GOBIN, then to PATH.
        """
        go_bin = go_bin or os.environ.get("GOBIN")
        self.go_bin = Path(go_bin) if go_bin else None

    def path(self, name: str) -> str:
        """Return the path of binary `name`.

        Raises:
            ConfigurationError: If the binary cannot be found
        """
        if self.go_bin is not None:
            candidate = self.go_bin / name
            if candidate.is_file() and os.access(candidate, os.X_OK):
                return str(candidate)
            logger.debug("%s not found in %s, searching PATH", name, self.go_bin)

        binary = which(name)
        if binary:
            return binary

        searched = f"{self.go_bin} and PATH" if self.go_bin else "PATH"
        raise ConfigurationError(
            f"{name} binary not found (searched {searched}). "
            "Build it with `make install` or pass --go-bin",
            field=name,
            code="BINARY_NOT_FOUND",
        )

    @property
    def sifnoded(self) -> str:
        return self.path(SIFNODED_BINARY)

    @property
    def sifgen(self) -> str:
        return self.path(SIFGEN_BINARY)

    @property
    def ebrelayer(self) -> str:
        return self.path(EBRELAYER_BINARY)

"""
Commands module - network bootstrap building blocks.

The CLI command groups live in sifbox.commands.network and
sifbox.commands.relayer.
"""

from sifbox.commands.command_runner import CommandRunner, SupervisedProcess
from sifbox.commands.errors import (
    ConfigGenerationFailed,
    ConfigParseFailed,
    ConfigurationError,
    ExternalCommandFailed,
    OutputParseFailed,
    SifboxError,
)

__all__ = [
    # Process handling
    "CommandRunner",
    "SupervisedProcess",
    # Error classes
    "SifboxError",
    "ExternalCommandFailed",
    "ConfigGenerationFailed",
    "ConfigParseFailed",
    "OutputParseFailed",
    "ConfigurationError",
]

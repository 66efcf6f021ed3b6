"""
Typed error classes for sifbox.

This module provides the error hierarchy raised by the bootstrap pipeline:
- SifboxError: Base exception for all sifbox errors
- ExternalCommandFailed: A captured command exited non-zero or could not start
- ConfigGenerationFailed: The network generator exited non-zero
- ConfigParseFailed: The generated topology file is missing or malformed
- OutputParseFailed: An expected value is absent from a command's output
- ConfigurationError: Bootstrap settings or binaries are missing
"""

from typing import Any, Optional, Sequence


class SifboxError(Exception):
    """Base exception class for all sifbox errors.

    Subclasses set default_code; a code passed to the constructor wins.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling, if any
        details: Context such as the program, file or field involved
    """

    default_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": type(self).__name__,
            "message": self.message,
        }
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}" if self.code else self.message


class ExternalCommandFailed(SifboxError):
    """Raised when a captured external command fails.

    Raised when:
    - The program exits with a non-zero status
    - The program cannot be spawned at all (exit_code is None)
    """

    default_code = "EXTERNAL_COMMAND_FAILED"

    def __init__(
        self,
        program: str,
        args: Sequence[str],
        exit_code: Optional[int],
        stderr: str = "",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.program = program
        self.command_args = list(args)
        self.exit_code = exit_code
        self.stderr = stderr
        details = dict(details or {})
        details["program"] = program
        details["args"] = self.command_args
        details["exit_code"] = exit_code
        if stderr:
            details["stderr"] = stderr
        command = " ".join([program, *self.command_args])
        if exit_code is None:
            message = f"{command} could not be started"
        else:
            message = f"{command} exited with status {exit_code}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message, code=code, details=details)


class ConfigGenerationFailed(ExternalCommandFailed):
    """Raised when the network generator exits non-zero.

    This is a specific type of ExternalCommandFailed so callers catching
    command failures also see generator failures.
    """

    default_code = "CONFIG_GENERATION_FAILED"


class ConfigParseFailed(SifboxError):
    """Raised when the generated network topology cannot be used.

    Raised when:
    - The topology file is missing, unreadable or not UTF-8 text
    - The file is not valid YAML or is not a list of records
    - A record lacks a moniker or mnemonic
    - The file holds zero validator records
    """

    default_code = "CONFIG_PARSE_FAILED"

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.config_file = config_file
        details = dict(details or {})
        if config_file:
            details["config_file"] = config_file
        super().__init__(message, details=details)


class OutputParseFailed(SifboxError):
    """Raised when a command's output does not carry an expected value."""

    default_code = "OUTPUT_PARSE_FAILED"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        output: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.field = field
        self.output = output
        details = dict(details or {})
        if field:
            details["field"] = field
        if output is not None:
            details["output"] = output
        super().__init__(message, details=details)


class ConfigurationError(SifboxError):
    """Configuration-related errors.

    Raised when:
    - Bootstrap configuration file is missing, unreadable or malformed
    - A setting needed by a command is not set
    - A required binary cannot be located
    """

    default_code = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        field: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.config_file = config_file
        self.field = field
        details = dict(details or {})
        if config_file:
            details["config_file"] = config_file
        if field:
            details["field"] = field
        super().__init__(message, code=code, details=details)


__all__ = [
    "SifboxError",
    "ExternalCommandFailed",
    "ConfigGenerationFailed",
    "ConfigParseFailed",
    "OutputParseFailed",
    "ConfigurationError",
]

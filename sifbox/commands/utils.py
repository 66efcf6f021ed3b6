"""Shared console and logging setup for user-facing output."""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route sifbox debug logging to the console when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def shell_exit_code(returncode: int) -> int:
    """Map a child's return code to the status a shell would report.

    asyncio reports death by signal N as -N; shells report 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode

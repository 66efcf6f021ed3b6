"""
Command Runner - runs external binaries for the bootstrap pipeline.

Two modes are offered:
- run(): capture mode. Waits for the program, returns its stdout, and raises
  ExternalCommandFailed on a non-zero exit.
- supervise(): starts a long-lived program with the caller's stdio and
  returns a SupervisedProcess whose completion future resolves once, with
  the exit code, when the program exits.

Commands touching the keyring or the genesis file share external state and
must be awaited one after another; nothing here serialises them.
"""

import asyncio
import logging
from typing import Optional, Sequence

from sifbox.commands.constants import PROCESS_WAIT_TIMEOUT
from sifbox.commands.errors import ExternalCommandFailed

logger = logging.getLogger(__name__)


class SupervisedProcess:
    """A running child process plus a single-resolution completion future.

    The completion future cannot be used to stop the process: cancelling a
    coroutine awaiting wait() leaves both the future and the process alone.
    Use terminate() or kill() to abandon the process.
    """

    def __init__(
        self, program: str, args: Sequence[str], process: asyncio.subprocess.Process
    ):
        self.program = program
        self.args = list(args)
        self.process = process
        self.completion: asyncio.Future = (
            asyncio.get_running_loop().create_future()
        )
        self._watcher = asyncio.ensure_future(self._watch())

    async def _watch(self) -> None:
        exit_code = await self.process.wait()
        logger.debug("%s (pid %s) exited with %s", self.program, self.pid, exit_code)
        if not self.completion.done():
            self.completion.set_result(exit_code)

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def running(self) -> bool:
        return not self.completion.done()

    async def wait(self) -> int:
        """Wait for the process to exit and return its exit code."""
        return await asyncio.shield(self.completion)

    def terminate(self) -> None:
        if self.running:
            try:
                self.process.terminate()
            except ProcessLookupError:
                pass  # exited, completion is about to resolve

    def kill(self) -> None:
        if self.running:
            try:
                self.process.kill()
            except ProcessLookupError:
                pass

    async def stop(self, timeout: float = PROCESS_WAIT_TIMEOUT) -> int:
        """Terminate the process, killing it if it outlives timeout."""
        self.terminate()
        try:
            return await asyncio.wait_for(self.wait(), timeout)
        except asyncio.TimeoutError:
            self.kill()
            return await self.wait()


class CommandRunner:
    """Runs external programs by argv, never through a shell."""

    async def run(
        self,
        program: str,
        args: Sequence[str],
        stdin: Optional[str] = None,
    ) -> str:
        """
        Run a program to completion and capture its output.

        Args:
            program: Path of the executable
            args: Arguments, one argv token each
            stdin: Optional text fed to the program's standard input

        Returns:
            stdout with trailing whitespace stripped

        Raises:
            ExternalCommandFailed: If the program exits non-zero or cannot start
        """
        args = [str(arg) for arg in args]
        logger.debug("Running %s %s", program, " ".join(args))
        try:
            process = await asyncio.create_subprocess_exec(
                program,
                *args,
                stdin=(
                    asyncio.subprocess.PIPE
                    if stdin is not None
                    else asyncio.subprocess.DEVNULL
                ),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ExternalCommandFailed(program, args, None, str(e)) from e

        stdout, stderr = await process.communicate(
            stdin.encode() if stdin is not None else None
        )
        output = stdout.decode(errors="replace").rstrip()
        if process.returncode != 0:
            raise ExternalCommandFailed(
                program,
                args,
                process.returncode,
                stderr.decode(errors="replace").rstrip(),
            )
        logger.debug("%s output: %s", program, output)
        return output

    async def supervise(self, program: str, args: Sequence[str]) -> SupervisedProcess:
        """
        Start a long-lived program attached to the current terminal.

        Args:
            program: Path of the executable
            args: Arguments, one argv token each

        Returns:
            SupervisedProcess whose completion resolves with the exit code

        Raises:
            ExternalCommandFailed: If the program cannot be started
        """
        args = [str(arg) for arg in args]
        logger.debug("Starting %s %s", program, " ".join(args))
        try:
            process = await asyncio.create_subprocess_exec(program, *args)
        except OSError as e:
            raise ExternalCommandFailed(program, args, None, str(e)) from e
        return SupervisedProcess(program, args, process)

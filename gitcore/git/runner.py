"""Async git command runner with concurrent stream draining."""

import asyncio
import contextlib
from collections.abc import Sequence
from pathlib import Path

import structlog

from gitcore.core.config import REPO_ROOT, ConfigLookup
from gitcore.exceptions import ConfigError, InvalidArgumentError
from gitcore.git.executor import ProcessExecutor
from gitcore.git.models import CommandResult

logger = structlog.get_logger()

_CHUNK_SIZE = 8192


def quote_argument(arg: str) -> str:
    """Wrap *arg* in double quotes, backslash-escaping backslashes and quotes."""
    escaped = arg.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_command(binary: str, args: Sequence[str]) -> str:
    """Render a command line for logs and error messages.

    The process is never started from this string; it is spawned from the
    argument vector directly.
    """
    return " ".join([binary, *(quote_argument(a) for a in args)])


async def _drain(stream: asyncio.StreamReader | None, sink: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        sink.extend(chunk)


class CommandRunner:
    def __init__(self, executor: ProcessExecutor, lookup: ConfigLookup) -> None:
        self._executor = executor
        self._lookup = lookup

    def resolve_working_dir(self, working_dir: Path | str | None = None) -> Path:
        if working_dir is None:
            working_dir = self._lookup.get(REPO_ROOT)
        cwd = Path(working_dir)
        if not cwd.is_dir():
            raise ConfigError(f"Directory does not exist: {cwd}")
        return cwd

    def close(self) -> None:
        self._executor.close()

    async def execute(
        self, args: Sequence[str], *, working_dir: Path | str | None = None
    ) -> CommandResult:
        """Run git with *args* and capture both output streams."""
        if not args:
            raise InvalidArgumentError("Invalid git command arguments")
        args = tuple(args)
        cwd = self.resolve_working_dir(working_dir)

        logger.debug(
            "git_exec",
            command=format_command(self._executor.binary, args),
            cwd=str(cwd),
        )

        lease = await self._executor.acquire()
        try:
            proc = await lease.spawn(args, cwd=cwd)
            stdout = bytearray()
            stderr = bytearray()
            # Both readers must be running before waiting on exit, or a full
            # pipe on the unread stream blocks the child forever.
            readers = (
                asyncio.create_task(_drain(proc.stdout, stdout)),
                asyncio.create_task(_drain(proc.stderr, stderr)),
            )
            try:
                exit_code = await proc.wait()
                await asyncio.gather(*readers)
            except BaseException:
                for reader in readers:
                    reader.cancel()
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
                raise
        finally:
            lease.release()

        result = CommandResult(
            args=args,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            exit_code=exit_code,
        )
        if not result.success:
            logger.debug("git_exec_nonzero", args=args, exit_code=exit_code)
        return result

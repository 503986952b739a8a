"""Pooled access to process spawning."""

import asyncio
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

import structlog

from gitcore.exceptions import ResourceAcquisitionError

logger = structlog.get_logger()

# Message text is matched against English output
_GIT_ENV_OVERRIDES = {"LC_ALL": "C"}


class ExecutorLease:
    """One slot of the executor pool. Spawns a single process, then is released."""

    def __init__(self, executor: "ProcessExecutor") -> None:
        self._executor = executor
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    async def spawn(
        self, args: Sequence[str], *, cwd: Path
    ) -> asyncio.subprocess.Process:
        if self._released:
            raise ResourceAcquisitionError("Executor lease already released")
        cmd = (self._executor.path, *args)
        try:
            return await asyncio.create_subprocess_exec(
                *cmd,
                cwd=cwd,
                env={**os.environ, **_GIT_ENV_OVERRIDES},
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ResourceAcquisitionError(
                f"{self._executor.binary} is not installed or not in PATH"
            ) from e
        except OSError as e:
            logger.error("git_spawn_error", command=cmd, error=str(e))
            raise ResourceAcquisitionError(
                f"Failed to create process for git command: {e}"
            ) from e

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._executor._release()


class ProcessExecutor:
    """Bounded pool of leases for spawning git processes."""

    def __init__(self, binary: str = "git", *, max_concurrent: int = 4) -> None:
        self.binary = binary
        self._path = shutil.which(binary)
        self._slots = asyncio.Semaphore(max_concurrent)
        self._closed = False

    @property
    def path(self) -> str | None:
        """Resolved location of the binary, looked up once at construction."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    async def acquire(self) -> ExecutorLease:
        if self._closed:
            raise ResourceAcquisitionError("Process executor is closed")
        if self._path is None:
            raise ResourceAcquisitionError(
                f"{self.binary} is not installed or not in PATH"
            )
        await self._slots.acquire()
        return ExecutorLease(self)

    def close(self) -> None:
        self._closed = True

    def _release(self) -> None:
        self._slots.release()

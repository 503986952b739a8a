"""Diff retrieval for single files or every changed file."""

import structlog

from gitcore.exceptions import CommandFailedError
from gitcore.git.base import GitOps, require
from gitcore.git.models import FileDiff
from gitcore.git.parsers import parse_status
from gitcore.git.status import STATUS_ARGS

logger = structlog.get_logger()


class DiffOps(GitOps):
    async def file_diff(self, path: str, staged: bool = False) -> str:
        require(path, "Invalid file path")
        args = ["diff", "--no-color"]
        if staged:
            args.append("--staged")
        args.extend(["--", path])
        result = await self._run(args, "Failed to get diff")
        return result.stdout

    async def all_diffs(self, staged: bool = False) -> list[FileDiff]:
        """Collect per-file diffs for every staged (or unstaged) change."""
        result = await self._run(list(STATUS_ARGS), "Failed to get Git status")
        status = parse_status(result.stdout)
        changes = status.staged if staged else status.unstaged

        diffs: list[FileDiff] = []
        for change in changes:
            try:
                text = await self.file_diff(change.file, staged)
            except CommandFailedError as e:
                logger.warning("file_diff_failed", file=change.file, error=str(e))
                continue
            if text.strip():
                diffs.append(FileDiff(file=change.file, status=change.status, diff=text))
        return diffs

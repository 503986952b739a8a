"""Staging, commit creation, and history."""

import re
import time

from gitcore.exceptions import InvalidArgumentError, NothingToCommitError
from gitcore.git.base import GitOps, check, require
from gitcore.git.models import Commit, CommitOutcome, OperationResult
from gitcore.git.parsers import parse_commit_hash, parse_log

DEFAULT_HISTORY_COUNT = 10

_NOTHING_TO_COMMIT_RE = re.compile(r"nothing (added )?to commit")


class CommitOps(GitOps):
    async def stage_file(self, path: str) -> OperationResult:
        require(path, "Invalid file path")
        await self._run(["add", "--", path], "Failed to stage file")
        return OperationResult(message=f"Staged {path}")

    async def stage_all(self) -> OperationResult:
        await self._run(["add", "."], "Failed to stage all changes")
        return OperationResult(message="Staged all changes")

    async def unstage_file(self, path: str) -> OperationResult:
        require(path, "Invalid file path")
        await self._run(["reset", "HEAD", "--", path], "Failed to unstage file")
        return OperationResult(message=f"Unstaged {path}")

    async def commit(self, message: str, author: str | None = None) -> CommitOutcome:
        """Commit staged changes.

        Raises NothingToCommitError when git reports an empty index, so callers
        can treat that case as a no-op rather than a failure.
        """
        require(message, "Invalid commit message")
        args = ["commit", "-m", message]
        if author:
            args.extend(["--author", author])

        result = await self._exec(args)
        if not result.success:
            # git reports this on stdout or stderr depending on version
            if _NOTHING_TO_COMMIT_RE.search(f"{result.stderr}\n{result.stdout}"):
                raise NothingToCommitError("Nothing to commit")
            check(result, "Failed to create commit")

        return CommitOutcome(
            hash=parse_commit_hash(result.stdout),
            timestamp=time.time(),
            details=result.stdout.strip(),
        )

    async def amend(self, message: str | None = None) -> OperationResult:
        args = ["commit", "--amend"]
        if message:
            args.extend(["-m", message])
        else:
            args.append("--no-edit")
        result = await self._run(args, "Failed to amend commit")
        return OperationResult(
            message="Amended last commit", details=result.stdout.strip()
        )

    async def history(self, count: int = DEFAULT_HISTORY_COUNT) -> list[Commit]:
        if count < 1:
            raise InvalidArgumentError("Commit count must be positive")
        result = await self._run(
            [
                "log",
                f"-{count}",
                "--no-color",
                "--pretty=medium",
                "--no-show-signature",
            ],
            "Failed to get commit history",
        )
        return parse_log(result.stdout)

"""Repository status aggregation."""

from pathlib import Path

import structlog

from gitcore.exceptions import CommandFailedError, GitCoreError, ParseError
from gitcore.git.base import GitOps
from gitcore.git.models import AheadBehind, ChangeCounts, Commit, RepositoryStatus
from gitcore.git.parsers import parse_ahead_behind, parse_last_commit, parse_status
from gitcore.git.remote import DEFAULT_REMOTE
from gitcore.git.runner import CommandRunner

logger = structlog.get_logger()

_LAST_COMMIT_FORMAT = "--pretty=format:%H%n%an%n%ad%n%s"
# NUL-terminated records carry paths without C-quoting
STATUS_ARGS = ("status", "--porcelain=v2", "--branch", "-z")


class StatusService(GitOps):
    def __init__(
        self,
        runner: CommandRunner,
        *,
        working_dir: Path | str | None = None,
        default_remote: str = DEFAULT_REMOTE,
    ) -> None:
        super().__init__(runner, working_dir=working_dir)
        self._default_remote = default_remote

    async def status(self) -> RepositoryStatus:
        """Parse git status --porcelain=v2 --branch -z into RepositoryStatus."""
        result = await self._run(list(STATUS_ARGS), "Failed to get Git status")
        return parse_status(result.stdout)

    async def get_ahead_behind(self) -> AheadBehind:
        """Commits ahead of and behind the remote-tracking counterpart.

        A missing tracking branch makes rev-list fail; that is reported as
        zero divergence rather than an error.
        """
        branch_result = await self._run(
            ["rev-parse", "--abbrev-ref", "HEAD"], "Failed to get current branch"
        )
        branch = branch_result.stdout.strip()
        if not branch:
            raise ParseError("Failed to determine current branch")

        result = await self._exec(
            [
                "rev-list",
                "--left-right",
                "--count",
                f"{branch}...{self._default_remote}/{branch}",
            ]
        )
        if not result.success:
            return AheadBehind()
        return parse_ahead_behind(result.stdout)

    async def get_last_commit(self) -> Commit:
        result = await self._run(
            ["log", "-1", _LAST_COMMIT_FORMAT], "Failed to get last commit"
        )
        return parse_last_commit(result.stdout)

    async def get_full_status(self) -> RepositoryStatus:
        status = await self.status()

        try:
            divergence = await self.get_ahead_behind()
        except GitCoreError as e:
            logger.warning("ahead_behind_unavailable", error=str(e))
            divergence = AheadBehind()

        try:
            last_commit: Commit | None = await self.get_last_commit()
        except CommandFailedError as e:
            # No commits yet on an unborn branch
            logger.warning("last_commit_unavailable", error=str(e))
            last_commit = None

        return status.model_copy(
            update={
                "ahead": divergence.ahead,
                "behind": divergence.behind,
                "last_commit": last_commit,
            }
        )

    async def count_changes(self) -> ChangeCounts:
        status = await self.get_full_status()
        return ChangeCounts(
            staged=len(status.staged),
            unstaged=len(status.unstaged),
            untracked=len(status.untracked),
            is_clean=status.is_clean,
        )

    async def is_clean(self) -> bool:
        counts = await self.count_changes()
        return counts.is_clean

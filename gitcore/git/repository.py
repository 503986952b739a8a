"""Facade bundling every operation group for one working directory."""

from pathlib import Path

from gitcore.git.branch import BranchOps
from gitcore.git.commit import CommitOps
from gitcore.git.diff import DiffOps
from gitcore.git.remote import DEFAULT_REMOTE, RemoteOps
from gitcore.git.runner import CommandRunner
from gitcore.git.status import StatusService


class Repository:
    def __init__(
        self,
        runner: CommandRunner,
        *,
        working_dir: Path | str | None = None,
        default_remote: str = DEFAULT_REMOTE,
    ) -> None:
        self.runner = runner
        self.working_dir = working_dir
        self.branches = BranchOps(runner, working_dir=working_dir)
        self.remotes = RemoteOps(
            runner, working_dir=working_dir, default_remote=default_remote
        )
        self.commits = CommitOps(runner, working_dir=working_dir)
        self.diffs = DiffOps(runner, working_dir=working_dir)
        self.status = StatusService(
            runner, working_dir=working_dir, default_remote=default_remote
        )

    async def is_repo(self) -> bool:
        """Check if the working directory is inside a git repository."""
        result = await self.runner.execute(
            ["rev-parse", "--is-inside-work-tree"], working_dir=self.working_dir
        )
        return result.success and result.stdout.strip() == "true"

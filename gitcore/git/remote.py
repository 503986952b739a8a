"""Remote operations: listing, registration, and sync."""

from pathlib import Path

from gitcore.git.base import GitOps, require
from gitcore.git.models import OperationResult, Remote
from gitcore.git.parsers import parse_remotes
from gitcore.git.runner import CommandRunner

DEFAULT_REMOTE = "origin"


class RemoteOps(GitOps):
    def __init__(
        self,
        runner: CommandRunner,
        *,
        working_dir: Path | str | None = None,
        default_remote: str = DEFAULT_REMOTE,
    ) -> None:
        super().__init__(runner, working_dir=working_dir)
        self._default_remote = default_remote

    async def list(self) -> list[Remote]:
        result = await self._run(["remote", "-v"], "Failed to list remotes")
        return parse_remotes(result.stdout)

    async def add(self, name: str, url: str) -> OperationResult:
        require(name, "Invalid remote name or URL")
        require(url, "Invalid remote name or URL")
        await self._run(["remote", "add", name, url], "Failed to add remote")
        return OperationResult(message=f"Added remote '{name}'", details=url)

    async def remove(self, name: str) -> OperationResult:
        require(name, "Invalid remote name")
        await self._run(["remote", "remove", name], "Failed to remove remote")
        return OperationResult(message=f"Removed remote '{name}'")

    async def pull(
        self, remote: str | None = None, branch: str | None = None
    ) -> OperationResult:
        args = ["pull", remote or self._default_remote]
        if branch:
            args.append(branch)
        result = await self._run(args, "Failed to pull changes")
        return OperationResult(message="Pull successful", details=result.stdout)

    async def push(
        self,
        remote: str | None = None,
        branch: str | None = None,
        force: bool = False,
    ) -> OperationResult:
        args = ["push"]
        if force:
            args.append("--force")
        args.append(remote or self._default_remote)
        if branch:
            args.append(branch)
        result = await self._run(args, "Failed to push changes")
        # git reports push progress on stderr
        return OperationResult(
            message="Push successful", details=result.stdout or result.stderr
        )

    async def fetch(
        self, remote: str | None = None, all_remotes: bool = False
    ) -> OperationResult:
        args = ["fetch"]
        if all_remotes:
            args.append("--all")
        else:
            args.append(remote or self._default_remote)
        result = await self._run(args, "Failed to fetch updates")
        return OperationResult(
            message="Fetch successful", details=result.stdout or result.stderr
        )

"""Branch operations."""

from gitcore.exceptions import ParseError
from gitcore.git.base import GitOps, require
from gitcore.git.models import BranchList, OperationResult
from gitcore.git.parsers import parse_branches


class BranchOps(GitOps):
    async def list(self, include_remote: bool = False) -> BranchList:
        args = ["branch", "--no-color"]
        if include_remote:
            args.append("-a")
        result = await self._run(args, "Failed to list branches")
        return parse_branches(result.stdout)

    async def current(self) -> str:
        result = await self._run(
            ["rev-parse", "--abbrev-ref", "HEAD"], "Failed to get current branch"
        )
        name = result.stdout.strip()
        if not name:
            raise ParseError("Failed to determine current branch")
        return name

    async def create(
        self, name: str, start_point: str | None = None
    ) -> OperationResult:
        require(name, "Invalid branch name")
        args = ["branch", name]
        if start_point:
            args.append(start_point)
        result = await self._run(args, "Failed to create branch")
        return OperationResult(
            message=f"Created branch '{name}'", details=result.stdout.strip()
        )

    async def create_and_switch(
        self, name: str, start_point: str | None = None
    ) -> OperationResult:
        require(name, "Invalid branch name")
        args = ["checkout", "-b", name]
        if start_point:
            args.append(start_point)
        result = await self._run(args, "Failed to create and switch to branch")
        return OperationResult(
            message=f"Created and switched to branch '{name}'",
            details=result.stdout.strip() or result.stderr.strip(),
        )

    async def switch(self, name: str) -> OperationResult:
        require(name, "Invalid branch name")
        result = await self._run(["checkout", name], "Failed to switch to branch")
        return OperationResult(
            message=f"Switched to branch '{name}'",
            details=result.stdout.strip() or result.stderr.strip(),
        )

    async def delete(self, name: str, force: bool = False) -> OperationResult:
        require(name, "Invalid branch name")
        option = "-D" if force else "-d"
        result = await self._run(["branch", option, name], "Failed to delete branch")
        return OperationResult(
            message=f"Deleted branch '{name}'", details=result.stdout.strip()
        )

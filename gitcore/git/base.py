"""Shared plumbing for the domain operation groups."""

from collections.abc import Sequence
from pathlib import Path

from gitcore.exceptions import CommandFailedError, InvalidArgumentError
from gitcore.git.models import CommandResult
from gitcore.git.runner import CommandRunner


def require(value: str | None, message: str) -> str:
    """Return *value*, or raise InvalidArgumentError if it is missing or empty."""
    if value is None or not value.strip():
        raise InvalidArgumentError(message)
    return value


class GitOps:
    """Base for operation groups bound to one runner and working directory."""

    def __init__(
        self, runner: CommandRunner, *, working_dir: Path | str | None = None
    ) -> None:
        self._runner = runner
        self._working_dir = working_dir

    async def _exec(self, args: Sequence[str]) -> CommandResult:
        return await self._runner.execute(args, working_dir=self._working_dir)

    async def _run(self, args: Sequence[str], failure: str) -> CommandResult:
        """Execute *args*; raise CommandFailedError prefixed with *failure* on non-zero exit."""
        return check(await self._exec(args), failure)


def check(result: CommandResult, failure: str) -> CommandResult:
    if not result.success:
        raise CommandFailedError(
            f"{failure}: {result.error_text or 'unknown error'}", result
        )
    return result

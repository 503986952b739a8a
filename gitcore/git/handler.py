"""Git command handler: routes text subcommands to repository operations."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

import structlog

from gitcore.exceptions import GitCoreError, NothingToCommitError
from gitcore.git import formatter

if TYPE_CHECKING:
    from gitcore.git.repository import Repository

logger = structlog.get_logger()


class GitCommandHandler:
    def __init__(self, repo: Repository) -> None:
        self._repo = repo

    async def handle_command(self, text: str) -> str:
        """Run one subcommand line and return display text."""
        parts = text.strip().split(None, 1)
        subcommand = parts[0] if parts else ""
        raw_args = parts[1] if len(parts) > 1 else ""

        try:
            args = shlex.split(raw_args)
        except ValueError as e:
            return formatter.format_error(e)

        try:
            return await self._dispatch(subcommand, args, raw_args)
        except NothingToCommitError:
            return "\u2139\ufe0f Nothing to commit."
        except GitCoreError as e:
            logger.info("git_command_failed", subcommand=subcommand, error=str(e))
            return formatter.format_error(e)

    async def _dispatch(self, subcommand: str, args: list[str], raw_args: str) -> str:
        repo = self._repo
        match subcommand:
            case "" | "status":
                return formatter.format_status(await repo.status.get_full_status())
            case "count":
                return formatter.format_counts(await repo.status.count_changes())
            case "branch":
                return await self._branch(args)
            case "checkout":
                if args[:1] == ["-b"] and len(args) >= 2:
                    start = args[2] if len(args) > 2 else None
                    result = await repo.branches.create_and_switch(args[1], start)
                    return formatter.format_result(result)
                if len(args) != 1:
                    return "Usage: checkout [-b] <branch-name>"
                return formatter.format_result(await repo.branches.switch(args[0]))
            case "log":
                count = int(args[0]) if args and args[0].isdigit() else 10
                return formatter.format_log(await repo.commits.history(count))
            case "diff":
                staged = "--staged" in args
                paths = [a for a in args if a != "--staged"]
                if paths:
                    return formatter.format_diff(
                        await repo.diffs.file_diff(paths[0], staged)
                    )
                return formatter.format_diffs(await repo.diffs.all_diffs(staged))
            case "add":
                if args == ["."]:
                    return formatter.format_result(await repo.commits.stage_all())
                if not args:
                    return "Usage: add <path> | add ."
                for path in args:
                    await repo.commits.stage_file(path)
                return f"\u2705 Staged {len(args)} file(s)"
            case "reset":
                if not args:
                    return "Usage: reset <path>"
                for path in args:
                    await repo.commits.unstage_file(path)
                return f"\u2705 Unstaged {len(args)} file(s)"
            case "commit":
                if not raw_args.strip():
                    return "Usage: commit <message>"
                outcome = await repo.commits.commit(raw_args.strip())
                return formatter.format_commit(outcome, raw_args.strip())
            case "amend":
                result = await repo.commits.amend(raw_args.strip() or None)
                return formatter.format_result(result)
            case "remote":
                return await self._remote(args)
            case "pull":
                result = await repo.remotes.pull(*args[:2])
                return formatter.format_result(result)
            case "push":
                force = "--force" in args
                rest = [a for a in args if a != "--force"]
                result = await repo.remotes.push(*rest[:2], force=force)
                return formatter.format_result(result)
            case "fetch":
                if args == ["--all"]:
                    result = await repo.remotes.fetch(all_remotes=True)
                else:
                    result = await repo.remotes.fetch(*args[:1])
                return formatter.format_result(result)
            case "help":
                return formatter.format_help()
            case _:
                return f"Unknown git subcommand: {subcommand}\n\n{formatter.format_help()}"

    async def _branch(self, args: list[str]) -> str:
        branches = self._repo.branches
        if not args or args == ["-a"]:
            return formatter.format_branches(await branches.list(include_remote=bool(args)))
        if args[0] in ("-d", "-D"):
            if len(args) != 2:
                return "Usage: branch -d|-D <name>"
            return formatter.format_result(
                await branches.delete(args[1], force=args[0] == "-D")
            )
        start = args[1] if len(args) > 1 else None
        return formatter.format_result(await branches.create(args[0], start))

    async def _remote(self, args: list[str]) -> str:
        remotes = self._repo.remotes
        if not args:
            return formatter.format_remotes(await remotes.list())
        match args[0]:
            case "add" if len(args) == 3:
                return formatter.format_result(await remotes.add(args[1], args[2]))
            case "remove" if len(args) == 2:
                return formatter.format_result(await remotes.remove(args[1]))
            case _:
                return "Usage: remote [add <name> <url> | remove <name>]"

"""CLI entry point for gitcore."""

import asyncio
import sys

import structlog

from gitcore.app import build_repository, configure_logging
from gitcore.core.config import GitCoreConfig
from gitcore.exceptions import GitCoreError
from gitcore.git.handler import GitCommandHandler

logger = structlog.get_logger()


async def _run_cli(config: GitCoreConfig) -> None:
    repo = build_repository(config)
    if not await repo.is_repo():
        print(f"Not a git repository: {config.repo_root}", file=sys.stderr)
        sys.exit(1)

    handler = GitCommandHandler(repo)
    logger.info("cli_starting", repo_root=str(config.repo_root))
    print(f"gitcore ready, working in {config.repo_root}")
    print("Enter a git subcommand, 'help' for a list (Ctrl+D to exit):\n")

    try:
        while True:
            try:
                line = input("git> ")
            except EOFError:
                break

            if not line.strip():
                continue

            print(await handler.handle_command(line))
            print()
    except KeyboardInterrupt:
        pass
    finally:
        logger.info("cli_shutting_down")
        repo.runner.close()


async def main() -> None:
    try:
        config = GitCoreConfig()
    except Exception as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    if config.repo_root is None:
        print("Set GITCORE_REPO_ROOT or create a .env file.", file=sys.stderr)
        sys.exit(1)

    configure_logging(config, log_dir=config.log_dir)

    try:
        await _run_cli(config)
    except GitCoreError as e:
        print(f"gitcore failed: {e}", file=sys.stderr)
        sys.exit(1)


def run() -> None:
    asyncio.run(main())

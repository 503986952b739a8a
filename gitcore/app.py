"""Bootstrap: wires the executor, runner, and repository together."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import structlog

from gitcore.core.config import GitCoreConfig, SettingsLookup
from gitcore.git.executor import ProcessExecutor
from gitcore.git.repository import Repository
from gitcore.git.runner import CommandRunner

logger = structlog.get_logger()


def configure_logging(config: GitCoreConfig, *, log_dir: Path | None = None) -> None:
    """Set up structlog with console output and optional rotating JSON file handler."""
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(),
        )
    )
    root_logger.addHandler(console_handler)

    # JSON lines for machine parsing
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "gitcore.log",
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
            )
        )
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_runner(config: GitCoreConfig) -> CommandRunner:
    executor = ProcessExecutor(
        config.git_binary, max_concurrent=config.max_concurrent_processes
    )
    return CommandRunner(executor, SettingsLookup(config))


def build_repository(
    config: GitCoreConfig, *, working_dir: Path | None = None
) -> Repository:
    """Construct a Repository from config. Logging must be configured separately."""
    runner = build_runner(config)
    repo = Repository(
        runner, working_dir=working_dir, default_remote=config.default_remote
    )
    logger.info(
        "repository_built",
        repo_root=str(working_dir or config.repo_root),
        git_binary=config.git_binary,
    )
    return repo

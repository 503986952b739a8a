"""Shared exception types for gitcore."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitcore.git.models import CommandResult


class GitCoreError(Exception):
    """Base exception for all gitcore errors."""


class ConfigError(GitCoreError):
    """Configuration is invalid or missing."""


class InvalidArgumentError(GitCoreError):
    """A required argument was missing or empty."""


class ResourceAcquisitionError(GitCoreError):
    """The process executor could not provide a process."""


class ParseError(GitCoreError):
    """Git output did not have the expected shape."""


class CommandFailedError(GitCoreError):
    """Git exited with a non-zero status."""

    def __init__(self, message: str, result: CommandResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class NothingToCommitError(GitCoreError):
    """Commit was requested but the index had nothing to record."""

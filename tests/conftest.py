"""Shared fixtures and a recording fake runner for testing."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pytest

from gitcore.core.config import GitCoreConfig, SettingsLookup
from gitcore.git.models import CommandResult


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Prevent .env file and shell env from leaking into tests."""
    monkeypatch.setitem(GitCoreConfig.model_config, "env_file", None)
    for key in list(os.environ):
        if key.startswith("GITCORE_"):
            monkeypatch.delenv(key, raising=False)


class FakeRunner:
    """Test double that records argument vectors and replays queued results."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.working_dirs: list[Path | str | None] = []
        self._responses: list[CommandResult] = []

    def queue(self, stdout: str = "", stderr: str = "", exit_code: int = 0) -> None:
        self._responses.append(
            CommandResult(stdout=stdout, stderr=stderr, exit_code=exit_code)
        )

    async def execute(
        self, args: Sequence[str], *, working_dir: Path | str | None = None
    ) -> CommandResult:
        self.calls.append(tuple(args))
        self.working_dirs.append(working_dir)
        if self._responses:
            result = self._responses.pop(0)
            return result.model_copy(update={"args": tuple(args)})
        return CommandResult(args=tuple(args), exit_code=0)

    def close(self) -> None:
        pass


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def config(tmp_path):
    return GitCoreConfig(repo_root=tmp_path)


@pytest.fixture
def lookup(config):
    return SettingsLookup(config)

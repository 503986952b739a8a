"""Unified configuration via pydantic-settings."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitcore.exceptions import ConfigError

REPO_ROOT = "repo_root"


class GitCoreConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GITCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Repository
    repo_root: Path | None = None
    git_binary: str = "git"
    default_remote: str = "origin"

    # Process pool
    max_concurrent_processes: int = 4

    # Logging
    log_level: str = "INFO"
    log_dir: Path | None = None
    log_max_bytes: int = 10_485_760
    log_backup_count: int = 5

    @field_validator("repo_root")
    @classmethod
    def resolve_repo_root(cls, v: Path | None) -> Path | None:
        if v is None:
            return None
        resolved = v.expanduser().resolve()
        if not resolved.is_dir():
            raise ValueError(f"repository root does not exist: {resolved}")
        return resolved

    @field_validator("max_concurrent_processes")
    @classmethod
    def check_pool_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_concurrent_processes must be at least 1")
        return v


@runtime_checkable
class ConfigLookup(Protocol):
    def get(self, name: str) -> str: ...


class SettingsLookup:
    """Resolve named values from a GitCoreConfig."""

    def __init__(self, config: GitCoreConfig) -> None:
        self._config = config

    def get(self, name: str) -> str:
        value = getattr(self._config, name, None)
        if value is None:
            raise ConfigError(f"{name} is not set")
        return str(value)

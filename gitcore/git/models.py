"""Data models for git command results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field


class FileStatus(Enum):
    NEW = "new"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    UNTRACKED = "untracked"
    UPDATED = "updated"
    CONFLICT = "conflict"


class StatusCode(Enum):
    """Single-character porcelain status code (one half of an XY pair)."""

    UNMODIFIED = "."
    MODIFIED = "M"
    TYPE_CHANGED = "T"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UPDATED = "U"
    UNTRACKED = "?"
    IGNORED = "!"
    UNRECOGNIZED = ""

    @classmethod
    def _missing_(cls, value: object) -> "StatusCode":
        return cls.UNRECOGNIZED

    @property
    def is_change(self) -> bool:
        return self not in (StatusCode.UNMODIFIED, StatusCode.UNTRACKED)

    def to_file_status(self) -> FileStatus:
        return _CODE_TO_STATUS[self]


_CODE_TO_STATUS: dict[StatusCode, FileStatus] = {
    StatusCode.UNMODIFIED: FileStatus.MODIFIED,
    StatusCode.MODIFIED: FileStatus.MODIFIED,
    StatusCode.TYPE_CHANGED: FileStatus.MODIFIED,
    StatusCode.ADDED: FileStatus.NEW,
    StatusCode.DELETED: FileStatus.DELETED,
    StatusCode.RENAMED: FileStatus.RENAMED,
    StatusCode.COPIED: FileStatus.COPIED,
    StatusCode.UPDATED: FileStatus.UPDATED,
    StatusCode.UNTRACKED: FileStatus.UNTRACKED,
    StatusCode.IGNORED: FileStatus.MODIFIED,
    StatusCode.UNRECOGNIZED: FileStatus.MODIFIED,
}


class CommandResult(BaseModel):
    """Captured output of one git invocation."""

    model_config = ConfigDict(frozen=True)

    args: tuple[str, ...] = ()
    stdout: str = ""
    stderr: str = ""
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def error_text(self) -> str:
        return self.stderr.strip() or self.stdout.strip()


class FileChange(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    status: FileStatus


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: str
    author: str = ""
    date: str = ""
    message: str = ""


class RepositoryStatus(BaseModel):
    """Parsed output of git status, optionally augmented with tracking info."""

    model_config = ConfigDict(frozen=True)

    branch: str | None = None
    staged: list[FileChange] = []
    unstaged: list[FileChange] = []
    untracked: list[FileChange] = []
    ahead: int = 0
    behind: int = 0
    last_commit: Commit | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_clean(self) -> bool:
        return not self.staged and not self.unstaged and not self.untracked


class Branch(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_current: bool = False


class BranchList(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: str | None = None
    names: list[str] = []

    @property
    def branches(self) -> list[Branch]:
        return [Branch(name=n, is_current=n == self.current) for n in self.names]


class Remote(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    urls: dict[str, str] = {}


class AheadBehind(BaseModel):
    model_config = ConfigDict(frozen=True)

    ahead: int = 0
    behind: int = 0


class ChangeCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    staged: int = 0
    unstaged: int = 0
    untracked: int = 0
    is_clean: bool = True


class OperationResult(BaseModel):
    """Result from a git mutation operation."""

    model_config = ConfigDict(frozen=True)

    message: str
    details: str = ""


class CommitOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: str
    timestamp: float
    details: str = ""


class FileDiff(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    status: FileStatus
    diff: str

"""Pure parsers turning git's textual output into models."""

import re

from gitcore.exceptions import ParseError
from gitcore.git.models import (
    AheadBehind,
    BranchList,
    Commit,
    FileChange,
    FileStatus,
    Remote,
    RepositoryStatus,
    StatusCode,
)

_BRANCH_HEAD = "# branch.head "
_LAST_COMMIT_FIELDS = 4

_COMMIT_RE = re.compile(r"^commit\s+([0-9a-f]+)")
_AUTHOR_RE = re.compile(r"^Author:\s+(.+)")
_DATE_RE = re.compile(r"^Date:\s+(.+)")
_REMOTE_RE = re.compile(r"^(\S+)\s+(\S+)\s+\(([^)]+)\)")
_AHEAD_BEHIND_RE = re.compile(r"^\s*(\d+)\s+(\d+)\s*$")
# "[main 1a2b3c4] subject", "[main (root-commit) 1a2b3c4] subject"
_COMMIT_HASH_RE = re.compile(r"\[[^\]]*?\b([0-9a-f]{4,40})\]")
_BRANCH_MARKER_RE = re.compile(r"^[*+]\s+")
_OCTAL_ESCAPE_RE = re.compile(r"[0-7]{3}")
_C_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


def unquote_path(path: str) -> str:
    """Undo git's C-style quoting of a path.

    Without ``-z`` git wraps paths holding non-ASCII bytes, quotes, backslashes
    or control characters in double quotes and escapes them, e.g.
    ``"caf\\303\\251.txt"`` for ``café.txt``. Unquoted paths are returned as is.
    """
    if len(path) < 2 or path[0] != '"' or path[-1] != '"':
        return path
    body = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            octal = body[i + 1 : i + 4]
            if _OCTAL_ESCAPE_RE.fullmatch(octal):
                out.append(int(octal, 8))
                i += 4
                continue
            if body[i + 1] in _C_ESCAPES:
                out.append(_C_ESCAPES[body[i + 1]])
                i += 2
                continue
        out.extend(ch.encode("utf-8"))
        i += 1
    return out.decode("utf-8", errors="replace")


def _entry_path(line: str, fields: list[str]) -> str:
    """Path of record for an ordinary (1) or renamed (2) entry.

    Type 1: "1 XY sub mH mI mW hH hI path"
    Type 2: "2 XY sub mH mI mW hH hI Xscore path<TAB>origPath"

    With ``-z`` the type 2 record ends at ``path``; origPath is the next record.
    """
    if line.startswith("2"):
        head = line.split("\t", 1)[0]
        parts = head.split(" ", 9)
        if len(parts) == 10:
            return parts[9]
        return fields[-1]
    parts = line.split(" ", 8)
    if len(parts) == 9:
        return parts[8]
    return fields[-1]


def _unmerged_path(line: str, fields: list[str]) -> str:
    # "u XY sub m1 m2 m3 mW h1 h2 h3 path"
    parts = line.split(" ", 10)
    if len(parts) == 11:
        return parts[10]
    return fields[-1]


def parse_status(raw: str) -> RepositoryStatus:
    """Parse ``git status --porcelain=v2 --branch [-z]`` output.

    NUL-terminated (``-z``) output carries paths verbatim. Newline-terminated
    output may carry C-quoted paths, which are unquoted here.
    """
    branch: str | None = None
    staged: list[FileChange] = []
    unstaged: list[FileChange] = []
    untracked: list[FileChange] = []

    nul_terminated = "\0" in raw
    records = iter(raw.split("\0") if nul_terminated else raw.splitlines())
    path_of = (lambda p: p) if nul_terminated else unquote_path

    for line in records:
        if not line:
            continue
        prefix = line[0]
        if prefix == "#":
            if line.startswith(_BRANCH_HEAD):
                branch = line[len(_BRANCH_HEAD) :].strip() or None
        elif prefix in ("1", "2"):
            if prefix == "2" and nul_terminated:
                # origPath record
                next(records, None)
            fields = line.split()
            if len(fields) < 3:
                continue
            xy = fields[1]
            x = StatusCode(xy[0]) if len(xy) > 0 else StatusCode.UNMODIFIED
            y = StatusCode(xy[1]) if len(xy) > 1 else StatusCode.UNMODIFIED
            path = path_of(_entry_path(line, fields))
            if x.is_change:
                staged.append(FileChange(file=path, status=x.to_file_status()))
            if y.is_change:
                unstaged.append(FileChange(file=path, status=y.to_file_status()))
        elif prefix == "u":
            fields = line.split()
            if len(fields) < 7:
                continue
            path = path_of(_unmerged_path(line, fields))
            unstaged.append(FileChange(file=path, status=FileStatus.CONFLICT))
        elif line.startswith("? "):
            untracked.append(
                FileChange(file=path_of(line[2:]), status=FileStatus.UNTRACKED)
            )

    return RepositoryStatus(
        branch=branch, staged=staged, unstaged=unstaged, untracked=untracked
    )


def parse_branches(raw: str) -> BranchList:
    """Parse ``git branch`` output.

    ``*`` marks the current branch; ``+`` marks a branch checked out in
    another worktree and is dropped.
    """
    current: str | None = None
    names: list[str] = []
    for line in raw.splitlines():
        line = line.strip()
        if not line:
            continue
        marker = _BRANCH_MARKER_RE.match(line)
        is_current = line.startswith("*")
        name = line[marker.end() :] if marker else line.lstrip("*")
        name = name.strip()
        if not name:
            continue
        names.append(name)
        if is_current:
            current = name
    return BranchList(current=current, names=names)


def parse_log(raw: str) -> list[Commit]:
    """Parse verbose ``git log`` output into commits, newest first."""
    commits: list[Commit] = []
    current: dict[str, str] | None = None
    message: list[str] = []

    def flush() -> None:
        if current is not None:
            commits.append(Commit(**current, message="\n".join(message)))

    for line in raw.splitlines():
        if m := _COMMIT_RE.match(line):
            flush()
            current = {"hash": m.group(1)}
            message = []
        elif current is None:
            continue
        elif m := _AUTHOR_RE.match(line):
            current["author"] = m.group(1).strip()
        elif m := _DATE_RE.match(line):
            current["date"] = m.group(1).strip()
        elif line[:1].isspace() and line.strip():
            message.append(line.strip())

    flush()
    return commits


def parse_last_commit(raw: str) -> Commit:
    """Parse the four-line ``%H%n%an%n%ad%n%s`` format."""
    lines = raw.split("\n")
    if len(lines) < _LAST_COMMIT_FIELDS:
        raise ParseError("Invalid log output format")
    return Commit(hash=lines[0], author=lines[1], date=lines[2], message=lines[3])


def parse_remotes(raw: str) -> list[Remote]:
    """Parse ``git remote -v`` into remotes, in first-seen order."""
    urls: dict[str, dict[str, str]] = {}
    for line in raw.splitlines():
        m = _REMOTE_RE.match(line.strip())
        if not m:
            continue
        name, url, direction = m.groups()
        urls.setdefault(name, {})[direction] = url
    return [Remote(name=name, urls=u) for name, u in urls.items()]


def parse_ahead_behind(raw: str) -> AheadBehind:
    """Parse ``rev-list --left-right --count`` output."""
    m = _AHEAD_BEHIND_RE.match(raw)
    if not m:
        return AheadBehind()
    return AheadBehind(ahead=int(m.group(1)), behind=int(m.group(2)))


def parse_commit_hash(raw: str) -> str:
    """Extract the short hash from ``git commit`` confirmation text."""
    m = _COMMIT_HASH_RE.search(raw)
    return m.group(1) if m else "unknown"

"""Pure functions to format git data for terminal display."""

from gitcore.git.models import (
    BranchList,
    ChangeCounts,
    Commit,
    CommitOutcome,
    FileDiff,
    FileStatus,
    OperationResult,
    Remote,
    RepositoryStatus,
)

_STATUS_LETTER = {
    FileStatus.NEW: "A",
    FileStatus.DELETED: "D",
    FileStatus.MODIFIED: "M",
    FileStatus.RENAMED: "R",
    FileStatus.COPIED: "C",
    FileStatus.UNTRACKED: "?",
    FileStatus.UPDATED: "U",
    FileStatus.CONFLICT: "!",
}


def format_status(status: RepositoryStatus) -> str:
    """Format RepositoryStatus for display."""
    lines: list[str] = []

    branch_line = f"\U0001f4cb Branch: {status.branch or '(unknown)'}"
    divergence = []
    if status.ahead:
        divergence.append(f"{status.ahead} ahead")
    if status.behind:
        divergence.append(f"{status.behind} behind")
    if divergence:
        branch_line += f" ({', '.join(divergence)})"
    lines.append(branch_line)

    if status.last_commit:
        commit = status.last_commit
        lines.append(f"\U0001f4dd Last commit: {commit.hash[:7]} {commit.message}")

    for title, changes in (
        ("\U0001f7e2 Staged:", status.staged),
        ("\U0001f534 Unstaged:", status.unstaged),
        ("\u2753 Untracked:", status.untracked),
    ):
        if not changes:
            continue
        lines.append("")
        lines.append(title)
        for change in changes:
            lines.append(f"  {_STATUS_LETTER[change.status]} {change.file}")

    if status.is_clean:
        lines.append("")
        lines.append("\u2728 Working tree clean")

    return "\n".join(lines)


def format_counts(counts: ChangeCounts) -> str:
    if counts.is_clean:
        return "\u2728 Working tree clean"
    return (
        f"{counts.staged} staged, {counts.unstaged} unstaged, "
        f"{counts.untracked} untracked"
    )


def format_branches(branches: BranchList, max_display: int = 20) -> str:
    """Format branch list for display."""
    if not branches.names:
        return "\U0001f33f No branches found."

    lines: list[str] = ["\U0001f33f Branches:"]
    entries = branches.branches
    for branch in entries[:max_display]:
        marker = "* " if branch.is_current else "  "
        lines.append(f"{marker}{branch.name}")

    if len(entries) > max_display:
        lines.append(f"\n... and {len(entries) - max_display} more")
    return "\n".join(lines)


def format_log(commits: list[Commit], max_entries: int = 10) -> str:
    """Format commit history for display."""
    if not commits:
        return "\U0001f4dc No commits found."

    lines: list[str] = ["\U0001f4dc Recent commits:"]
    for commit in commits[:max_entries]:
        subject = commit.message.split("\n", 1)[0]
        lines.append(f"  {commit.hash[:7]} {subject}")
        lines.append(f"    {commit.author}, {commit.date}")
    return "\n".join(lines)


def format_remotes(remotes: list[Remote]) -> str:
    if not remotes:
        return "\U0001f310 No remotes configured."

    lines: list[str] = ["\U0001f310 Remotes:"]
    for remote in remotes:
        for direction, url in remote.urls.items():
            lines.append(f"  {remote.name}\t{url} ({direction})")
    return "\n".join(lines)


def format_diff(diff_text: str, max_length: int = 3500) -> str:
    """Truncate a diff to a readable length."""
    if not diff_text.strip():
        return "No changes to display."

    if len(diff_text) <= max_length:
        return diff_text

    total_lines = diff_text.count("\n")
    truncated = diff_text[:max_length]
    # Cut at last newline to avoid partial lines
    last_nl = truncated.rfind("\n")
    if last_nl > 0:
        truncated = truncated[:last_nl]
    return f"{truncated}\n\n... truncated ({total_lines} total lines)"


def format_diffs(diffs: list[FileDiff], max_length: int = 3500) -> str:
    if not diffs:
        return "No changes to display."
    return format_diff("\n".join(d.diff for d in diffs), max_length)


def format_result(result: OperationResult) -> str:
    text = f"\u2705 {result.message}"
    if result.details.strip():
        text += f"\n{result.details.strip()}"
    return text


def format_commit(outcome: CommitOutcome, message: str) -> str:
    return f"\u2705 {outcome.hash} \u2014 {message}"


def format_error(error: Exception) -> str:
    return f"\u274c {error}"


def format_help() -> str:
    """Return help text listing all subcommands."""
    return (
        "\U0001f6e0 Git Commands:\n"
        "\n"
        "status \u2014 Show full status\n"
        "count \u2014 Count staged/unstaged/untracked files\n"
        "branch \u2014 List branches (branch -a includes remotes)\n"
        "branch <name> \u2014 Create branch\n"
        "branch -d|-D <name> \u2014 Delete branch\n"
        "checkout <name> \u2014 Switch branch\n"
        "checkout -b <name> \u2014 Create and switch\n"
        "log [count] \u2014 Recent commits\n"
        "diff [--staged] [path] \u2014 Show changes\n"
        "add . \u2014 Stage all\n"
        "add <path> \u2014 Stage file\n"
        "reset <path> \u2014 Unstage file\n"
        "commit <msg> \u2014 Commit with message\n"
        "amend [msg] \u2014 Amend last commit\n"
        "remote \u2014 List remotes\n"
        "remote add <name> <url> | remote remove <name>\n"
        "pull [remote] [branch] | push [--force] [remote] [branch]\n"
        "fetch [remote|--all]\n"
        "help \u2014 This message"
    )

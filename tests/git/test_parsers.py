"""Tests for the porcelain, branch, log, and remote parsers."""

import pytest

from gitcore.exceptions import ParseError
from gitcore.git.models import FileStatus
from gitcore.git.parsers import (
    parse_ahead_behind,
    parse_branches,
    parse_commit_hash,
    parse_last_commit,
    parse_log,
    parse_remotes,
    parse_status,
    unquote_path,
)


class TestParseStatus:
    def test_clean_status(self):
        status = parse_status(
            "# branch.oid abc123\n# branch.head main\n"
            "# branch.upstream origin/main\n# branch.ab +0 -0\n"
        )
        assert status.branch == "main"
        assert status.staged == []
        assert status.unstaged == []
        assert status.untracked == []
        assert status.is_clean is True

    def test_one_of_each_entry_kind(self):
        raw = (
            "# branch.head feature\n"
            "1 M. N... 100644 100644 100644 abc123 def456 staged.py\n"
            "1 .M N... 100644 100644 100644 abc123 def456 unstaged.py\n"
            "2 R. N... 100644 100644 100644 abc123 def456 R100 new.py\told.py\n"
            "u UU N... 100644 100644 100644 100644 abc123 def456 ghi789 conflict.py\n"
            "? notes.txt\n"
        )
        status = parse_status(raw)
        assert status.branch == "feature"
        assert [c.file for c in status.staged] == ["staged.py", "new.py"]
        assert [c.status for c in status.staged] == [
            FileStatus.MODIFIED,
            FileStatus.RENAMED,
        ]
        assert [c.file for c in status.unstaged] == ["unstaged.py", "conflict.py"]
        assert status.unstaged[1].status == FileStatus.CONFLICT
        assert [c.file for c in status.untracked] == ["notes.txt"]
        assert status.untracked[0].status == FileStatus.UNTRACKED
        assert status.is_clean is False

    def test_both_staged_and_unstaged(self):
        status = parse_status("1 MM N... 100644 100644 100644 a b both.py\n")
        assert status.staged[0].file == "both.py"
        assert status.unstaged[0].file == "both.py"

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("A", FileStatus.NEW),
            ("D", FileStatus.DELETED),
            ("M", FileStatus.MODIFIED),
            ("R", FileStatus.RENAMED),
            ("C", FileStatus.COPIED),
            ("U", FileStatus.UPDATED),
            ("T", FileStatus.MODIFIED),
            ("Z", FileStatus.MODIFIED),
        ],
    )
    def test_status_code_table(self, code, expected):
        status = parse_status(f"1 {code}. N... 100644 100644 100644 a b f.py\n")
        assert status.staged[0].status == expected

    def test_path_with_spaces(self):
        status = parse_status("1 .M N... 100644 100644 100644 a b docs/my notes.md\n")
        assert status.unstaged[0].file == "docs/my notes.md"

    def test_short_line_uses_last_field(self):
        status = parse_status("1 A. a.py\n")
        assert status.staged[0].file == "a.py"

    def test_short_unmerged_line_uses_seventh_field(self):
        status = parse_status("u UU N... 100644 100644 abc conflict.py\n")
        assert status.unstaged[0].file == "conflict.py"
        assert status.unstaged[0].status == FileStatus.CONFLICT

    def test_malformed_lines_skipped(self):
        raw = (
            "# branch.head main\n"
            "1 M.\n"
            "u UU N...\n"
            "! ignored.log\n"
            "x something new\n"
            "1 A. N... 100644 100644 100644 000000 abc123 valid.py\n"
        )
        status = parse_status(raw)
        assert [c.file for c in status.staged] == ["valid.py"]
        assert status.unstaged == []
        assert status.untracked == []

    def test_quoted_paths_unquoted(self):
        raw = (
            '1 .M N... 100644 100644 100644 a b "caf\\303\\251.txt"\n'
            '2 R. N... 100644 100644 100644 a b R100 "na\\303\\257ve.md"\told.md\n'
            '? "tab\\there.txt"\n'
        )
        status = parse_status(raw)
        assert status.unstaged[0].file == "café.txt"
        assert status.staged[0].file == "naïve.md"
        assert status.untracked[0].file == "tab\there.txt"

    def test_nul_terminated_records(self):
        raw = (
            "# branch.oid abc123\0# branch.head main\0"
            "1 .M N... 100644 100644 100644 a b café.txt\0"
            "2 R. N... 100644 100644 100644 a b R100 new name.py\0? old trap.py\0"
            "1 A. N... 000000 100644 100644 0 a line\nbreak.txt\0"
            "? naïve file.txt\0"
        )
        status = parse_status(raw)
        assert status.branch == "main"
        assert [c.file for c in status.unstaged] == ["café.txt"]
        assert [c.file for c in status.staged] == ["new name.py", "line\nbreak.txt"]
        assert [c.status for c in status.staged] == [
            FileStatus.RENAMED,
            FileStatus.NEW,
        ]
        assert [c.file for c in status.untracked] == ["naïve file.txt"]

    def test_nul_terminated_paths_kept_verbatim(self):
        status = parse_status('? "quoted".txt\0')
        assert status.untracked[0].file == '"quoted".txt'

    def test_untracked_path_keeps_spaces(self):
        status = parse_status("? my file.txt\n")
        assert status.untracked[0].file == "my file.txt"

    def test_no_branch_header(self):
        assert parse_status("").branch is None

    def test_detached_head(self):
        assert parse_status("# branch.head (detached)\n").branch == "(detached)"

    def test_is_clean_matches_lists(self):
        samples = [
            "",
            "? a\n",
            "1 .M N... 100644 100644 100644 a b f\n",
            "1 M. N... 100644 100644 100644 a b f\n",
            "u UU N... 1 2 3 4 a b c f\n",
        ]
        for raw in samples:
            status = parse_status(raw)
            assert status.is_clean == (
                not status.staged and not status.unstaged and not status.untracked
            )


class TestUnquotePath:
    def test_plain_path_unchanged(self):
        assert unquote_path("src/app.py") == "src/app.py"

    def test_octal_utf8_bytes(self):
        assert unquote_path('"caf\\303\\251.txt"') == "café.txt"

    def test_escaped_quote_and_backslash(self):
        assert unquote_path('"say \\"hi\\" \\\\ bye"') == 'say "hi" \\ bye'

    def test_control_escapes(self):
        assert unquote_path('"a\\tb\\nc"') == "a\tb\nc"

    def test_lone_quote_unchanged(self):
        assert unquote_path('"') == '"'


class TestParseBranches:
    def test_marker_stripped_and_order_kept(self):
        branches = parse_branches("  main\n* dev\n")
        assert branches.current == "dev"
        assert branches.names == ["main", "dev"]

    def test_blank_lines_skipped(self):
        branches = parse_branches("* main\n\n  develop\n   \n")
        assert branches.names == ["main", "develop"]

    def test_no_current(self):
        assert parse_branches("  main\n").current is None

    def test_other_worktree_marker_stripped(self):
        branches = parse_branches("* main\n+ feature\n  dev\n")
        assert branches.names == ["main", "feature", "dev"]
        assert branches.current == "main"

    def test_branch_records(self):
        records = parse_branches("* main\n  dev\n").branches
        assert [(b.name, b.is_current) for b in records] == [
            ("main", True),
            ("dev", False),
        ]


class TestParseLog:
    def test_multiple_commits(self):
        raw = (
            "commit 1111111111111111111111111111111111111111\n"
            "Author: Ada <ada@example.com>\n"
            "Date:   Mon Jan 1 10:00:00 2024 +0000\n"
            "\n"
            "    Add parser\n"
            "\n"
            "commit 2222222222222222222222222222222222222222\n"
            "Merge: aaa bbb\n"
            "Author: Bob <bob@example.com>\n"
            "Date:   Sun Dec 31 09:00:00 2023 +0000\n"
            "\n"
            "    Initial commit\n"
            "\n"
            "    With a body line\n"
        )
        commits = parse_log(raw)
        assert len(commits) == 2
        assert commits[0].hash == "1" * 40
        assert commits[0].author == "Ada <ada@example.com>"
        assert commits[0].date == "Mon Jan 1 10:00:00 2024 +0000"
        assert commits[0].message == "Add parser"
        assert commits[1].author == "Bob <bob@example.com>"
        assert commits[1].message == "Initial commit\nWith a body line"

    def test_decorated_commit_line(self):
        commits = parse_log("commit abc123 (HEAD -> main)\nAuthor: A\n\n    msg\n")
        assert commits[0].hash == "abc123"

    def test_empty_input(self):
        assert parse_log("") == []

    def test_lines_before_first_commit_ignored(self):
        commits = parse_log("Author: stray\n    stray\ncommit abc\n")
        assert len(commits) == 1
        assert commits[0].author == ""
        assert commits[0].message == ""


class TestParseLastCommit:
    def test_four_lines(self):
        commit = parse_last_commit("abc123\nAda\nMon Jan 1 2024\nAdd parser")
        assert commit.hash == "abc123"
        assert commit.author == "Ada"
        assert commit.date == "Mon Jan 1 2024"
        assert commit.message == "Add parser"

    def test_too_few_lines(self):
        with pytest.raises(ParseError):
            parse_last_commit("abc123\nAda")

    def test_empty_output(self):
        with pytest.raises(ParseError):
            parse_last_commit("")


class TestParseRemotes:
    def test_groups_by_name_in_order(self):
        raw = (
            "upstream\thttps://example.com/up.git (fetch)\n"
            "upstream\thttps://example.com/up.git (push)\n"
            "origin\tgit@example.com:me/repo.git (fetch)\n"
            "origin\tgit@example.com:me/push.git (push)\n"
        )
        remotes = parse_remotes(raw)
        assert [r.name for r in remotes] == ["upstream", "origin"]
        assert remotes[1].urls == {
            "fetch": "git@example.com:me/repo.git",
            "push": "git@example.com:me/push.git",
        }

    def test_garbage_ignored(self):
        assert parse_remotes("not a remote line\n") == []


class TestParseAheadBehind:
    def test_counts(self):
        counts = parse_ahead_behind("3\t1\n")
        assert (counts.ahead, counts.behind) == (3, 1)

    def test_unparseable_is_zero(self):
        counts = parse_ahead_behind("")
        assert (counts.ahead, counts.behind) == (0, 0)


class TestParseCommitHash:
    def test_regular(self):
        assert parse_commit_hash("[main 1a2b3c4] Add parser\n 1 file changed") == "1a2b3c4"

    def test_root_commit(self):
        assert parse_commit_hash("[main (root-commit) abcdef0] Initial") == "abcdef0"

    def test_branch_with_hex_like_name(self):
        assert parse_commit_hash("[cafe/dead 1234abc] msg") == "1234abc"

    def test_missing_is_unknown(self):
        assert parse_commit_hash("committed") == "unknown"

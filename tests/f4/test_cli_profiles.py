"""Tests for the profiles command group (F4)."""

import pytest

from curriculum.cli.commands import app
from curriculum.core.profile_repository import ProfileRepository


def _stored(workdir):
    return ProfileRepository(workdir / "data" / "student-profiles.csv").load_all()


def _add(runner, name, *extra):
    return runner.invoke(
        app,
        [
            "profiles", "add",
            "--name", name,
            "--status", "Junior",
            "--language", "Python",
            "--database", "Postgres",
            "--role", "Back-End",
            *extra,
        ],
    )


@pytest.fixture
def with_languages(runner, workdir):
    for name in ["Python", "Java"]:
        runner.invoke(app, ["languages", "add", name])
    return workdir


class TestProfilesAdd:
    """Tests for `curriculum profiles add`."""

    def test_add_minimal(self, runner, with_languages):
        result = _add(runner, "Ana")

        assert result.exit_code == 0, result.output
        assert "Profile saved successfully: Ana" in result.output
        stored = _stored(with_languages)
        assert [p.full_name for p in stored] == ["Ana"]
        assert stored[0].employed is False

    def test_add_full(self, runner, with_languages):
        result = _add(
            runner, "Bob",
            "--employed", "--job", "QA intern",
            "--language", "java",
            "--database", "MySQL",
            "--whitelist",
            "--comment", "Strong tester",
        )

        assert result.exit_code == 0, result.output
        profile = _stored(with_languages)[0]
        assert profile.job_details == "QA intern"
        assert profile.programming_languages == ["Python", "Java"]
        assert profile.databases == ["Postgres", "MySQL"]
        assert profile.whitelist is True
        assert len(profile.comments) == 1
        assert profile.comments[0].endswith(" - Strong tester")

    def test_duplicate_case_variant_rejected(self, runner, with_languages):
        _add(runner, "Ana")
        result = _add(runner, "ana")

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert len(_stored(with_languages)) == 1

    def test_employed_requires_job(self, runner, with_languages):
        result = _add(runner, "Ana", "--employed")

        assert result.exit_code == 1
        assert "Provide job details" in result.output

    def test_both_flags_rejected(self, runner, with_languages):
        result = _add(runner, "Ana", "--whitelist", "--blacklist")

        assert result.exit_code == 1
        assert "not both" in result.output

    def test_blank_initial_comment_saves_nothing(self, runner, with_languages):
        result = _add(runner, "Ana", "--comment", "ok", "--comment", "   ")

        assert result.exit_code == 1
        assert "Enter a comment before saving." in result.output
        assert _stored(with_languages) == []

    def test_undefined_language_rejected(self, runner, workdir):
        result = _add(runner, "Ana")

        assert result.exit_code == 1
        assert "Define it first" in result.output


class TestProfilesList:
    """Tests for `curriculum profiles list` and `show`."""

    def test_empty(self, runner, workdir):
        result = runner.invoke(app, ["profiles", "list"])

        assert result.exit_code == 0
        assert "No stored profiles yet" in result.output

    def test_reports_skipped_records(self, runner, with_languages):
        _add(runner, "Ana")
        path = with_languages / "data" / "student-profiles.csv"
        with open(path, "a", encoding="utf-8") as f:
            f.write("broken|line\n")

        result = runner.invoke(app, ["profiles", "list"])
        assert result.exit_code == 0
        assert "1 unreadable record(s) were skipped" in result.output

    def test_show(self, runner, with_languages):
        _add(runner, "Ana")
        result = runner.invoke(app, ["profiles", "show", "ANA"])

        assert result.exit_code == 0
        assert "full_name: Ana" in result.output
        assert "preferred_role: Back-End" in result.output
        assert result.output.count("comments:") == 1
        assert "No comments recorded yet." in result.output

    def test_show_lists_comments_under_heading(self, runner, with_languages):
        _add(runner, "Ana", "--comment", "hello")
        result = runner.invoke(app, ["profiles", "show", "Ana"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        heading = lines.index("  comments:")
        assert lines[heading + 1].endswith(" - hello")

    def test_show_unknown(self, runner, workdir):
        result = runner.invoke(app, ["profiles", "show", "Nobody"])

        assert result.exit_code == 1
        assert "Profile not found" in result.output


class TestProfilesSearch:
    """Tests for `curriculum profiles search`."""

    def test_search_counts_matches(self, runner, with_languages):
        _add(runner, "Ana")
        _add(runner, "Bob", "--language", "Java")

        result = runner.invoke(app, ["profiles", "search", "--language", "java"])
        assert result.exit_code == 0
        assert "Showing 1 profile(s)." in result.output

    def test_search_no_match(self, runner, with_languages):
        _add(runner, "Ana")

        result = runner.invoke(app, ["profiles", "search", "--status", "Senior"])
        assert result.exit_code == 0
        assert "No profiles matched your filters." in result.output


class TestProfilesEdit:
    """Tests for `curriculum profiles edit`."""

    def test_rename_keeps_other_fields(self, runner, with_languages):
        _add(runner, "Bob", "--comment", "hello")

        result = runner.invoke(app, ["profiles", "edit", "bob", "--name", "Robert"])
        assert result.exit_code == 0, result.output
        assert "Updated profile for Robert." in result.output

        stored = _stored(with_languages)
        assert [p.full_name for p in stored] == ["Robert"]
        assert stored[0].academic_status == "Junior"
        assert len(stored[0].comments) == 1

    def test_whitelist_clears_blacklist(self, runner, with_languages):
        _add(runner, "Ana", "--blacklist")

        result = runner.invoke(app, ["profiles", "edit", "Ana", "--whitelist"])
        assert result.exit_code == 0, result.output
        profile = _stored(with_languages)[0]
        assert profile.whitelist is True
        assert profile.blacklist is False

    def test_rename_onto_existing_fails(self, runner, with_languages):
        _add(runner, "Ana")
        _add(runner, "Bob")

        result = runner.invoke(app, ["profiles", "edit", "Bob", "--name", "ANA"])
        assert result.exit_code == 1
        assert "Unable to update profile" in result.output

    def test_edit_unknown(self, runner, workdir):
        result = runner.invoke(app, ["profiles", "edit", "Nobody", "--status", "Senior"])
        assert result.exit_code == 1


class TestProfilesDelete:
    """Tests for `curriculum profiles delete`."""

    def test_delete_with_yes(self, runner, with_languages):
        _add(runner, "Ana")

        result = runner.invoke(app, ["profiles", "delete", "ana", "--yes"])
        assert result.exit_code == 0
        assert "Deleted profile for Ana." in result.output
        assert _stored(with_languages) == []

    def test_delete_cancelled(self, runner, with_languages):
        _add(runner, "Ana")

        result = runner.invoke(app, ["profiles", "delete", "Ana"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert len(_stored(with_languages)) == 1

    def test_delete_unknown(self, runner, workdir):
        result = runner.invoke(app, ["profiles", "delete", "Nobody", "--yes"])
        assert result.exit_code == 1
        assert "Profile not found in storage" in result.output


class TestProfilesComments:
    """Tests for `curriculum profiles comment` and `comments`."""

    def test_add_and_list_comment(self, runner, with_languages):
        _add(runner, "Ana")

        result = runner.invoke(app, ["profiles", "comment", "Ana", "Great work"])
        assert result.exit_code == 0, result.output
        assert "Added comment for Ana." in result.output

        result = runner.invoke(app, ["profiles", "comments", "Ana"])
        assert result.exit_code == 0
        assert " - Great work" in result.output

    def test_blank_comment_rejected(self, runner, with_languages):
        _add(runner, "Ana")

        result = runner.invoke(app, ["profiles", "comment", "Ana", "   "])
        assert result.exit_code == 1
        assert "Enter a comment before saving." in result.output

    def test_no_comments(self, runner, with_languages):
        _add(runner, "Ana")

        result = runner.invoke(app, ["profiles", "comments", "Ana"])
        assert result.exit_code == 0
        assert "No comments recorded yet." in result.output

    def test_bracketed_comment_printed_verbatim(self, runner, with_languages):
        _add(runner, "Ana", "--whitelist")

        result = runner.invoke(app, ["profiles", "comment", "Ana", "see [/b] notes"])
        assert result.exit_code == 0, result.output
        assert "see [/b] notes" in result.output

        for command in (["profiles", "comments", "Ana"], ["profiles", "show", "Ana"],
                        ["reports", "show", "Ana"]):
            result = runner.invoke(app, command)
            assert result.exit_code == 0, result.output
            assert "see [/b] notes" in result.output


class TestBracketedNames:
    """Names containing Rich markup characters are printed as typed."""

    def test_name_round_trips_through_commands(self, runner, with_languages):
        result = _add(runner, "[red]Ana[/red]", "--whitelist")
        assert result.exit_code == 0, result.output
        assert "Profile saved successfully: [red]Ana[/red]" in result.output

        result = runner.invoke(app, ["profiles", "comment", "[red]ana[/red]", "hi"])
        assert result.exit_code == 0, result.output
        assert "Added comment for [red]Ana[/red]." in result.output

        result = runner.invoke(app, ["reports", "whitelist"])
        assert result.exit_code == 0, result.output
        assert "[red]Ana[/red]" in result.output

    def test_unknown_language_with_brackets_reported(self, runner, with_languages):
        result = _add(runner, "Ana", "--language", "[/x]")

        assert result.exit_code == 1
        assert "Unknown programming language: [/x]" in result.output

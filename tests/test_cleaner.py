"""Tests for deletion runs."""

import logging

import pytest

from branch_cleaner.cleaner import CleanResult, delete_branches
from branch_cleaner.exceptions import DeletionFailed


class FakeSink:
    """Records deletions and fails for selected branches."""

    def __init__(self, failing: tuple[str, ...] = ()) -> None:
        self.failing = failing
        self.calls: list[str] = []

    def delete_branch(self, branch_name: str) -> None:
        self.calls.append(branch_name)
        if branch_name in self.failing:
            raise DeletionFailed(branch_name, "branch has unmerged commits")


def test_deletes_in_order() -> None:
    """Test that branches are deleted one at a time in order."""
    sink = FakeSink()
    result = delete_branches(sink, ["b", "a", "c"])
    assert sink.calls == ["b", "a", "c"]
    assert result == CleanResult(dry_run=False, deleted=["b", "a", "c"], failed=[])
    assert result.ok


def test_failure_does_not_stop_the_run() -> None:
    """Test that one failed deletion among three still processes the others."""
    sink = FakeSink(failing=("feature/b",))
    result = delete_branches(sink, ["feature/a", "feature/b", "feature/c"])
    assert sink.calls == ["feature/a", "feature/b", "feature/c"]
    assert result.deleted == ["feature/a", "feature/c"]
    assert [failure.branch for failure in result.failed] == ["feature/b"]
    assert result.failed[0].cause == "branch has unmerged commits"
    assert not result.ok


def test_dry_run_touches_nothing() -> None:
    """Test that a dry run reports the branches without deleting."""
    sink = FakeSink()
    result = delete_branches(sink, ["feature/a", "feature/b"], dry_run=True)
    assert sink.calls == []
    assert result.dry_run
    assert result.deleted == ["feature/a", "feature/b"]
    assert result.ok


def test_nothing_to_delete() -> None:
    """Test an empty run."""
    sink = FakeSink()
    result = delete_branches(sink, [])
    assert sink.calls == []
    assert result.deleted == []
    assert result.ok


def test_failure_is_not_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Test that failures are left to the final summary at the default log level."""
    sink = FakeSink(failing=("feature/a",))
    with caplog.at_level(logging.INFO, logger="branch_cleaner.cleaner"):
        result = delete_branches(sink, ["feature/a"])
    assert not result.ok
    assert [record.levelno for record in caplog.records] == [logging.INFO]
    assert "feature/a" in caplog.records[0].getMessage()

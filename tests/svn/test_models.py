"""Tests for svn.models module.

Tests the serializable data models for Subversion history.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from svnlens.svn.models import (
    ChangeEntry,
    CopySource,
    RawChange,
    RawLogEntry,
    RevisionRecord,
    StructuredDiff,
)


class TestRawChange:
    """Tests for RawChange dataclass."""

    def test_from_svn_negative_revision_is_not_a_copy(self) -> None:
        """The protocol's -1 sentinel becomes None."""
        raw = RawChange.from_svn("A", None, -1)
        assert raw == RawChange("A", None, None)
        assert raw.is_copy is False

    def test_from_svn_drops_stray_copy_path(self) -> None:
        """A copy path without a copy revision is discarded."""
        assert RawChange.from_svn("M", "/old", -1).copy_from_path is None

    def test_from_svn_copy(self) -> None:
        """Non-negative copy revisions are kept with their path."""
        raw = RawChange.from_svn("A", "/old-dir", 5)
        assert raw == RawChange("A", "/old-dir", 5)
        assert raw.is_copy is True

    def test_from_svn_revision_zero_is_a_copy(self) -> None:
        """Copies from r0 are still copies."""
        assert RawChange.from_svn("A", "/", 0).is_copy is True

    def test_from_svn_decodes_bytes_action(self) -> None:
        """Actions may arrive as bytes."""
        assert RawChange.from_svn(b"D", None, -1).action == "D"

    def test_no_copy_revision_is_not_a_copy(self) -> None:
        """None is the only "not a copy" marker."""
        assert RawChange("A").is_copy is False

    def test_is_frozen(self) -> None:
        """RawChange is immutable."""
        raw = RawChange("A")
        with pytest.raises(AttributeError):
            raw.action = "M"  # type: ignore[misc]


class TestRawLogEntry:
    """Tests for RawLogEntry dataclass."""

    def test_defaults_to_no_changes(self) -> None:
        entry = RawLogEntry(revision=0, author=None, timestamp=None, message=None)
        assert dict(entry.changed_paths) == {}


class TestChangeEntry:
    """Tests for ChangeEntry dataclass."""

    def test_plain_path(self) -> None:
        change = ChangeEntry("file", "trunk/commit1", "edit")
        assert change.path == "trunk/commit1"
        assert change.to_list() == ["file", "trunk/commit1", "edit"]

    def test_copy_path(self) -> None:
        change = ChangeEntry("directory", CopySource("new-dir", "old-dir", 5), "copy")
        assert change.path == "new-dir"
        assert change.to_list() == ["directory", ["new-dir", "old-dir", 5], "copy"]


class TestRevisionRecord:
    """Tests for RevisionRecord dataclass."""

    def test_to_dict(self) -> None:
        record = RevisionRecord(
            revision=11,
            author="railsmonk",
            timestamp=datetime(2012, 5, 1, 12, 0, tzinfo=UTC),
            message="editing files",
            changes=(
                ChangeEntry("file", "commit1", "edit"),
                ChangeEntry("file", "commit3", "edit"),
            ),
        )
        assert record.to_dict() == {
            "revision": 11,
            "author": "railsmonk",
            "timestamp": "2012-05-01T12:00:00+00:00",
            "message": "editing files",
            "changes": [["file", "commit1", "edit"], ["file", "commit3", "edit"]],
        }

    def test_to_dict_without_timestamp(self) -> None:
        record = RevisionRecord(revision=0, author="", timestamp=None, message="")
        assert record.to_dict()["timestamp"] is None
        assert record.to_dict()["changes"] == []


class TestStructuredDiff:
    """Tests for StructuredDiff dataclass."""

    def test_defaults_are_independent(self) -> None:
        """Each instance gets its own maps."""
        first, second = StructuredDiff(), StructuredDiff()
        first.files["a"] = b"x"
        assert second.files == {}

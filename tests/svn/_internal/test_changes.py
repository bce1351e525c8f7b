"""Tests for svn/_internal/changes.py module."""

from __future__ import annotations

import pytest

from svnlens.svn._internal.changes import classify_change
from svnlens.svn.errors import UnknownChangeCodeError
from svnlens.svn.models import RawChange


class TestClassifyChange:
    """Tests for classify_change function."""

    @pytest.mark.parametrize(
        ("letter", "expected"),
        [("A", "add"), ("M", "edit"), ("D", "delete"), ("R", "replace")],
    )
    def test_letters(self, letter: str, expected: str) -> None:
        """Each known letter maps to its change kind."""
        assert classify_change(RawChange.from_svn(letter, None, -1)) == expected

    def test_add_without_copy(self) -> None:
        """'A' with copy revision -1 is a plain add."""
        assert classify_change(RawChange.from_svn("A", None, -1)) == "add"

    def test_copy_overrides_letter(self) -> None:
        """'M' with copy revision 5 is a copy."""
        assert classify_change(RawChange.from_svn("M", "/trunk/a.c", 5)) == "copy"

    @pytest.mark.parametrize("letter", ["A", "R", "D"])
    def test_copy_with_any_letter(self, letter: str) -> None:
        """Copy detection wins whatever the letter is."""
        assert classify_change(RawChange(letter, "/trunk", 0)) == "copy"

    def test_copy_with_unknown_letter(self) -> None:
        """Even an unrecognized letter is a copy when a source is present."""
        assert classify_change(RawChange("X", "/trunk", 3)) == "copy"

    def test_unknown_letter(self) -> None:
        """Unrecognized letters fail loudly."""
        with pytest.raises(UnknownChangeCodeError) as exc_info:
            classify_change(RawChange("X"), path="lib/a.c", revision=9)
        assert exc_info.value.code == "X"
        assert exc_info.value.path == "lib/a.c"
        assert exc_info.value.revision == 9
        assert "lib/a.c" in str(exc_info.value)

    def test_lowercase_letter_is_unknown(self) -> None:
        """Letters are matched exactly."""
        with pytest.raises(UnknownChangeCodeError):
            classify_change(RawChange("a"))

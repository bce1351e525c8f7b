"""Test fixtures for svn module."""

from __future__ import annotations

import pytest

from svnlens.svn.models import RawChange
from tests.svn.fakes import SVNLOOK_OUTPUT, FakeSession, entry


@pytest.fixture
def copy_session() -> FakeSession:
    """Repository whose r6 copies old-dir@5 to new-dir."""
    return FakeSession(
        [
            entry(0, {"/": RawChange("A")}, author=None, message=None),
            entry(5, {"/old-dir": RawChange("A")}, message="created directory"),
            entry(
                6,
                {"/new-dir": RawChange.from_svn("A", "/old-dir", 5)},
                message="copied directory",
            ),
        ],
        {("old-dir", 5): "directory", ("new-dir", 6): "directory"},
    )


@pytest.fixture
def history_session() -> FakeSession:
    """Repository with r1..r7 touching files, directories and deletions."""
    return FakeSession(
        [
            entry(0, author=None, message=None),
            entry(1, {"/trunk": RawChange("A"), "/trunk/commit1.txt": RawChange("A")}),
            entry(2, {"/trunk/commit1.txt": RawChange("M")}, message="  edit file \n\n"),
            entry(3, {"/trunk/Makefile": RawChange("A")}, message=None),
            entry(4, {"/trunk/Makefile": RawChange("R")}),
            entry(5, {"/trunk/old.txt": RawChange("A")}),
            entry(6, {"/trunk/libs": RawChange("A")}),
            entry(
                7,
                {
                    "/trunk/old.txt": RawChange("D"),
                    "/trunk/new.c": RawChange("A"),
                    "/trunk/libs": RawChange("D"),
                    "/trunk/commit1.txt": RawChange("M"),
                    "/trunk/copy.txt": RawChange.from_svn("A", "/trunk/commit1.txt", 5),
                    "/trunk": RawChange("M"),
                },
            ),
        ],
        {
            ("trunk", 1): "directory",
            ("trunk", 7): "directory",
            ("trunk/Makefile", 3): "file",
            ("trunk/Makefile", 4): "file",
            ("trunk/libs", 6): "directory",
            ("trunk/libs", 7): "none",
        },
        diff_output=SVNLOOK_OUTPUT,
    )


@pytest.fixture
def remote_session() -> FakeSession:
    """Session bound to a remote URL with no local repository directory."""
    return FakeSession(
        [entry(0), entry(1, {"/a.txt": RawChange("A")})],
        url="https://svn.example.com/repo",
        local_path=None,
    )

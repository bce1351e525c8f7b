"""Collaborator protocols: repository sessions and diff generators."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from svnlens.svn.models import DiffAction, PathKind, RawLogEntry


class RepositorySession(Protocol):
    """An open handle to one repository, local or remote.

    Implementations must tolerate concurrent calls from several threads;
    the history and diff functions never lock on their behalf.
    """

    @property
    def url(self) -> str:
        """Repository URL the session was opened with."""
        ...

    @property
    def local_path(self) -> Path | None:
        """Repository root directory on local disk, or None for remote sessions."""
        ...

    def latest_revision(self) -> int:
        """Youngest revision in the repository."""
        ...

    def log(self, start: int, end: int) -> list[RawLogEntry]:
        """Raw log entries for start..end inclusive, with changed paths."""
        ...

    def check_path(self, path: str, revision: int) -> PathKind:
        """Node kind of path at revision: 'file', 'directory' or 'none'.

        path is relative to the repository root, like the paths in log
        entries, even when the session was opened on a subdirectory URL.
        """
        ...

    def generate_diff(self, revision: int, generator: DiffGenerator | None = None) -> bytes:
        """Combined content and property diff for one revision.

        When a generator is given, every section of the diff is also handed
        to it as it is parsed.

        Raises:
            UnsupportedForRemoteSessionError: If local_path is None.
        """
        ...


class DiffGenerator(Protocol):
    """Strategy that receives a revision's diff one section at a time."""

    def display_file_diff(self, path: str, action: DiffAction, body: bytes) -> None:
        """Content diff of one file, including its header lines."""
        ...

    def display_prop_diff(self, path: str, body: bytes) -> None:
        """Property changes of one file or directory, including the header."""
        ...

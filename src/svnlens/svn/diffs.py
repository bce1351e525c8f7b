"""Diff extraction for single revisions of local repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from svnlens.svn._internal import RevisionSelector, resolve_revision
from svnlens.svn.errors import UnsupportedForRemoteSessionError
from svnlens.svn.models import DiffAction, StructuredDiff

if TYPE_CHECKING:
    from svnlens.svn.base import DiffGenerator, RepositorySession


class StructuredDiffGenerator:
    """Buffers file and property diffs per path.

    Deleted files are skipped: there is no post-change content to diff.
    Repeated sections for the same path are appended in order.
    """

    def __init__(self) -> None:
        self._files: dict[str, bytearray] = {}
        self._properties: dict[str, bytearray] = {}

    def display_file_diff(self, path: str, action: DiffAction, body: bytes) -> None:
        if action == "Deleted":
            return
        self._files.setdefault(path, bytearray()).extend(body)

    def display_prop_diff(self, path: str, body: bytes) -> None:
        self._properties.setdefault(path, bytearray()).extend(body)

    def grab_diff(self) -> StructuredDiff:
        """Accumulated diffs so far."""
        return StructuredDiff(
            files={path: bytes(buf) for path, buf in self._files.items()},
            properties={path: bytes(buf) for path, buf in self._properties.items()},
        )


@overload
def raw_diff(session: RepositorySession, revision: RevisionSelector) -> bytes: ...


@overload
def raw_diff(
    session: RepositorySession, revision: RevisionSelector, generator: DiffGenerator
) -> None: ...


def raw_diff(
    session: RepositorySession,
    revision: RevisionSelector,
    generator: DiffGenerator | None = None,
) -> bytes | None:
    """File and property changes for a revision as one byte string.

    With a generator, the output is handed to it section by section and
    nothing is returned.

    Only works with sessions bound to a local repository directory (not a
    working copy).

    Raises:
        UnsupportedForRemoteSessionError: If the session has no local directory.
        InvalidRevisionError: If revision is negative or malformed.
        RevisionNotFoundError: If revision is beyond the latest revision.
    """
    if session.local_path is None:
        raise UnsupportedForRemoteSessionError(session.url)
    revnum = resolve_revision(session, revision)
    output = session.generate_diff(revnum, generator)
    return None if generator is not None else output


def structured_diff(session: RepositorySession, revision: RevisionSelector) -> StructuredDiff:
    """File and property changes for a revision, keyed by path.

    Only works with sessions bound to a local repository directory.
    """
    generator = StructuredDiffGenerator()
    raw_diff(session, revision, generator)
    return generator.grab_diff()

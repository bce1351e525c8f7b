"""Revision selector resolution shared by history and diff queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from svnlens.svn.errors import InvalidRevisionError, RevisionNotFoundError

if TYPE_CHECKING:
    from svnlens.svn.base import RepositorySession

HEAD = "HEAD"

RevisionSelector = int | str


def resolve_revision(session: RepositorySession, revision: RevisionSelector) -> int:
    """Turn an int, numeric string or 'HEAD' into an existing revision number.

    Raises:
        InvalidRevisionError: If the selector is negative or not a revision.
        RevisionNotFoundError: If it is beyond the latest revision.
    """
    if isinstance(revision, bool):
        raise InvalidRevisionError(revision)

    if isinstance(revision, str):
        if revision.strip().upper() == HEAD:
            return session.latest_revision()
        try:
            revision = int(revision.strip().lstrip("rR"))
        except ValueError:
            raise InvalidRevisionError(revision) from None

    if not isinstance(revision, int) or revision < 0:
        raise InvalidRevisionError(revision)

    latest = session.latest_revision()
    if revision > latest:
        raise RevisionNotFoundError(revision, latest)
    return revision

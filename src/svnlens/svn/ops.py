"""Subversion history and diff queries bound to one session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from svnlens.svn import diffs, history
from svnlens.svn._internal import RevisionSelector

if TYPE_CHECKING:
    from svnlens.config.models import SessionConfig
    from svnlens.svn.base import DiffGenerator, RepositorySession
    from svnlens.svn.models import RevisionRecord, StructuredDiff


class SvnOps:
    """Thin wrapper around a repository session returning serializable models."""

    def __init__(self, session: RepositorySession) -> None:
        self._session = session

    @classmethod
    def open(
        cls,
        url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        config: SessionConfig | None = None,
    ) -> SvnOps:
        """Open a subvertpy-backed session on url."""
        from svnlens.svn.session import open_session

        return cls(open_session(url, username, password, config=config))

    @property
    def session(self) -> RepositorySession:
        """
        Direct access to the underlying session.

        Escape hatch for advanced consumers. Bypasses normalization.
        """
        return self._session

    # =========================================================================
    # History
    # =========================================================================

    def latest_revision(self) -> int:
        """Youngest revision."""
        return history.latest_revision(self._session)

    def all_revisions(self) -> list[RevisionRecord]:
        """Every revision from r1 through the latest."""
        return history.all_revisions(self._session)

    def one_revision(self, revision: RevisionSelector) -> RevisionRecord:
        """One revision record."""
        return history.one_revision(self._session, revision)

    # =========================================================================
    # Diffs (local repositories only)
    # =========================================================================

    def raw_diff(
        self, revision: RevisionSelector, generator: DiffGenerator | None = None
    ) -> bytes | None:
        """Combined diff bytes, or None when a generator consumed the output."""
        if generator is None:
            return diffs.raw_diff(self._session, revision)
        return diffs.raw_diff(self._session, revision, generator)

    def structured_diff(self, revision: RevisionSelector) -> StructuredDiff:
        """Per-path file and property diffs."""
        return diffs.structured_diff(self._session, revision)

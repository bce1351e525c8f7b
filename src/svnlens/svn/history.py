"""Revision log normalization: raw log entries to RevisionRecords."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from svnlens.svn._internal import (
    RevisionSelector,
    classify_change,
    normalize_message,
    normalize_path,
    resolve_kind,
    resolve_revision,
)
from svnlens.svn.errors import RepositoryAccessError, RevisionNotFoundError
from svnlens.svn.models import ChangeEntry, CopySource, RawChange, RawLogEntry, RevisionRecord

if TYPE_CHECKING:
    from svnlens.svn.base import RepositorySession

log = structlog.get_logger(__name__)


def latest_revision(session: RepositorySession) -> int:
    """Youngest revision of the repository."""
    return session.latest_revision()


def all_revisions(session: RepositorySession) -> list[RevisionRecord]:
    """Every revision from r1 through the latest, in ascending order."""
    latest = session.latest_revision()
    if latest < 1:
        return []
    entries = session.log(1, latest)
    records = sorted(
        (normalize_entry(session, entry) for entry in entries),
        key=lambda record: record.revision,
    )
    log.debug("revisions_loaded", count=len(records), latest=latest)
    return records


def one_revision(session: RepositorySession, revision: RevisionSelector) -> RevisionRecord:
    """A single revision record.

    Example record for a copied directory::

        RevisionRecord(
            revision=6,
            author="railsmonk",
            message="copied directory",
            changes=(ChangeEntry("directory", CopySource("new-dir", "old-dir", 5), "copy"),),
        )

    Raises:
        InvalidRevisionError: If revision is negative or malformed.
        RevisionNotFoundError: If revision is beyond the latest revision.
        RepositoryAccessError: If the session cannot be queried.
    """
    revnum = resolve_revision(session, revision)
    entries = session.log(revnum, revnum)
    for entry in entries:
        if entry.revision == revnum:
            return normalize_entry(session, entry)
    raise RevisionNotFoundError(revnum)


def normalize_entry(session: RepositorySession, entry: RawLogEntry) -> RevisionRecord:
    """Build a RevisionRecord from one raw log entry.

    Revision 0 never has changes: the repository root's creation is not a
    meaningful path change, whatever the log reports for it.
    """
    changes = () if entry.revision == 0 else changed_paths(session, entry)
    return RevisionRecord(
        revision=entry.revision,
        author=entry.author or "",
        timestamp=entry.timestamp,
        message=normalize_message(entry.message),
        changes=changes,
    )


def changed_paths(session: RepositorySession, entry: RawLogEntry) -> tuple[ChangeEntry, ...]:
    """Classified changes of one entry, sorted by path."""
    paths = sorted(
        ((normalize_path(path), raw) for path, raw in entry.changed_paths.items()),
        key=lambda item: item[0],
    )
    return tuple(_change_entry(session, entry.revision, path, raw) for path, raw in paths)


def _change_entry(
    session: RepositorySession, revision: int, path: str, raw: RawChange
) -> ChangeEntry:
    change_kind = classify_change(raw, path=path, revision=revision)
    if change_kind != "copy":
        return ChangeEntry(resolve_kind(session, path, revision), path, change_kind)
    if raw.copy_from_path is None or raw.copy_from_revision is None:
        raise RepositoryAccessError(
            "log", "copy reported without a source path", revision=revision, path=path
        )
    source = CopySource(path, normalize_path(raw.copy_from_path), raw.copy_from_revision)
    return ChangeEntry(resolve_kind(session, path, revision), source, change_kind)

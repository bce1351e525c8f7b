"""Serializable data models for Subversion history."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

NodeKind = Literal["file", "directory"]
PathKind = Literal["file", "directory", "none"]
ChangeKind = Literal["add", "edit", "delete", "replace", "copy"]
DiffAction = Literal["Added", "Modified", "Deleted", "Copied"]


# =============================================================================
# Raw log data (as reported by a repository session)
# =============================================================================


@dataclass(frozen=True, slots=True)
class RawChange:
    """One changed path as the repository reports it."""

    action: str
    copy_from_path: str | None = None
    copy_from_revision: int | None = None

    @classmethod
    def from_svn(
        cls, action: str | bytes, copy_from_path: str | None, copy_from_revision: int | None
    ) -> RawChange:
        """Build from the protocol triple, where a negative revision means 'not a copy'."""
        if isinstance(action, bytes):
            action = action.decode("ascii")
        if copy_from_revision is None or copy_from_revision < 0:
            return cls(action, None, None)
        return cls(action, copy_from_path, copy_from_revision)

    @property
    def is_copy(self) -> bool:
        return self.copy_from_revision is not None


@dataclass(frozen=True, slots=True)
class RawLogEntry:
    """One log entry before normalization.

    ``changed_paths`` carries no ordering; consumers must not rely on
    iteration order.
    """

    revision: int
    author: str | None
    timestamp: datetime | None
    message: str | None
    changed_paths: Mapping[str, RawChange] = field(default_factory=dict)


# =============================================================================
# Normalized history
# =============================================================================


@dataclass(frozen=True, slots=True)
class CopySource:
    """Destination of a copy and where it was copied from."""

    destination: str
    source: str
    source_revision: int

    def to_list(self) -> list[Any]:
        return [self.destination, self.source, self.source_revision]


@dataclass(frozen=True, slots=True)
class ChangeEntry:
    """One path's change within a revision."""

    node_kind: NodeKind
    path_info: str | CopySource
    change_kind: ChangeKind

    @property
    def path(self) -> str:
        """Changed path; the destination for copies."""
        if isinstance(self.path_info, CopySource):
            return self.path_info.destination
        return self.path_info

    def to_list(self) -> list[Any]:
        if isinstance(self.path_info, CopySource):
            return [self.node_kind, self.path_info.to_list(), self.change_kind]
        return [self.node_kind, self.path_info, self.change_kind]


@dataclass(frozen=True, slots=True)
class RevisionRecord:
    """One committed revision."""

    revision: int
    author: str
    timestamp: datetime | None
    message: str
    changes: tuple[ChangeEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "revision": self.revision,
            "author": self.author,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "message": self.message,
            "changes": [change.to_list() for change in self.changes],
        }


# =============================================================================
# Diffs
# =============================================================================


@dataclass(frozen=True, slots=True)
class StructuredDiff:
    """Per-path file content and property diffs for one revision."""

    files: dict[str, bytes] = field(default_factory=dict)
    properties: dict[str, bytes] = field(default_factory=dict)

"""Subversion introspection module.

The subvertpy-backed session lives in ``svnlens.svn.session`` and is not
imported here, so the history and diff functions can run against any
RepositorySession implementation.
"""

from svnlens.svn._internal import HEAD, classify_change, resolve_kind, resolve_revision
from svnlens.svn.base import DiffGenerator, RepositorySession
from svnlens.svn.diffs import StructuredDiffGenerator, raw_diff, structured_diff
from svnlens.svn.errors import (
    AuthenticationError,
    InvalidRevisionError,
    PathNotFoundError,
    RepositoryAccessError,
    RevisionNotFoundError,
    SvnError,
    UnknownChangeCodeError,
    UnsupportedForRemoteSessionError,
)
from svnlens.svn.history import all_revisions, latest_revision, one_revision
from svnlens.svn.models import (
    ChangeEntry,
    CopySource,
    RawChange,
    RawLogEntry,
    RevisionRecord,
    StructuredDiff,
)
from svnlens.svn.ops import SvnOps

__all__ = [
    # Main class
    "SvnOps",
    # Operations
    "all_revisions",
    "one_revision",
    "latest_revision",
    "raw_diff",
    "structured_diff",
    "classify_change",
    "resolve_kind",
    "resolve_revision",
    "HEAD",
    # Protocols
    "RepositorySession",
    "DiffGenerator",
    "StructuredDiffGenerator",
    # Models
    "RevisionRecord",
    "ChangeEntry",
    "CopySource",
    "RawLogEntry",
    "RawChange",
    "StructuredDiff",
    # Errors
    "SvnError",
    "RepositoryAccessError",
    "AuthenticationError",
    "RevisionNotFoundError",
    "InvalidRevisionError",
    "UnknownChangeCodeError",
    "UnsupportedForRemoteSessionError",
    "PathNotFoundError",
]

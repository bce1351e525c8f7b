"""Internal components for repository introspection - not part of public API.

Only the protocol-independent helpers are exported here; the subvertpy
error mapping and constants are imported directly by the session.
"""

from svnlens.svn._internal.changes import classify_change
from svnlens.svn._internal.diffparse import DiffSection, dispatch_sections, iter_sections
from svnlens.svn._internal.nodes import resolve_kind
from svnlens.svn._internal.parsing import (
    decode_prop,
    has_extension,
    normalize_message,
    normalize_path,
    parse_svn_date,
)
from svnlens.svn._internal.revisions import HEAD, RevisionSelector, resolve_revision
from svnlens.svn._internal.svnlook import run_svnlook_diff

__all__ = [
    "HEAD",
    "DiffSection",
    "RevisionSelector",
    "classify_change",
    "decode_prop",
    "dispatch_sections",
    "has_extension",
    "iter_sections",
    "normalize_message",
    "normalize_path",
    "parse_svn_date",
    "resolve_kind",
    "resolve_revision",
    "run_svnlook_diff",
]

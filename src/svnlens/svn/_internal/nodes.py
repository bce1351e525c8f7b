"""Node kind resolution for changed paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from svnlens.svn._internal.parsing import has_extension
from svnlens.svn.errors import PathNotFoundError
from svnlens.svn.models import NodeKind

if TYPE_CHECKING:
    from svnlens.svn.base import RepositorySession

log = structlog.get_logger(__name__)


def resolve_kind(session: RepositorySession, path: str, revision: int) -> NodeKind:
    """Return whether path is a file or a directory at revision.

    Paths whose last segment has a period are taken to be files without
    asking the repository. Extensionless files (Makefile, README) are
    therefore looked up like directories, and dotted directory names
    (lib.d/) are reported as files.

    Everything else is looked up at revision; a path deleted in that very
    revision no longer exists there, so a 'none' answer is retried one
    revision earlier.

    Raises:
        PathNotFoundError: If the path exists at neither revision.
        RepositoryAccessError: If the session cannot be queried.
    """
    if has_extension(path):
        return "file"

    kind = session.check_path(path, revision)
    if kind == "none":
        if revision <= 0:
            raise PathNotFoundError(path, revision)
        log.debug("node_kind_fallback", path=path, revision=revision)
        kind = session.check_path(path, revision - 1)
        if kind == "none":
            raise PathNotFoundError(path, revision)
    return kind

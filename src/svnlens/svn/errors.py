"""Subversion module error types."""

from __future__ import annotations


class SvnError(Exception):
    """Base error for repository introspection."""

    pass


class RepositoryAccessError(SvnError):
    """Repository could not be reached, authenticated, or queried."""

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        revision: int | None = None,
        path: str | None = None,
        url: str | None = None,
    ) -> None:
        where = [f"r{revision}" if revision is not None else None, path, url]
        context = ", ".join(part for part in where if part)
        context_part = f" ({context})" if context else ""
        super().__init__(f"{operation} failed{context_part}: {message}")
        self.operation = operation
        self.revision = revision
        self.path = path
        self.url = url


class AuthenticationError(RepositoryAccessError):
    """Credentials were missing or rejected."""


class RevisionNotFoundError(SvnError):
    """Revision number is beyond the repository's latest revision."""

    def __init__(self, revision: int, latest: int | None = None) -> None:
        latest_part = f" (latest is r{latest})" if latest is not None else ""
        super().__init__(f"No such revision: r{revision}{latest_part}")
        self.revision = revision
        self.latest = latest


class InvalidRevisionError(SvnError, ValueError):
    """Revision selector is negative or not a revision at all."""

    def __init__(self, revision: object) -> None:
        super().__init__(f"Invalid revision: {revision!r}. Expected a non-negative int or 'HEAD'")
        self.revision = revision


class UnknownChangeCodeError(SvnError):
    """Repository reported a change letter outside A/M/D/R."""

    def __init__(self, code: str, path: str | None = None, revision: int | None = None) -> None:
        where = f" for {path}" if path else ""
        at = f" in r{revision}" if revision is not None else ""
        super().__init__(f"Unknown change code {code!r}{where}{at}")
        self.code = code
        self.path = path
        self.revision = revision


class UnsupportedForRemoteSessionError(SvnError):
    """Operation needs a repository directory on local disk."""

    def __init__(self, url: str, operation: str = "diff") -> None:
        super().__init__(
            f"Cannot {operation} {url}: only local file:// repositories are supported"
        )
        self.url = url
        self.operation = operation


class PathNotFoundError(SvnError):
    """Path exists neither at the revision nor at the one before it."""

    def __init__(self, path: str, revision: int) -> None:
        super().__init__(f"Path not found: {path} at r{revision} or earlier")
        self.path = path
        self.revision = revision

"""Centralized error mapping for subvertpy exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

import subvertpy

from svnlens.svn._internal.constants import AUTH_ERRORS, ERR_FS_NO_SUCH_REVISION
from svnlens.svn.errors import AuthenticationError, RepositoryAccessError, RevisionNotFoundError


def _unpack(exc: subvertpy.SubversionException) -> tuple[str, int | None]:
    """SubversionException carries (message, error number) in its args."""
    args = exc.args
    message = str(args[0]) if args else str(exc)
    code = args[1] if len(args) > 1 and isinstance(args[1], int) else None
    return message, code


class ErrorMapper:
    """Maps subvertpy exceptions to domain errors."""

    @staticmethod
    @contextmanager
    def guard(
        operation: str,
        *,
        revision: int | None = None,
        path: str | None = None,
        url: str | None = None,
    ) -> Iterator[None]:
        """Context manager for consistent exception translation."""
        try:
            yield
        except subvertpy.SubversionException as e:
            message, code = _unpack(e)
            if code in AUTH_ERRORS:
                raise AuthenticationError(
                    operation, message, revision=revision, path=path, url=url
                ) from e
            if code == ERR_FS_NO_SUCH_REVISION and revision is not None:
                raise RevisionNotFoundError(revision) from e
            raise RepositoryAccessError(
                operation, message, revision=revision, path=path, url=url
            ) from e


def svn_operation(
    operation: str,
    *,
    revision: int | None = None,
    path: str | None = None,
    url: str | None = None,
) -> AbstractContextManager[None]:
    """Context manager for consistent exception translation."""
    return ErrorMapper.guard(operation, revision=revision, path=path, url=url)

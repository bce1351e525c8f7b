"""Repository sessions over subvertpy (log, node kinds) and svnlook (diffs)."""

from __future__ import annotations

import functools
import re
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

import structlog
import subvertpy
from subvertpy import ra

from svnlens.config.models import SessionConfig
from svnlens.svn._internal import decode_prop, dispatch_sections, parse_svn_date, run_svnlook_diff
from svnlens.svn._internal.constants import (
    NODE_DIR,
    NODE_FILE,
    NODE_NONE,
    PROP_REVISION_AUTHOR,
    PROP_REVISION_DATE,
    PROP_REVISION_LOG,
)
from svnlens.svn._internal.errors import svn_operation
from svnlens.svn.base import DiffGenerator
from svnlens.svn.errors import RepositoryAccessError, UnsupportedForRemoteSessionError
from svnlens.svn.models import PathKind, RawChange, RawLogEntry

log = structlog.get_logger(__name__)

_KIND_NAMES: dict[int, PathKind] = {
    NODE_NONE: "none",
    NODE_FILE: "file",
    NODE_DIR: "directory",
}

_SCHEME_RE = re.compile(r"handles '([a-z0-9+.-]+)' scheme")


@functools.cache
def available_schemes() -> frozenset[str]:
    """URL schemes the linked libsvn can open, discovered once per process."""
    modules = ra.print_modules()
    if isinstance(modules, bytes):
        modules = modules.decode("utf-8", errors="replace")
    schemes = frozenset(_SCHEME_RE.findall(modules))
    log.debug("ra_modules_loaded", schemes=sorted(schemes))
    return schemes


def _require_scheme(url: str) -> None:
    scheme = urlparse(url).scheme.lower()
    if not scheme:
        raise RepositoryAccessError("open", "URL has no scheme", url=url)
    schemes = available_schemes()
    # svn+ssh and friends tunnel the 'svn' scheme
    base = scheme.split("+", 1)[0]
    if schemes and base not in schemes:
        supported = ", ".join(sorted(schemes))
        raise RepositoryAccessError(
            "open", f"unsupported scheme {scheme!r} (supported: {supported})", url=url
        )


def _make_auth(username: str | None, password: str | None) -> ra.Auth:
    auth = ra.Auth(
        [
            ra.get_simple_provider(),
            ra.get_username_provider(),
            ra.get_ssl_server_trust_file_provider(),
        ]
    )
    if username is not None:
        auth.set_parameter(subvertpy.AUTH_PARAM_DEFAULT_USERNAME, username)
    if password is not None:
        auth.set_parameter(subvertpy.AUTH_PARAM_DEFAULT_PASSWORD, password)
    return auth


def open_session(
    url: str,
    username: str | None = None,
    password: str | None = None,
    *,
    config: SessionConfig | None = None,
) -> SvnSession:
    """Open a session on a repository URL.

    Accepts any URL the linked libsvn handles, e.g.:

    * ``https://svn.example.com/somerepo``
    * ``file:///storage/somerepo``
    * ``svn://internal-server:3122/somerepo``

    Explicit credentials win over those in config.

    Raises:
        AuthenticationError: If the credentials are rejected.
        RepositoryAccessError: If the repository cannot be opened.
    """
    config = config or SessionConfig()
    username = username if username is not None else config.username
    password = password if password is not None else config.password

    _require_scheme(url)
    auth = _make_auth(username, password)
    with svn_operation("open", url=url):
        conn = ra.RemoteAccess(url, auth=auth)
        repos_root = str(conn.get_repos_root()).rstrip("/")
        # Log paths are root-relative; node kinds are checked from the root
        if repos_root == url.rstrip("/"):
            root_conn = conn
        else:
            root_conn = ra.RemoteAccess(repos_root, auth=auth)
    log.debug(
        "session_opened",
        url=url,
        repos_root=repos_root,
        authenticated=username is not None,
    )
    return SvnSession(
        conn,
        url,
        repos_root=repos_root,
        root_conn=root_conn,
        svnlook_path=config.svnlook_path,
        svnlook_timeout=config.svnlook_timeout_sec,
    )


def _raw_changes(changed_paths: Mapping[str, tuple[Any, ...]] | None) -> dict[str, RawChange]:
    if not changed_paths:
        return {}
    # Newer subvertpy releases append the node kind as a fourth element
    return {
        path: RawChange.from_svn(change[0], change[1], change[2])
        for path, change in changed_paths.items()
    }


def _raw_entry(
    changed_paths: Mapping[str, tuple[Any, ...]] | None,
    revision: int,
    revprops: Mapping[str, Any] | None,
) -> RawLogEntry:
    props = revprops or {}
    return RawLogEntry(
        revision=revision,
        author=decode_prop(props.get(PROP_REVISION_AUTHOR)),
        timestamp=parse_svn_date(decode_prop(props.get(PROP_REVISION_DATE))),
        message=decode_prop(props.get(PROP_REVISION_LOG)),
        changed_paths=_raw_changes(changed_paths),
    )


class SvnSession:
    """Owns subvertpy RemoteAccess connections and serializes calls on them.

    The log is read through the connection opened at ``url``. Node kinds are
    checked through a connection at the repository root, because log paths
    are root-relative whatever URL the session was opened with.

    RemoteAccess is not reentrant, so every query holds a lock; one session
    may be shared between threads.
    """

    def __init__(
        self,
        conn: ra.RemoteAccess,
        url: str,
        *,
        repos_root: str | None = None,
        root_conn: ra.RemoteAccess | None = None,
        svnlook_path: str = "svnlook",
        svnlook_timeout: float | None = None,
    ) -> None:
        self._conn = conn
        self._url = url.rstrip("/")
        self._repos_root = repos_root.rstrip("/") if repos_root else self._url
        self._root_conn = root_conn if root_conn is not None else conn
        self._svnlook_path = svnlook_path
        self._svnlook_timeout = svnlook_timeout
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def repos_root(self) -> str:
        return self._repos_root

    @property
    def local_path(self) -> Path | None:
        parsed = urlparse(self._repos_root)
        if parsed.scheme.lower() != "file":
            return None
        return Path(url2pathname(parsed.path))

    def latest_revision(self) -> int:
        with self._lock, svn_operation("latest revision", url=self._url):
            return int(self._conn.get_latest_revnum())

    def log(self, start: int, end: int) -> list[RawLogEntry]:
        entries: list[RawLogEntry] = []

        def collect(
            changed_paths: Mapping[str, tuple[Any, ...]] | None,
            revision: int,
            revprops: Mapping[str, Any] | None,
            has_children: bool | None = None,  # noqa: ARG001
        ) -> None:
            entries.append(_raw_entry(changed_paths, revision, revprops))

        revision = start if start == end else None
        with self._lock, svn_operation("log", revision=revision, url=self._url):
            self._conn.get_log(
                callback=collect,
                paths=None,
                start=start,
                end=end,
                discover_changed_paths=True,
            )
        log.debug("log_fetched", start=start, end=end, count=len(entries))
        return entries

    def check_path(self, path: str, revision: int) -> PathKind:
        with self._lock, svn_operation(
            "check path", revision=revision, path=path, url=self._repos_root
        ):
            kind = self._root_conn.check_path(path, revision)
        try:
            return _KIND_NAMES[kind]
        except KeyError:
            raise RepositoryAccessError(
                "check path", f"unexpected node kind {kind!r}", revision=revision, path=path
            ) from None

    def generate_diff(self, revision: int, generator: DiffGenerator | None = None) -> bytes:
        repo_dir = self.local_path
        if repo_dir is None:
            raise UnsupportedForRemoteSessionError(self._url)
        output = run_svnlook_diff(
            repo_dir,
            revision,
            svnlook=self._svnlook_path,
            timeout=self._svnlook_timeout,
        )
        if generator is not None:
            dispatch_sections(output, generator)
        return output

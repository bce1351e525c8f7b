"""String parsing helpers for repository paths, messages and revprops."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import PurePosixPath

_SVN_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def normalize_path(path: str) -> str:
    """Strip the leading slash log paths carry (e.g., '/trunk/a.c' -> 'trunk/a.c')."""
    return path.lstrip("/")


def normalize_message(message: str | None) -> str:
    """Trimmed log message, or '' when the revision has none."""
    return message.strip() if message is not None else ""


def has_extension(path: str) -> bool:
    """True when the final path segment contains a period."""
    return "." in PurePosixPath(path).name


def decode_prop(value: str | bytes | None) -> str | None:
    """Revision properties may arrive as bytes; they are UTF-8 by contract."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def parse_svn_date(value: str | None) -> datetime | None:
    """Parse an svn:date property (always UTC, microsecond precision)."""
    if not value:
        return None
    return datetime.strptime(value, _SVN_DATE_FORMAT).replace(tzinfo=UTC)

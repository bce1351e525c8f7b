"""Split svnlook diff output into per-path sections."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, cast

from svnlens.svn.models import DiffAction

if TYPE_CHECKING:
    from svnlens.svn.base import DiffGenerator

SectionKind = Literal["file", "property"]

_FILE_HEADER = re.compile(rb"^(Added|Modified|Deleted|Copied): (.+?)\r?\n?$")
_PROP_HEADER = re.compile(rb"^Property changes on: (.+?)\r?\n?$")
_COPY_SUFFIX = re.compile(r"^(.*) \(from rev \d+, .*\)$")


@dataclass(frozen=True, slots=True)
class DiffSection:
    """One file or property section, header lines included."""

    kind: SectionKind
    path: str
    action: DiffAction | None
    body: bytes


def _is_rule(line: bytes, char: bytes) -> bool:
    stripped = line.rstrip(b"\r\n")
    return bool(stripped) and stripped == char * len(stripped)


def _decode_path(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


def _match_header(
    line: bytes, following: bytes
) -> tuple[SectionKind, str, DiffAction | None] | None:
    # Property sections contain "Added: svn:eol-style" lines too; only a
    # header followed by its rule line starts a new section.
    m = _FILE_HEADER.match(line)
    if m and _is_rule(following, b"="):
        path = _decode_path(m.group(2))
        copied = _COPY_SUFFIX.match(path)
        if copied:
            path = copied.group(1)
        return "file", path, cast(DiffAction, m.group(1).decode("ascii"))
    m = _PROP_HEADER.match(line)
    if m and _is_rule(following, b"_"):
        return "property", _decode_path(m.group(1)), None
    return None


def iter_sections(data: bytes) -> Iterator[DiffSection]:
    """Yield sections in output order. Text before the first header is dropped."""
    lines = data.splitlines(keepends=True)
    current: tuple[SectionKind, str, DiffAction | None] | None = None
    start = 0
    for i, line in enumerate(lines):
        following = lines[i + 1] if i + 1 < len(lines) else b""
        header = _match_header(line, following)
        if header is None:
            continue
        if current is not None:
            yield DiffSection(*current, body=b"".join(lines[start:i]))
        current, start = header, i
    if current is not None:
        yield DiffSection(*current, body=b"".join(lines[start:]))


def dispatch_sections(data: bytes, generator: DiffGenerator) -> None:
    """Feed every section of data to the generator."""
    for section in iter_sections(data):
        if section.kind == "property":
            generator.display_prop_diff(section.path, section.body)
        else:
            action = cast(DiffAction, section.action)
            generator.display_file_diff(section.path, action, section.body)

"""In-memory repository session and raw log builders for svn tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from svnlens.svn._internal import dispatch_sections
from svnlens.svn.base import DiffGenerator
from svnlens.svn.errors import UnsupportedForRemoteSessionError
from svnlens.svn.models import PathKind, RawChange, RawLogEntry


class FakeSession:
    """In-memory RepositorySession recording every query.

    kinds is keyed by repository-root-relative path, as check_path expects.
    """

    def __init__(
        self,
        entries: list[RawLogEntry],
        kinds: dict[tuple[str, int], PathKind] | None = None,
        *,
        url: str = "file:///srv/svn/repo",
        local_path: Path | None = Path("/srv/svn/repo"),
        diff_output: bytes = b"",
    ) -> None:
        self._entries = {entry.revision: entry for entry in entries}
        self._kinds = kinds or {}
        self._url = url
        self._local_path = local_path
        self.diff_output = diff_output
        self.log_calls: list[tuple[int, int]] = []
        self.check_path_calls: list[tuple[str, int]] = []
        self.diff_calls: list[int] = []

    @property
    def url(self) -> str:
        return self._url

    @property
    def local_path(self) -> Path | None:
        return self._local_path

    def latest_revision(self) -> int:
        return max(self._entries, default=0)

    def log(self, start: int, end: int) -> list[RawLogEntry]:
        self.log_calls.append((start, end))
        return [self._entries[r] for r in range(start, end + 1) if r in self._entries]

    def check_path(self, path: str, revision: int) -> PathKind:
        self.check_path_calls.append((path, revision))
        return self._kinds.get((path, revision), "none")

    def generate_diff(self, revision: int, generator: DiffGenerator | None = None) -> bytes:
        if self._local_path is None:
            raise UnsupportedForRemoteSessionError(self._url)
        self.diff_calls.append(revision)
        if generator is not None:
            dispatch_sections(self.diff_output, generator)
        return self.diff_output


def entry(
    revision: int,
    changed_paths: dict[str, RawChange] | None = None,
    *,
    author: str | None = "railsmonk",
    message: str | None = "commit",
) -> RawLogEntry:
    return RawLogEntry(
        revision=revision,
        author=author,
        timestamp=datetime(2012, 5, 1, 12, 0, revision, tzinfo=UTC),
        message=message,
        changed_paths=changed_paths or {},
    )


SVNLOOK_OUTPUT = (
    b"Modified: trunk/commit1.txt\n"
    b"===================================================================\n"
    b"--- trunk/commit1.txt\t2012-05-01 12:00:05 UTC (rev 5)\n"
    b"+++ trunk/commit1.txt\t2012-05-01 12:00:07 UTC (rev 7)\n"
    b"@@ -1 +1,2 @@\n"
    b" hello\n"
    b"+world\n"
    b"\n"
    b"Added: trunk/new.c\n"
    b"===================================================================\n"
    b"--- trunk/new.c\t                        (rev 0)\n"
    b"+++ trunk/new.c\t2012-05-01 12:00:07 UTC (rev 7)\n"
    b"@@ -0,0 +1 @@\n"
    b"+int main(void) { return 0; }\n"
    b"\n"
    b"Property changes on: trunk/new.c\n"
    b"___________________________________________________________________\n"
    b"Added: svn:eol-style\n"
    b"## -0,0 +1 ##\n"
    b"+native\n"
    b"\\ No newline at end of property\n"
    b"Deleted: trunk/old.txt\n"
    b"===================================================================\n"
    b"--- trunk/old.txt\t2012-05-01 12:00:05 UTC (rev 5)\n"
    b"+++ trunk/old.txt\t                        (rev 7)\n"
    b"@@ -1 +0,0 @@\n"
    b"-bye\n"
    b"\n"
    b"Copied: trunk/copy.txt (from rev 5, trunk/commit1.txt)\n"
    b"===================================================================\n"
    b"\n"
    b"Property changes on: trunk\n"
    b"___________________________________________________________________\n"
    b"Modified: svn:ignore\n"
    b"## -1 +1,2 ##\n"
    b" build\n"
    b"+dist\n"
)



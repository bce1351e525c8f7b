"""svnlook invocation for diffs of local repositories."""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from svnlens.svn.errors import RepositoryAccessError, RevisionNotFoundError

log = structlog.get_logger(__name__)

_OPERATION = "svnlook diff"


def svnlook_diff_command(repo_dir: Path, revision: int, svnlook: str = "svnlook") -> list[str]:
    """Added, deleted and property diffs are on by default; copies diff against their source."""
    return [svnlook, "diff", "-r", str(revision), "--diff-copy-from", str(repo_dir)]


def run_svnlook_diff(
    repo_dir: Path,
    revision: int,
    *,
    svnlook: str = "svnlook",
    timeout: float | None = None,
) -> bytes:
    """Run svnlook diff for one revision and return its raw output.

    Raises:
        RevisionNotFoundError: If svnlook reports the revision does not exist.
        RepositoryAccessError: If svnlook is missing, times out, or fails.
    """
    cmd = svnlook_diff_command(repo_dir, revision, svnlook)
    log.debug("svnlook_diff", repo_dir=str(repo_dir), revision=revision)
    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout, check=False)
    except FileNotFoundError as e:
        raise RepositoryAccessError(
            _OPERATION, f"svnlook executable not found: {svnlook}", revision=revision
        ) from e
    except subprocess.TimeoutExpired as e:
        raise RepositoryAccessError(
            _OPERATION, f"timed out after {timeout}s", revision=revision
        ) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        if "No such revision" in stderr:
            raise RevisionNotFoundError(revision)
        raise RepositoryAccessError(
            _OPERATION, stderr or f"exit code {result.returncode}", revision=revision
        )
    return result.stdout

"""Change classification: raw change records to semantic change kinds."""

from __future__ import annotations

from svnlens.svn.errors import UnknownChangeCodeError
from svnlens.svn.models import ChangeKind, RawChange

_LETTER_TO_CHANGE: dict[str, ChangeKind] = {
    "A": "add",
    "M": "edit",
    "D": "delete",
    "R": "replace",
}


def classify_change(
    raw: RawChange, *, path: str | None = None, revision: int | None = None
) -> ChangeKind:
    """Map a raw change record to its change kind.

    A copy source always wins over the letter: copies are reported as 'A'
    or 'R' (and occasionally 'M') depending on how they were made.

    Raises:
        UnknownChangeCodeError: If the letter is not one of A, M, D, R.
    """
    if raw.is_copy:
        return "copy"
    try:
        return _LETTER_TO_CHANGE[raw.action]
    except KeyError:
        raise UnknownChangeCodeError(raw.action, path, revision) from None

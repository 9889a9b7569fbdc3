"""Write generated documentation back to disk when it changed."""

from __future__ import annotations

import logging
from pathlib import Path

from rule_doc_sync.utils.models import RuleStatus

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


class WriteBackError(Exception):
    """Raised when a documentation file cannot be overwritten."""


def needs_update(previous: str, candidate: str) -> bool:
    """Return ``True`` if ``candidate`` is non-empty and differs from ``previous``."""

    return bool(candidate) and candidate != previous


def match_line_ending(previous: str, candidate: str) -> str:
    """Give ``candidate`` the trailing newline ``previous`` ends with."""

    if candidate and previous.endswith("\n") and not candidate.endswith("\n"):
        return candidate + "\n"
    return candidate


def apply_update(path: Path, previous: str, candidate: str) -> RuleStatus:
    """Replace the file at ``path`` with ``candidate`` if it changed.

    ``candidate`` first takes over the trailing newline of ``previous``,
    so the comparison stays exact. The file is rewritten in full; the
    existing content is never patched or merged.

    Returns:
        ``RuleStatus.UPDATED`` after a write, ``RuleStatus.UNCHANGED`` when
        the file was left alone.

    Raises:
        WriteBackError: If writing fails.
    """

    candidate = match_line_ending(previous, candidate)
    if not needs_update(previous, candidate):
        return RuleStatus.UNCHANGED
    try:
        path.write_text(candidate, encoding="utf-8")
    except OSError as exc:
        raise WriteBackError(f"Failed to write {path}: {exc}") from exc
    LOGGER.debug("Wrote %d chars to %s", len(candidate), path)
    return RuleStatus.UPDATED

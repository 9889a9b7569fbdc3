"""Discover rule directories at the top level of a repository."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from rule_doc_sync.utils.models import RULE_ID_PATTERN, RuleDirectory

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


class DirectoryReadError(Exception):
    """Raised when the repository root cannot be listed."""


def is_rule_name(name: str) -> bool:
    """Return ``True`` if ``name`` looks like a rule identifier (``R`` + digits)."""

    return bool(RULE_ID_PATTERN.match(name))


def list_rule_directories(root: Path) -> List[RuleDirectory]:
    """Return the rule directories directly under ``root``.

    Entries are returned in filesystem listing order. Files whose name
    looks like a rule identifier are ignored.

    Raises:
        DirectoryReadError: If ``root`` is missing or unreadable.
    """

    LOGGER.info("Scanning rule directories...")
    try:
        with os.scandir(root) as entries:
            rules = [
                RuleDirectory(rule_id=entry.name, path=Path(entry.path))
                for entry in entries
                if is_rule_name(entry.name) and entry.is_dir()
            ]
    except OSError as exc:
        raise DirectoryReadError(f"Unable to read {root}: {exc}") from exc
    LOGGER.info(
        "Found %d rules: %s", len(rules), ", ".join(r.rule_id for r in rules)
    )
    return rules

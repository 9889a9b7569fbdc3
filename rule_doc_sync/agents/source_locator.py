"""Locate the implementation context of a rule in the rule source checkout.

The rules live in one aggregate source file of the implementation
repository. Two extraction strategies are available:

``WholeFileStrategy`` -- hands the full file to the generator and lets it
find the rule itself. This is the default.

``RuleSpanStrategy`` -- looks for a registration call that mentions the
quoted rule identifier and returns that span up to the next blank line,
falling back to the whole file when nothing matches.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from rule_doc_sync.utils.models import RuleImplementationContext

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


class SourceNotFoundError(Exception):
    """Raised when the source root or aggregate rules file is missing."""


# ---------------------------------------------------------------------------


class ContextStrategy(ABC):
    """Contract for turning the aggregate source text into rule context."""

    name = "base"

    @abstractmethod
    def extract(self, rule_id: str, source_text: str) -> str:
        """Return the part of ``source_text`` relevant to ``rule_id``."""


class WholeFileStrategy(ContextStrategy):
    """Return the aggregate file unchanged for every rule."""

    name = "whole-file"

    def extract(self, rule_id: str, source_text: str) -> str:
        return source_text


# A call or key/value pair on the same line as the quoted identifier, e.g.
# ``createRule({ id: 'R1'``, ``registerRule("R1", ...)`` or ``code: `R1```.
_REGISTRATION_TEMPLATE = (
    r"^[^\n]*(?:[\w$.]+\s*\(|\b(?:id|code|rule|ruleId|name)\s*[:=])"
    r"[^\n]*?['\"`]{rule_id}['\"`][^\n]*$"
)
_BLANK_LINE_RE = re.compile(r"\n[ \t]*\r?\n")


class RuleSpanStrategy(ContextStrategy):
    """Return the registration span for a rule, or the whole file."""

    name = "rule-span"

    def __init__(self, fallback: Optional[ContextStrategy] = None) -> None:
        self.fallback = fallback or WholeFileStrategy()

    def find_span(self, rule_id: str, source_text: str) -> Optional[str]:
        """Return the matched registration plus trailing context, if any."""

        pattern = re.compile(
            _REGISTRATION_TEMPLATE.format(rule_id=re.escape(rule_id)),
            re.MULTILINE,
        )
        match = pattern.search(source_text)
        if not match:
            return None
        blank = _BLANK_LINE_RE.search(source_text, match.end())
        end = blank.start() if blank else len(source_text)
        return source_text[match.start():end]

    def extract(self, rule_id: str, source_text: str) -> str:
        span = self.find_span(rule_id, source_text)
        if span is None:
            LOGGER.info("No registration found for %s; using whole file", rule_id)
            return self.fallback.extract(rule_id, source_text)
        return span


# ---------------------------------------------------------------------------


class SourceLocator:
    """Reader for the aggregate rules file with a pluggable strategy.

    The file is read once per run by :meth:`load` and reused for every
    rule.
    """

    def __init__(
        self,
        source_root: Path,
        rules_file: str,
        strategy: Optional[ContextStrategy] = None,
    ) -> None:
        self.source_root = Path(source_root)
        self.source_path = self.source_root / rules_file
        self.strategy = strategy or WholeFileStrategy()
        self._text: Optional[str] = None

    def load(self) -> str:
        """Read and cache the aggregate rules file.

        Raises:
            SourceNotFoundError: If the source root or file does not exist
                or cannot be read.
        """

        if self._text is not None:
            return self._text
        if not self.source_root.is_dir():
            raise SourceNotFoundError(
                f"Rule source checkout not found: {self.source_root}"
            )
        if not self.source_path.is_file():
            raise SourceNotFoundError(f"Rules file not found: {self.source_path}")
        try:
            self._text = self.source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceNotFoundError(
                f"Failed to read {self.source_path}: {exc}"
            ) from exc
        LOGGER.info(
            "Loaded rules source %s (%d chars)", self.source_path, len(self._text)
        )
        return self._text

    def locate(self, rule_id: str) -> RuleImplementationContext:
        """Return the implementation context for ``rule_id``."""

        text = self.strategy.extract(rule_id, self.load())
        return RuleImplementationContext(
            rule_id=rule_id,
            source_path=self.source_path,
            text=text,
            strategy=self.strategy.name,
        )

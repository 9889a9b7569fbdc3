"""Typed models for the rule documentation sync pipeline.

This module defines the Pydantic models passed between the pipeline
stages: the discovered rule directories, the documentation read from
them, the implementation context gathered from the rule source checkout,
the generation request and result, and the per-rule report printed at the
end of a run.

Example:
    >>> from pathlib import Path
    >>> from rule_doc_sync.utils.models import GenerationResult, RuleDirectory
    >>> rule = RuleDirectory(rule_id="R1", path=Path("R1"))
    >>> rule.readme_path().name
    'README.md'
    >>> GenerationResult.from_raw("R1", "```markdown\\nBody\\n```").normalized
    'Body'
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rule_doc_sync.utils.text import strip_code_fence

RULE_ID_PATTERN = re.compile(r"^R\d+")


class RuleStatus(str, Enum):
    """Outcome of processing a single rule."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


class RuleDirectory(BaseModel):
    """A top-level directory named after a rule identifier.

    Attributes:
        rule_id: Directory name, e.g. ``R1`` or ``R23``.
        path: Filesystem path of the directory.
    """

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., description="Rule identifier, e.g. R1.")
    path: Path = Field(..., description="Filesystem path of the rule directory.")

    @field_validator("rule_id")
    @classmethod
    def _check_rule_id(cls, value: str) -> str:
        if not RULE_ID_PATTERN.match(value):
            raise ValueError(f"{value!r} is not a rule identifier")
        return value

    def readme_path(self, doc_name: str = "README.md") -> Path:
        """Return the path of the rule's documentation file."""

        return self.path / doc_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RuleDirectory":
        """Instantiate a :class:`RuleDirectory` from a dictionary.

        Raises:
            ValueError: If validation fails.
        """

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ValueError(f"Invalid RuleDirectory data: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        """Serialize this rule directory to a dictionary."""

        return self.model_dump()


class RuleDocument(BaseModel):
    """Documentation text of one rule as read at the start of its cycle."""

    rule_id: str = Field(..., description="Rule the document belongs to.")
    path: Path = Field(..., description="Path of the documentation file.")
    content: str = Field(..., description="Text read from the file.")


class RuleImplementationContext(BaseModel):
    """Source text believed to contain the rule's logic.

    Attributes:
        rule_id: Rule the context was gathered for.
        source_path: Aggregate source file the text was read from.
        text: Whole file or the extracted registration span.
        strategy: Name of the extraction strategy that produced ``text``.
    """

    rule_id: str = Field(..., description="Rule the context was gathered for.")
    source_path: Path = Field(..., description="Aggregate rules source file.")
    text: str = Field(..., description="Implementation context text.")
    strategy: str = Field("whole-file", description="Extraction strategy used.")


class GenerationRequest(BaseModel):
    """Everything sent to the generation service for one rule."""

    rule_id: str = Field(..., description="Rule being documented.")
    context: str = Field(..., description="Implementation context text.")
    current_document: str = Field(..., description="Current README content.")
    prompt: str = Field(..., description="Composed instruction payload.")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationRequest":
        """Instantiate a :class:`GenerationRequest` from a dictionary."""
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ValueError(f"Invalid GenerationRequest data: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        """Serialize this request to a dictionary."""
        return self.model_dump()


class GenerationResult(BaseModel):
    """Raw generator output and its fence-stripped variant."""

    rule_id: str = Field(..., description="Rule the output belongs to.")
    raw: str = Field("", description="Text returned by the generator.")
    normalized: str = Field("", description="Output with fences and padding removed.")

    @classmethod
    def from_raw(cls, rule_id: str, raw: Optional[str]) -> "GenerationResult":
        """Build a result from generator output, normalizing it."""

        raw = raw or ""
        return cls(rule_id=rule_id, raw=raw, normalized=strip_code_fence(raw))

    @property
    def is_empty(self) -> bool:
        return not self.normalized


class RuleReport(BaseModel):
    """Outcome of one rule cycle, used for the run summary."""

    rule_id: str = Field(..., description="Rule that was processed.")
    status: RuleStatus = Field(..., description="Final state of the rule.")
    reason: Optional[str] = Field(None, description="Why the rule was skipped.")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize this report to a dictionary."""
        return self.model_dump(mode="json")

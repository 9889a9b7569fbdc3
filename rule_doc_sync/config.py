"""Run configuration for the rule documentation sync.

All settings are carried on a :class:`SyncConfig` instance that is passed
explicitly to each pipeline stage. Values come from command line options,
falling back to environment variables and then to the defaults below.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, List, Optional

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

DEFAULT_SOURCE_ROOT = "flowlint-core"
DEFAULT_RULES_FILE = "packages/review/rules/index.ts"
DEFAULT_DOC_NAME = "README.md"
DEFAULT_TEMPERATURE = 0.1

PROVIDER_KEYS = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


class MissingCredentialError(RuntimeError):
    """Raised when no API key is available for the generation service."""


@dataclass
class SyncConfig:
    """Configuration controlling a single sync run."""

    root: Path = field(default_factory=Path.cwd)
    source_root: Path = Path(DEFAULT_SOURCE_ROOT)
    rules_file: str = DEFAULT_RULES_FILE
    provider: Optional[str] = None
    api_key: Optional[str] = None
    model: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    top_p: float = 0.9
    doc_name: str = DEFAULT_DOC_NAME
    extract_spans: bool = False
    product_name: str = "FlowLint"
    only: List[str] = field(default_factory=list)

    @property
    def rules_path(self) -> Path:
        """Absolute location of the aggregate rules source file."""

        return self.source_root / self.rules_file

    @classmethod
    def from_env(cls, **overrides: Any) -> "SyncConfig":
        """Build a config from environment variables.

        Keyword arguments whose value is ``None`` are ignored so command line
        options that were not given fall through to the environment.
        """

        values: dict = {}
        if os.getenv("RULE_DOCS_ROOT"):
            values["root"] = Path(os.environ["RULE_DOCS_ROOT"])
        if os.getenv("CORE_REPO_PATH"):
            values["source_root"] = Path(os.environ["CORE_REPO_PATH"])
        if os.getenv("CORE_RULES_FILE"):
            values["rules_file"] = os.environ["CORE_RULES_FILE"]
        if os.getenv("RULE_DOCS_LLM"):
            values["provider"] = os.environ["RULE_DOCS_LLM"]
        if os.getenv("RULE_DOCS_MODEL"):
            values["model"] = os.environ["RULE_DOCS_MODEL"]
        if os.getenv("RULE_DOCS_TEMPERATURE"):
            try:
                values["temperature"] = float(os.environ["RULE_DOCS_TEMPERATURE"])
            except ValueError:
                LOGGER.warning(
                    "Ignoring invalid RULE_DOCS_TEMPERATURE=%r",
                    os.environ["RULE_DOCS_TEMPERATURE"],
                )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def resolve_provider(cfg: SyncConfig) -> SyncConfig:
    """Return ``cfg`` with ``provider`` and ``api_key`` filled in.

    When ``cfg.provider`` is unset the first provider with a key in the
    environment wins, in the order of :data:`PROVIDER_KEYS`.

    Raises:
        MissingCredentialError: If the selected provider is unknown or no
            key can be found.
    """

    if cfg.provider is not None and cfg.provider not in PROVIDER_KEYS:
        raise MissingCredentialError(f"Unknown LLM provider: {cfg.provider}")
    candidates = [cfg.provider] if cfg.provider else list(PROVIDER_KEYS)
    for provider in candidates:
        key = cfg.api_key if provider == cfg.provider and cfg.api_key else None
        key = key or os.getenv(PROVIDER_KEYS[provider])
        if key:
            LOGGER.debug("Using %s for generation", provider)
            return replace(cfg, provider=provider, api_key=key)
    names = " or ".join(PROVIDER_KEYS[p] for p in candidates)
    raise MissingCredentialError(f"Error: {names} is not set")

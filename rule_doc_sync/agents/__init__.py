"""Pipeline components for rule documentation sync.

This package exposes the individual component modules directly at the
package level so callers can write imports such as ``from
rule_doc_sync.agents import doc_writer``. The modules are loaded lazily so
the LLM client libraries are only imported when a run needs them.
"""

from importlib import import_module
from typing import Any

__all__ = [
    "doc_writer",
    "prompt_builder",
    "rule_scanner",
    "source_locator",
    "write_back",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - simple import wrapper
    """Dynamically load component submodules on first access."""

    if name in __all__:
        return import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""Utility helpers for the rule documentation sync project."""

from .text import strip_code_fence

__all__ = ["strip_code_fence"]

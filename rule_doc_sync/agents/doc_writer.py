"""Client for the documentation generation service.

:func:`generate_document` sends a :class:`GenerationRequest` to OpenAI or
Gemini with a low temperature, so the model makes literal corrections
rather than creative rewrites, and returns the first candidate as a
:class:`GenerationResult`. Failures are raised as :class:`GenerationError`
for the caller to log and skip; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

import google.generativeai as genai
import openai

from rule_doc_sync.agents.prompt_builder import build_messages
from rule_doc_sync.config import SyncConfig
from rule_doc_sync.utils.models import GenerationRequest, GenerationResult

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "gemini": "gemini-2.5-flash",
}


class GenerationError(Exception):
    """Raised when the generation service fails or returns no candidate."""


# ---------------------------------------------------------------------------


def _call_openai(messages: Sequence[Dict[str, str]], cfg: SyncConfig) -> Optional[str]:
    client = openai.OpenAI(api_key=cfg.api_key)
    resp = client.chat.completions.create(
        model=cfg.model or DEFAULT_MODELS["openai"],
        messages=messages,  # type: ignore[arg-type]
        temperature=cfg.temperature,
        top_p=cfg.top_p,
    )
    if not resp.choices:
        raise GenerationError("OpenAI returned no choices")
    return resp.choices[0].message.content


def _call_gemini(messages: Sequence[Dict[str, str]], cfg: SyncConfig) -> Optional[str]:
    genai.configure(api_key=cfg.api_key)
    model = genai.GenerativeModel(cfg.model or DEFAULT_MODELS["gemini"])
    res = model.generate_content(
        "\n".join(m["content"] for m in messages),
        generation_config={"temperature": cfg.temperature, "top_p": cfg.top_p},
    )
    if not res.candidates:
        raise GenerationError("Gemini returned no candidates")
    return res.text


def _call_llm(messages: Sequence[Dict[str, str]], cfg: SyncConfig) -> str:
    """Invoke the configured provider and return its raw text output."""

    LOGGER.debug("LLM messages: %s", messages)
    if cfg.provider == "openai":
        call = _call_openai
    elif cfg.provider == "gemini":
        call = _call_gemini
    else:
        raise GenerationError(f"Unsupported LLM provider: {cfg.provider}")
    try:
        content = call(messages, cfg)
    except GenerationError:
        raise
    except Exception as exc:  # network, auth and SDK errors
        raise GenerationError(f"{cfg.provider} request failed: {exc}") from exc
    return content or ""


# ---------------------------------------------------------------------------


def generate_document(request: GenerationRequest, cfg: SyncConfig) -> GenerationResult:
    """Generate updated documentation for ``request``.

    Parameters
    ----------
    request:
        Prompt and inputs for one rule.
    cfg:
        Run configuration naming the provider, key, model and sampling
        settings.

    Returns
    -------
    GenerationResult
        Raw output and its normalized form. Empty output yields an empty
        result rather than an error.

    Raises
    ------
    GenerationError
        If the provider call fails or returns no candidate.
    """

    raw = _call_llm(build_messages(request), cfg)
    result = GenerationResult.from_raw(request.rule_id, raw)
    if result.is_empty:
        LOGGER.warning("Generator returned empty content for %s", request.rule_id)
    return result

# tests/test_config.py
"""Example CLI: pytest -vv tests/test_config.py"""
from pathlib import Path

import pytest

from rule_doc_sync.config import (
    DEFAULT_RULES_FILE,
    MissingCredentialError,
    SyncConfig,
    resolve_provider,
)


def test_from_env_defaults():
    cfg = SyncConfig.from_env()
    assert cfg.rules_file == DEFAULT_RULES_FILE
    assert cfg.temperature == 0.1
    assert cfg.doc_name == "README.md"
    assert cfg.provider is None


def test_from_env_reads_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("CORE_REPO_PATH", str(tmp_path / "core"))
    monkeypatch.setenv("CORE_RULES_FILE", "src/rules.ts")
    monkeypatch.setenv("RULE_DOCS_TEMPERATURE", "0.3")
    cfg = SyncConfig.from_env()
    assert cfg.source_root == tmp_path / "core"
    assert cfg.rules_path == tmp_path / "core" / "src" / "rules.ts"
    assert cfg.temperature == 0.3


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("RULE_DOCS_LLM", "gemini")
    cfg = SyncConfig.from_env(provider="openai", model=None)
    assert cfg.provider == "openai"
    assert cfg.model is None


def test_invalid_temperature_ignored(monkeypatch):
    monkeypatch.setenv("RULE_DOCS_TEMPERATURE", "warm")
    assert SyncConfig.from_env().temperature == 0.1


def test_resolve_provider_prefers_openai(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "o")
    monkeypatch.setenv("GEMINI_API_KEY", "g")
    cfg = resolve_provider(SyncConfig())
    assert (cfg.provider, cfg.api_key) == ("openai", "o")


def test_resolve_provider_falls_back_to_gemini(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g")
    cfg = resolve_provider(SyncConfig(root=Path(".")))
    assert (cfg.provider, cfg.api_key) == ("gemini", "g")


def test_resolve_provider_explicit_key():
    cfg = resolve_provider(SyncConfig(provider="openai", api_key="given"))
    assert cfg.api_key == "given"


def test_resolve_provider_missing_key():
    with pytest.raises(MissingCredentialError, match="OPENAI_API_KEY"):
        resolve_provider(SyncConfig(provider="openai"))
    with pytest.raises(MissingCredentialError):
        resolve_provider(SyncConfig())


def test_resolve_provider_unknown():
    with pytest.raises(MissingCredentialError):
        resolve_provider(SyncConfig(provider="llama", api_key="x"))

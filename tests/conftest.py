import pytest

RULES_SOURCE = """import { createRule } from './rule';

export const r1 = createRule({ id: 'R1', name: 'rate-limit-retry' }, (graph) => {
  return graph.nodes.filter((n) => n.type === 'http' && !n.retryOnFail);
});

export const r10 = createRule({ id: 'R10', name: 'naming-convention' }, (graph) => {
  return graph.nodes.filter((n) => /^Node\\d*$/.test(n.name));
});
"""


@pytest.fixture()
def rule_repo(tmp_path):
    """A docs root with two rules and a core checkout holding their source."""

    root = tmp_path / "rules"
    for rule_id in ("R1", "R10"):
        (root / rule_id).mkdir(parents=True)
        (root / rule_id / "README.md").write_text(
            f"# {rule_id}\n\nold desc\n", encoding="utf-8"
        )
    (root / "NOTES").mkdir()
    (root / "NOTES" / "README.md").write_text("notes", encoding="utf-8")
    (root / "R99.md").write_text("not a directory", encoding="utf-8")

    source = tmp_path / "core"
    rules_file = source / "packages" / "review" / "rules" / "index.ts"
    rules_file.parent.mkdir(parents=True)
    rules_file.write_text(RULES_SOURCE, encoding="utf-8")
    return root, source


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "OPENAI_API_KEY",
        "GEMINI_API_KEY",
        "RULE_DOCS_ROOT",
        "RULE_DOCS_LLM",
        "RULE_DOCS_MODEL",
        "RULE_DOCS_TEMPERATURE",
        "CORE_REPO_PATH",
        "CORE_RULES_FILE",
    ):
        monkeypatch.delenv(name, raising=False)

# tests/test_text.py
"""Example CLI: pytest -vv tests/test_text.py"""
from rule_doc_sync.utils.text import strip_code_fence


def test_strips_tagged_fence():
    assert strip_code_fence("```markdown\nNew accurate description.\n```") == (
        "New accurate description."
    )


def test_strips_bare_fence_and_padding():
    assert strip_code_fence("\n  ```\n# Title\n\nBody\n```  \n") == "# Title\n\nBody"


def test_preserves_inner_content_exactly():
    inner = (
        "# R1\n\n"
        "```mermaid\n"
        "graph TD\n"
        "  A-->B\n"
        "```\n\n"
        "  indented   text\twith tab\n"
        "## How to fix"
    )
    assert strip_code_fence(f"```markdown\n{inner}\n```") == inner


def test_no_fence_only_trims():
    assert strip_code_fence("  plain text \n") == "plain text"


def test_keeps_trailing_mermaid_block_without_wrapper():
    doc = "# R1\n\n```mermaid\ngraph TD\n  A-->B\n```"
    assert strip_code_fence(doc) == doc


def test_keeps_leading_mermaid_block_without_wrapper():
    doc = "```mermaid\ngraph TD\n```\n\n# R1\n\nBody"
    assert strip_code_fence(doc) == doc


def test_strips_dangling_opening_fence():
    assert strip_code_fence("```markdown\n# R1\nBody") == "# R1\nBody"


def test_strips_dangling_closing_fence():
    assert strip_code_fence("# R1\nBody\n```") == "# R1\nBody"


def test_empty_input():
    assert strip_code_fence("   ") == ""


def test_keeps_diagrams_at_both_ends():
    doc = "```mermaid\nA-->B\n```\n\nText\n\n```mermaid\nC-->D\n```"
    assert strip_code_fence(doc) == doc


def test_strips_md_wrapper_around_diagrams():
    doc = "```mermaid\nA-->B\n```\n\nText\n\n```mermaid\nC-->D\n```"
    assert strip_code_fence(f"```md\n{doc}\n```") == doc

"""Instruction payloads for the documentation generator.

Pure functions only: nothing here reads files or talks to the network.
"""

from __future__ import annotations

from typing import Dict, List

from rule_doc_sync.utils.models import GenerationRequest

DOC_SYSTEM = "You are an expert technical writer."

DOC_USER_TEMPLATE = '''You are a Technical Writer for {product_name}.
Your task is to keep the documentation for rule "{rule_id}" accurate and readable.

Implementation source (the logic for {rule_id} is somewhere in here):
"""
{context}
"""

Current README.md content:
"""
{current_doc}
"""

Instructions:
1. Find the implementation of rule "{rule_id}" in the source above.
2. Compare it with the current README.md. Correct anything the code contradicts and add edge cases the code handles that the README does not mention.
3. Keep mermaid diagrams and other diagram code blocks as they are, unless they contradict the implementation.
4. Fix grammar and spelling mistakes and improve clarity and structure.
5. Make sure there is a "Why it matters" section explaining the rationale and a "How to fix" section explaining remediation.
6. Return ONLY the updated Markdown content, with no commentary before or after it and no surrounding code fence.
'''


def build_prompt(
    rule_id: str,
    context: str,
    current_doc: str,
    product_name: str = "FlowLint",
) -> str:
    """Return the user instruction for documenting ``rule_id``."""

    return DOC_USER_TEMPLATE.format(
        product_name=product_name,
        rule_id=rule_id,
        context=context,
        current_doc=current_doc,
    )


def build_request(
    rule_id: str,
    context: str,
    current_doc: str,
    product_name: str = "FlowLint",
) -> GenerationRequest:
    """Bundle the prompt and its inputs into a :class:`GenerationRequest`."""

    return GenerationRequest(
        rule_id=rule_id,
        context=context,
        current_document=current_doc,
        prompt=build_prompt(rule_id, context, current_doc, product_name),
    )


def build_messages(request: GenerationRequest) -> List[Dict[str, str]]:
    """Return chat messages for ``request``."""

    return [
        {"role": "system", "content": DOC_SYSTEM},
        {"role": "user", "content": request.prompt},
    ]

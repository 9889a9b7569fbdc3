import re

_FENCE_LINE_RE = re.compile(r"^[ \t]*```[ \t]*[\w.+#-]*[ \t]*\r?$")
_WRAPPER_FENCE_RE = re.compile(r"^[ \t]*```[ \t]*(?:markdown|md)?[ \t]*\r?$", re.IGNORECASE)
_CLOSING_FENCE_RE = re.compile(r"^[ \t]*```[ \t]*\r?$")


def strip_code_fence(text: str) -> str:
    """Return ``text`` without a Markdown code fence wrapped around it.

    Only a bare, ``markdown`` or ``md`` fence on the first line counts as
    a wrapper; it is removed together with a bare closing fence on the
    last line. A lone marker at either end is only removed when it leaves
    the fences in the body unbalanced. Diagram blocks such as
    ```` ```mermaid ```` at the start or end of a document are kept.
    Everything between the removed lines is returned unchanged apart from
    the outer whitespace.
    """
    text = text.strip()
    if not text:
        return text
    lines = text.split("\n")
    fences = sum(1 for line in lines if _FENCE_LINE_RE.match(line))
    opening = bool(_WRAPPER_FENCE_RE.match(lines[0]))
    closing = len(lines) > 1 and bool(_CLOSING_FENCE_RE.match(lines[-1]))
    if opening and closing:
        lines = lines[1:-1]
    elif opening and fences % 2:
        lines = lines[1:]
    elif closing and fences % 2:
        lines = lines[:-1]
    return "\n".join(lines).strip()

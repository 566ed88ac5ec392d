"""Whitespace and paragraph normalization for rendered prose."""

import re

FENCE_MARKER = "```"
WHITESPACE_RUN_RE = re.compile(r"[ \t]+")
SPACE_BEFORE_PUNCT_RE = re.compile(r" +([.,;:)\]])")
# Lines that must start on their own line instead of joining the paragraph.
BLOCK_LINE_RE = re.compile(r"^(?:[-*+] |\d+\. |\|)")


def normalize_prose(text: str) -> str:
    """Normalize Markdown prose in a single top-to-bottom pass.

    Outside fenced code: whitespace runs collapse to one space, lines are
    trimmed, a space before `. , ; : ) ]` is removed, consecutive non-blank
    lines are joined with a space and blank lines collapse into one paragraph
    break. Lines inside a fence are copied unchanged.
    """
    out: list[str] = []
    paragraph: list[str] = []
    in_fence = False

    def flush() -> None:
        if paragraph:
            out.append(SPACE_BEFORE_PUNCT_RE.sub(r"\1", " ".join(paragraph)))
            paragraph.clear()

    def paragraph_break() -> None:
        if out and out[-1] != "":
            out.append("")

    for line in text.split("\n"):
        if in_fence:
            if line.strip().startswith(FENCE_MARKER):
                out.append(line.strip())
                out.append("")
                in_fence = False
            else:
                out.append(line)
            continue

        stripped = WHITESPACE_RUN_RE.sub(" ", line).strip()
        if stripped.startswith(FENCE_MARKER):
            flush()
            paragraph_break()
            out.append(stripped)
            in_fence = True
        elif not stripped:
            flush()
            paragraph_break()
        else:
            if BLOCK_LINE_RE.match(stripped):
                flush()
            paragraph.append(stripped)

    flush()
    if in_fence:
        out.append(FENCE_MARKER)

    while out and out[-1] == "":
        out.pop()
    while out and out[0] == "":
        out.pop(0)
    return "\n".join(out)

"""Utility for generating Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block.

    Blank lines at either end are dropped; everything else, including
    indentation and tabs, is kept exactly.
    """
    lines = code.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    body = "\n".join(lines)
    return f"```{lang}\n{body}\n```"

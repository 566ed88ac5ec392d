"""Utility for generating Markdown tables."""


def _cell(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; pipes inside cells are escaped."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(_cell(h) for h in headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)

"""Utility for generating slugs for Markdown headers."""

import re


def header_slug(s: str) -> str:
    """Generate a GitHub-ish anchor slug from visible heading text.

    Lowercase, whitespace runs become a single hyphen, anything outside
    `[a-z0-9-]` is dropped.
    """
    s = s.strip().lower()
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"[^a-z0-9-]", "", s)
    return s or "section"

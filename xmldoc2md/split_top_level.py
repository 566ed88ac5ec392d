"""Bracket-depth aware splitting of signature text."""

OPENERS = "<{(["
CLOSERS = ">})]"


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split `text` on `sep`, ignoring separators nested inside any brackets."""
    if not text.strip():
        return []
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth = max(depth - 1, 0)
        elif ch == sep and depth == 0:
            parts.append(text[start:i].strip())
            start = i + 1
    parts.append(text[start:].strip())
    return parts


def find_matching_bracket(text: str, open_index: int) -> int:
    """Return the index of the bracket closing the one at `open_index`, or -1."""
    opener = text[open_index]
    closer = CLOSERS[OPENERS.index(opener)]
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i
    return -1

"""Splitting of member identifiers into name and parameter list."""

from xmldoc2md.split_top_level import find_matching_bracket


def strip_kind_prefix(identifier: str) -> str:
    """Remove a leading `K:` kind tag if present."""
    if len(identifier) > 1 and identifier[1] == ":":
        return identifier[2:]
    return identifier


def split_member_id(member_id: str) -> tuple[str, str | None]:
    """Split `Ns.Type.Method(A,B)` into (`Ns.Type.Method`, `A,B`).

    The parameter part is `None` when the identifier has no parameter list.
    """
    paren = member_id.find("(")
    if paren < 0:
        return member_id, None
    close = find_matching_bracket(member_id, paren)
    if close < 0:
        return member_id[:paren], member_id[paren + 1 :]
    return member_id[:paren], member_id[paren + 1 : close]

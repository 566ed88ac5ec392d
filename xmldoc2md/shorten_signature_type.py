"""Compact display labels for qualified type references."""

from xmldoc2md.expand_generic_arity import expand_generic_arity
from xmldoc2md.split_top_level import find_matching_bracket, split_top_level
from xmldoc2md.type_aliases import apply_type_aliases


def strip_namespace(name: str) -> str:
    """Drop everything up to and including the last namespace separator."""
    return name.rsplit(".", 1)[-1]


def shorten_signature_type(raw: str) -> str:
    """Shorten a raw type reference for display.

    `System.Collections.Generic.Dictionary{System.String,System.Int32}` renders as
    `Dictionary<string, int>`. Nested argument lists are handled recursively and
    only top-level commas separate arguments. Text that cannot be parsed (for
    example unbalanced brackets) is returned unchanged.
    """
    s = raw.strip().replace("{", "<").replace("}", ">")
    if s.endswith("@"):
        return f"ref {shorten_signature_type(s[:-1])}"
    s = expand_generic_arity(s)

    lt = s.find("<")
    if lt < 0:
        return strip_namespace(apply_type_aliases(s))

    gt = find_matching_bracket(s, lt)
    if gt < 0:
        return raw

    head = strip_namespace(apply_type_aliases(s[:lt]))
    args = [shorten_signature_type(a) for a in split_top_level(s[lt + 1 : gt])]
    tail = s[gt + 1 :]
    return f"{head}<{', '.join(args)}>{tail}"

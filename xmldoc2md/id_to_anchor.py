"""Stable in-document anchors for members."""

from xmldoc2md.type_aliases import apply_type_aliases


def id_to_anchor(member_id: str) -> str:
    """Convert an identifier (without kind prefix) into an anchor id.

    `Temp.Foo.Do(System.String)` -> `temp.foo.do(string)`. Generic braces become
    square brackets; the whole parameter list is kept.
    """
    anchor = apply_type_aliases(member_id)
    return anchor.replace("{", "[").replace("}", "]").lower()

"""Derivation of the owning type from a member identifier."""

from xmldoc2md.split_member_id import strip_kind_prefix


def containing_type_id(cref: str) -> str:
    """Return `T:Ns.Type` for a member reference like `M:Ns.Type.Method(Ns2.Arg)`.

    The cut is made at the last dot before the parameter list, so dots inside
    qualified parameter types never count.
    """
    member_id = strip_kind_prefix(cref)
    paren = member_id.find("(")
    head = member_id[:paren] if paren >= 0 else member_id
    type_name, dot, _ = head.rpartition(".")
    return "T:" + (type_name if dot else head)

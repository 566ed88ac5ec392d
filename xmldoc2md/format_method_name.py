"""Display names for methods and constructors."""

import re

from xmldoc2md.expand_generic_arity import expand_generic_arity
from xmldoc2md.split_member_id import strip_kind_prefix

CONSTRUCTOR_NAMES = {"#ctor", "#cctor"}


def format_method_name(name: str, owner_type_id: str | None = None) -> str:
    """Format a bare method name: `Transform``2` -> `Transform<T1,T2>`.

    Constructors take the short name of their owning type.
    """
    if name in CONSTRUCTOR_NAMES and owner_type_id:
        owner = re.sub(r"`+\d+", "", strip_kind_prefix(owner_type_id))
        return owner.rsplit(".", 1)[-1]
    return expand_generic_arity(name)

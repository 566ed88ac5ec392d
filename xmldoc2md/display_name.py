"""Visible names for documented types."""

from xmldoc2md.render_options import RenderOptions
from xmldoc2md.shorten_signature_type import shorten_signature_type
from xmldoc2md.split_member_id import strip_kind_prefix
from xmldoc2md.split_top_level import split_top_level


def display_name(type_id: str, options: RenderOptions | None = None) -> str:
    """Return the heading/label text for a type id.

    With a matching `root_namespace_to_trim`, the remaining dotted path is kept
    (`Company.Product.Feature.Widget` -> `Feature.Widget`); otherwise only the
    short type name is shown. Each kept segment is shortened on its own, so
    `Outer`1.Inner` reads `Outer<T1>.Inner`.
    """
    type_id = strip_kind_prefix(type_id)
    root = options.root_namespace_to_trim if options else None
    if root and type_id.startswith(root + "."):
        rest = type_id[len(root) + 1 :]
        return ".".join(shorten_signature_type(s) for s in split_top_level(rest, "."))
    return shorten_signature_type(type_id)

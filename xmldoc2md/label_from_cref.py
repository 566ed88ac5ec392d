"""Human-readable labels for cross-reference tokens."""

from xmldoc2md.containing_type_id import containing_type_id
from xmldoc2md.display_name import display_name
from xmldoc2md.format_method_name import format_method_name
from xmldoc2md.format_parameter_list import format_parameter_list
from xmldoc2md.render_options import RenderOptions
from xmldoc2md.split_member_id import split_member_id


def is_cref(token: str) -> bool:
    """Check whether a token carries a one-letter kind prefix such as `M:`."""
    return len(token) > 2 and token[1] == ":" and token[0].isalpha()


def label_from_cref(cref: str, options: RenderOptions | None = None) -> str:
    """Build the link text for a cross-reference token.

    Types show their display name, methods their name and formatted parameter
    list, other members their simple name. Anything else falls back to the
    token text.
    """
    token = cref.strip()
    if not is_cref(token):
        return token[2:] if token.startswith("!:") else token

    kind, member_id = token[0], token[2:]
    if kind == "T":
        return display_name(member_id, options)
    if kind == "N":
        return member_id

    head, params = split_member_id(member_id)
    name = head.rsplit(".", 1)[-1]
    if kind == "M":
        method = format_method_name(name, containing_type_id(token))
        return f"{method}({format_parameter_list(params)})"
    return name

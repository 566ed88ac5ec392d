"""Formatting of raw parameter lists for headers and labels."""

from xmldoc2md.shorten_signature_type import shorten_signature_type
from xmldoc2md.split_top_level import split_top_level


def format_parameter_list(raw_params: str | None) -> str:
    """Render `System.String,System.Collections.Generic.List{System.Int32}` as
    `string, List<int>`.
    """
    if not raw_params:
        return ""
    return ", ".join(shorten_signature_type(p) for p in split_top_level(raw_params))

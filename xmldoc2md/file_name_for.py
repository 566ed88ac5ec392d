"""Utility for determining the Markdown file name of a type page."""

import re

from xmldoc2md.render_options import CLEAN_GENERICS, RenderOptions
from xmldoc2md.split_member_id import strip_kind_prefix

ARITY_MARKER_RE = re.compile(r"`+\d+")


def file_name_for(type_id: str, options: RenderOptions | None = None) -> str:
    """Generate a file-system safe `.md` name for a type id."""
    options = options or RenderOptions()
    name = strip_kind_prefix(type_id)
    root = options.root_namespace_to_trim
    if (
        options.trim_root_namespace_in_file_names
        and root
        and name.startswith(root + ".")
    ):
        name = name[len(root) + 1 :]
    if options.file_name_style == CLEAN_GENERICS:
        name = ARITY_MARKER_RE.sub("", name).replace("{", "<").replace("}", ">")
    return name.replace("<", "[").replace(">", "]") + ".md"

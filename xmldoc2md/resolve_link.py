"""Resolution of cross-reference tokens into Markdown link targets."""

from xmldoc2md.containing_type_id import containing_type_id
from xmldoc2md.file_name_for import file_name_for
from xmldoc2md.header_slug import header_slug
from xmldoc2md.id_to_anchor import id_to_anchor
from xmldoc2md.label_from_cref import is_cref, label_from_cref
from xmldoc2md.link_target import LinkTarget
from xmldoc2md.render_context import RenderContext

LINKABLE_KINDS = {"T", "M", "P", "F", "E"}


def resolve_link(cref: str, ctx: RenderContext) -> LinkTarget:
    """Map a cref (`T:Ns.Type`, `M:Ns.Type.Do(System.String)`, ...) to a link.

    Per-type mode links types to their page and members to `Page.md#anchor`.
    Single-file mode links types to their heading slug and members to their
    anchor. Tokens that are not linkable keep a label but get no href.
    """
    token = cref.strip()
    label = label_from_cref(token, ctx.options)
    if not is_cref(token) or token[0] not in LINKABLE_KINDS:
        return LinkTarget(title=label, href=None)

    kind, member_id = token[0], token[2:]
    if ctx.single_file:
        if kind == "T":
            return LinkTarget(title=label, href="#" + header_slug(label))
        return LinkTarget(title=label, href="#" + id_to_anchor(member_id))

    if kind == "T":
        return LinkTarget(title=label, href=file_name_for(token, ctx.options))
    page = file_name_for(containing_type_id(token), ctx.options)
    return LinkTarget(title=label, href=f"{page}#{id_to_anchor(member_id)}")

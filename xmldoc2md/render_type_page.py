"""Logic for rendering type pages."""

from xmldoc2md.display_name import display_name
from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.effective_content import effective_content
from xmldoc2md.member_group_key import group_members
from xmldoc2md.render_context import RenderContext
from xmldoc2md.render_doc_nodes import doc_to_markdown
from xmldoc2md.render_member import (
    render_examples,
    render_member,
    render_named_sections,
    render_see_also,
)


def render_type_page(
    item: DocumentedEntity,
    ctx: RenderContext,
    *,
    include_heading: bool = True,
) -> str:
    """Render a type and its members in Markdown.

    `include_heading=False` leaves out the `#` heading so a single-file caller
    can emit it once, next to its anchor.
    """
    parts: list[str] = []
    if include_heading:
        parts += [f"# {display_name(item.id, ctx.options)}", ""]

    content = effective_content(item, ctx)

    summary = doc_to_markdown(content.find("summary"), ctx)
    if summary:
        parts += [summary, ""]

    parts.extend(
        render_named_sections("## Type Parameters", content.findall("typeparam"), ctx)
    )

    remarks = doc_to_markdown(content.find("remarks"), ctx)
    if remarks:
        parts += ["## Remarks", "", remarks, ""]

    parts.extend(render_examples(content, ctx, "## Example"))
    parts.extend(render_see_also(content, ctx, "## See also"))
    parts.extend(_render_type_members(item, ctx))

    return "\n".join(parts).rstrip() + "\n"


def _render_type_members(item: DocumentedEntity, ctx: RenderContext) -> list[str]:
    """Render members, grouping method overloads under one heading."""
    parts: list[str] = []
    for key, members in group_members(ctx.model.members_of(item)).items():
        overloads = [m for m in members if m.kind == "M"]
        if len(overloads) > 1:
            parts += [f"## {key}", ""]
            for m in members:
                parts.extend(render_member(m, ctx, bulleted=True))
        else:
            for m in members:
                parts.extend(render_member(m, ctx))
    return parts

"""Logic for rendering member sections."""

import xml.etree.ElementTree as ET

from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.effective_content import effective_content
from xmldoc2md.id_to_anchor import id_to_anchor
from xmldoc2md.member_header import member_header
from xmldoc2md.render_context import RenderContext
from xmldoc2md.render_doc_nodes import doc_to_markdown, render_reference
from xmldoc2md.resolve_link import resolve_link


def md_anchor(anchor: str) -> str:
    """Generate an explicit HTML anchor."""
    return f'<a id="{anchor}"></a>'


def md_bullet(text: str) -> list[str]:
    """Render `text` as one bullet, indenting continuation lines under it."""
    lines = text.split("\n")
    return [f"- {lines[0]}"] + [f"  {line}" if line else "" for line in lines[1:]]


def md_described_bullet(label: str, text: str) -> list[str]:
    """Render `label — text` as one bullet.

    Text that opens with a code fence starts on its own line under the label.
    """
    if not text:
        return md_bullet(label)
    if text.startswith("```"):
        return md_bullet(f"{label} —\n\n{text}")
    return md_bullet(f"{label} — {text}")


def render_named_sections(
    heading: str,
    sections: list[ET.Element],
    ctx: RenderContext,
) -> list[str]:
    """Render param/typeparam sections as a `name — description` list."""
    if not sections:
        return []
    parts = [heading, ""]
    for s in sections:
        name = s.get("name", "")
        text = doc_to_markdown(s, ctx)
        parts.extend(md_described_bullet(f"`{name}`", text))
    parts.append("")
    return parts


def _render_member_text_section(
    label: str,
    section: ET.Element | None,
    ctx: RenderContext,
) -> list[str]:
    """Render a labelled prose section (returns, value, remarks)."""
    text = doc_to_markdown(section, ctx)
    if not text:
        return []
    return [f"**{label}**", "", text, ""]


def _render_member_exceptions(
    content: ET.Element,
    ctx: RenderContext,
) -> list[str]:
    """Render member exceptions list."""
    exc = content.findall("exception")
    if not exc:
        return []
    parts = ["**Exceptions**", ""]
    for e in exc:
        cref = e.get("cref")
        et = resolve_link(cref, ctx).to_markdown() if cref else ""
        ed = doc_to_markdown(e, ctx)
        if et:
            parts.extend(md_described_bullet(et, ed))
        elif ed:
            parts.extend(md_bullet(ed))
    parts.append("")
    return parts


def render_examples(
    content: ET.Element,
    ctx: RenderContext,
    heading: str,
) -> list[str]:
    """Render one block per example section, preferring fenced code."""
    parts = []
    for ex in content.findall("example"):
        text = doc_to_markdown(ex, ctx, prefer_block=True)
        if text:
            parts += [heading, "", text, ""]
    return parts


def render_see_also(
    content: ET.Element,
    ctx: RenderContext,
    heading: str,
) -> list[str]:
    """Render see-also references as a bullet list."""
    links = [render_reference(s, ctx) for s in content.findall("seealso")]
    links = [link for link in links if link]
    if not links:
        return []
    return [heading, "", *(f"- {link}" for link in links), ""]


def render_member_details(entity: DocumentedEntity, ctx: RenderContext) -> list[str]:
    """Render summary, parameters, returns and the other member sections."""
    content = effective_content(entity, ctx)
    parts: list[str] = []

    summary = doc_to_markdown(content.find("summary"), ctx)
    if summary:
        parts += [summary, ""]

    parts.extend(
        render_named_sections(
            "**Type Parameters**", content.findall("typeparam"), ctx
        )
    )
    parts.extend(
        render_named_sections("**Parameters**", content.findall("param"), ctx)
    )
    parts.extend(_render_member_text_section("Returns", content.find("returns"), ctx))
    parts.extend(_render_member_text_section("Value", content.find("value"), ctx))
    parts.extend(_render_member_exceptions(content, ctx))
    parts.extend(_render_member_text_section("Remarks", content.find("remarks"), ctx))
    parts.extend(render_examples(content, ctx, "**Example**"))
    parts.extend(render_see_also(content, ctx, "**See also**"))
    return parts


def render_member(
    entity: DocumentedEntity,
    ctx: RenderContext,
    *,
    bulleted: bool = False,
) -> list[str]:
    """Render a single member, anchor first.

    Standalone members get a `##` heading; overloads inside a group render as
    a bullet with their details indented beneath it.
    """
    anchor = md_anchor(id_to_anchor(entity.id))
    header = member_header(entity)
    details = render_member_details(entity, ctx)

    if not bulleted:
        return [anchor, "", f"## {header}", "", *details]

    parts = [f"- {anchor}`{header}`", ""]
    parts.extend(
        f"  {line}" if line else ""
        for chunk in details
        for line in chunk.split("\n")
    )
    return parts

"""Logic for rendering the table of contents."""

from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.render_context import RenderContext
from xmldoc2md.resolve_link import resolve_link

INDEX_TITLE = "API Reference"


def render_index(types: list[DocumentedEntity], ctx: RenderContext) -> str:
    """List every type by display name, linking to its page or heading."""
    links = sorted(
        (resolve_link(t.identifier, ctx) for t in types),
        key=lambda link: (link.title.lower(), link.href or ""),
    )
    parts = [f"# {INDEX_TITLE}", ""]
    parts.extend(f"- {link.to_markdown()}" for link in links)
    return "\n".join(parts).rstrip() + "\n"

"""Conversion of documentation markup into Markdown prose."""

import xml.etree.ElementTree as ET

from xmldoc2md.link_target import LinkTarget
from xmldoc2md.md_codeblock import md_codeblock
from xmldoc2md.md_table import md_table
from xmldoc2md.normalize_prose import normalize_prose
from xmldoc2md.render_context import RenderContext
from xmldoc2md.resolve_link import resolve_link


def _inline_code(text: str) -> str:
    fence = "``" if "`" in text else "`"
    pad = " " if fence == "``" else ""
    return f"{fence}{pad}{text}{pad}{fence}"


def render_reference(el: ET.Element, ctx: RenderContext) -> str:
    """Render a `<see>`/`<seealso>` element as a link, code span or text."""
    text = " ".join("".join(el.itertext()).split())
    cref = el.get("cref")
    href = el.get("href")
    langword = el.get("langword")
    if cref:
        target = resolve_link(cref, ctx)
        if text:
            target = LinkTarget(title=text, href=target.href)
        return target.to_markdown()
    if href:
        return f"[{text or href}]({href})"
    if langword:
        return _inline_code(langword)
    return text


class _DocNodeWriter:
    """Walks one content element and collects raw Markdown fragments."""

    def __init__(self, ctx: RenderContext, *, prefer_block: bool) -> None:
        self.ctx = ctx
        self.block_pending = prefer_block
        self.out: list[str] = []

    def write_children(self, el: ET.Element) -> None:
        if el.text:
            self.out.append(el.text)
        for child in el:
            self.write_element(child)
            if child.tail:
                self.out.append(child.tail)

    def write_element(self, el: ET.Element) -> None:
        tag = el.tag
        if tag in ("see", "seealso"):
            self._write_see(el)
        elif tag in ("paramref", "typeparamref"):
            self.out.append(_inline_code(el.get("name", "")))
        elif tag == "c":
            self._write_code(el, inline=True)
        elif tag == "code":
            self._write_code(el, inline=False)
        elif tag == "para":
            self.out.append("\n\n")
            self.write_children(el)
            self.out.append("\n\n")
        elif tag == "list":
            self._write_list(el)
        elif tag == "inheritdoc":
            return
        else:
            self.write_children(el)

    def _write_see(self, el: ET.Element) -> None:
        self.out.append(render_reference(el, self.ctx))

    def _write_code(self, el: ET.Element, *, inline: bool) -> None:
        content = "".join(el.itertext())
        block = not inline or "\n" in content.strip() or self.block_pending
        self.block_pending = False
        if block:
            lang = self.ctx.options.code_block_language
            self.out.append("\n\n" + md_codeblock(lang, content) + "\n\n")
        else:
            self.out.append(_inline_code(content.strip()))

    def _inline(self, el: ET.Element | None) -> str:
        if el is None:
            return ""
        writer = _DocNodeWriter(self.ctx, prefer_block=False)
        writer.write_children(el)
        return " ".join("".join(writer.out).split())

    def _write_list(self, el: ET.Element) -> None:
        list_type = el.get("type", "bullet")
        rows: list[tuple[str, str]] = []
        for item in el.findall("item"):
            term = item.find("term")
            desc = item.find("description")
            if term is None and desc is None:
                rows.append(("", self._inline(item)))
            else:
                rows.append((self._inline(term), self._inline(desc)))

        if list_type == "table":
            header = el.find("listheader")
            headers = ["Term", "Description"]
            if header is not None:
                headers = [
                    self._inline(header.find("term")) or headers[0],
                    self._inline(header.find("description")) or headers[1],
                ]
            block = md_table(headers, [list(r) for r in rows])
        else:
            lines = []
            for i, (term, desc) in enumerate(rows, 1):
                marker = f"{i}." if list_type == "number" else "-"
                text = f"**{term}** — {desc}" if term and desc else term or desc
                lines.append(f"{marker} {text}")
            block = "\n".join(lines)
        self.out.append("\n\n" + block + "\n\n")


def render_doc_nodes(
    element: ET.Element | None,
    ctx: RenderContext,
    *,
    prefer_block: bool = False,
) -> str:
    """Render a content element to raw (not yet normalized) Markdown.

    With `prefer_block`, the first `<c>`/`<code>` node becomes a fenced block
    even when it fits on one line.
    """
    if element is None:
        return ""
    writer = _DocNodeWriter(ctx, prefer_block=prefer_block)
    writer.write_children(element)
    return "".join(writer.out)


def doc_to_markdown(
    element: ET.Element | None,
    ctx: RenderContext,
    *,
    prefer_block: bool = False,
) -> str:
    """Render and normalize a content element into Markdown prose."""
    return normalize_prose(render_doc_nodes(element, ctx, prefer_block=prefer_block))

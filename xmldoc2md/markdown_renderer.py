"""Rendering of a documentation model into per-type pages or one document."""

import logging
from pathlib import Path

from xmldoc2md.display_name import display_name
from xmldoc2md.documentation_model import DocumentationModel
from xmldoc2md.file_name_for import file_name_for
from xmldoc2md.header_slug import header_slug
from xmldoc2md.inheritance_resolver import (
    HeuristicInheritanceResolver,
    InheritanceStrategy,
)
from xmldoc2md.render_context import RenderContext
from xmldoc2md.render_index import render_index
from xmldoc2md.render_member import md_anchor
from xmldoc2md.render_options import RenderOptions
from xmldoc2md.render_type_page import render_type_page

logger = logging.getLogger(__name__)

INDEX_FILE_NAME = "index.md"


class MarkdownRenderer:
    """Renders a loaded `DocumentationModel` to Markdown.

    The link mode (per-type files or a single document) is decided per call and
    passed down in a `RenderContext`; nothing is kept on the instance between
    calls, so repeated or interleaved renders behave like fresh ones.
    """

    def __init__(
        self,
        model: DocumentationModel,
        options: RenderOptions | None = None,
        inheritance: InheritanceStrategy | None = None,
    ) -> None:
        """Bind the model, options and inheritance strategy."""
        self.model = model
        self.options = options or RenderOptions()
        self.inheritance = inheritance or HeuristicInheritanceResolver()

    def _context(self, *, single_file: bool) -> RenderContext:
        return RenderContext(
            model=self.model,
            options=self.options,
            single_file=single_file,
            inheritance=self.inheritance,
        )

    def render_pages(self) -> dict[str, str]:
        """Render every type page plus `index.md` without writing anything.

        Returns file name -> Markdown, in identifier order with the index last.
        """
        ctx = self._context(single_file=False)
        types = self.model.get_types()
        pages: dict[str, str] = {}
        owners: dict[str, str] = {}
        for t in types:
            name = file_name_for(t.identifier, self.options)
            if name in pages:
                logger.warning(
                    "%s and %s both map to %s; keeping %s",
                    owners[name],
                    t.identifier,
                    name,
                    t.identifier,
                )
            pages[name] = render_type_page(t, ctx)
            owners[name] = t.identifier
        pages[INDEX_FILE_NAME] = render_index(types, ctx)
        return pages

    def render_to_directory(self, out_dir: Path | str) -> list[Path]:
        """Write one file per type and an index into `out_dir`."""
        out_root = Path(out_dir)
        out_root.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for name, md in self.render_pages().items():
            out_file = out_root / name
            out_file.write_text(md, encoding="utf-8")
            logger.debug("Wrote %s", out_file)
            written.append(out_file)
        logger.info("Wrote %d Markdown files to %s", len(written), out_root)
        return written

    def render_to_string(self) -> str:
        """Render the index and all types as one Markdown document."""
        ctx = self._context(single_file=True)
        types = self.model.get_types()
        parts = [render_index(types, ctx).rstrip(), ""]
        for t in types:
            heading = display_name(t.id, self.options)
            anchor = md_anchor(header_slug(heading))
            parts += ["---", "", anchor, "", f"# {heading}", ""]
            body = render_type_page(t, ctx, include_heading=False).rstrip()
            if body:
                parts += [body, ""]
        return "\n".join(parts).rstrip() + "\n"

    def render_to_single_file(self, out_path: Path | str) -> Path:
        """Write the single-document rendering to `out_path`."""
        p = Path(out_path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.render_to_string(), encoding="utf-8")
        logger.info("Wrote single-file Markdown to %s", p)
        return p

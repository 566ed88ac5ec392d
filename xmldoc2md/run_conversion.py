"""Orchestration logic for converting an XML documentation export to Markdown."""

import argparse
from pathlib import Path
from typing import Any

from xmldoc2md.compute_config_hash import compute_config_hash
from xmldoc2md.deep_merge import deep_merge
from xmldoc2md.documentation_model import DocumentationModel
from xmldoc2md.load_config import load_config, options_from_config
from xmldoc2md.load_error import LoadError
from xmldoc2md.markdown_renderer import MarkdownRenderer
from xmldoc2md.run_report import RunReport


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    xml_path = Path(args.xml)
    if not xml_path.is_file():
        msg = f"XML documentation file not found: {xml_path}"
        raise SystemExit(msg)

    config = _effective_config(args)
    try:
        options = options_from_config(config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    single_file = bool(config["output"]["single_file"])

    try:
        model = DocumentationModel.load(xml_path)
    except LoadError as exc:
        raise SystemExit(str(exc)) from exc

    renderer = MarkdownRenderer(model, options)
    report = RunReport(
        xml_path,
        options,
        compute_config_hash(config),
        single_file=single_file,
        output=args.out,
        dry_run=args.dry_run,
    )

    if single_file:
        report.add_files(_render_single_file(renderer, Path(args.out), args.dry_run))
    else:
        report.add_files(_render_directory(renderer, Path(args.out), args.dry_run))

    report_path = args.report or config["output"].get("report_path")
    if report_path:
        written = report.generate_report(report_path)
        if written:
            print(f"Wrote report to {written}")
    return 0


def _effective_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file and apply command-line overrides on top."""
    config = load_config(args.config)
    render: dict[str, Any] = {}
    if args.file_names is not None:
        render["file_name_style"] = args.file_names
    if args.root_namespace is not None:
        render["root_namespace_to_trim"] = args.root_namespace
    if args.code_language is not None:
        render["code_block_language"] = args.code_language
    if args.trim_root_in_file_names is not None:
        render["trim_root_namespace_in_file_names"] = args.trim_root_in_file_names
    output: dict[str, Any] = {}
    if args.single is not None:
        output["single_file"] = args.single
    return deep_merge(config, {"render": render, "output": output})


def _render_single_file(
    renderer: MarkdownRenderer,
    out_file: Path,
    dry_run: bool,  # noqa: FBT001
) -> list[Path]:
    """Write (or plan) the single-document output."""
    if dry_run:
        print(f"[dry-run] would write {out_file}")
        return [out_file]
    renderer.render_to_single_file(out_file)
    print(f"Wrote single-file Markdown to {out_file}")
    return [out_file]


def _render_directory(
    renderer: MarkdownRenderer,
    out_dir: Path,
    dry_run: bool,  # noqa: FBT001
) -> list[Path]:
    """Write (or plan) one page per type plus the index."""
    if dry_run:
        planned = [out_dir / name for name in renderer.render_pages()]
        print(f"[dry-run] would write {len(planned)} Markdown files to {out_dir}")
        return planned
    written = renderer.render_to_directory(out_dir)
    print(f"Wrote {len(written)} Markdown files to {out_dir}")
    return written

"""End-to-end tests for the command-line entry point."""

import json
from pathlib import Path

import pytest
import yaml

from xmldoc2md.xmldoc_to_markdown import main

SAMPLE_XML = """<?xml version="1.0"?>
<doc>
  <assembly><name>Company.Product</name></assembly>
  <members>
    <member name="T:Company.Product.Feature.Widget`1">
      <summary>A widget. See <see cref="M:Company.Product.Feature.Widget`1.Spin(System.Int32)"/>.</summary>
    </member>
    <member name="M:Company.Product.Feature.Widget`1.Spin(System.Int32)">
      <summary>Spins.</summary>
      <example><code>widget.Spin(3);</code></example>
    </member>
  </members>
</doc>
"""


@pytest.fixture
def xml_file(tmp_path: Path) -> Path:
    """Write the sample export to disk."""
    path = tmp_path / "Company.Product.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path


def test_cli_per_type_output(
    xml_file: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify the default per-type output directory."""
    out_dir = tmp_path / "docs"

    assert main([str(xml_file), str(out_dir)]) == 0

    assert sorted(p.name for p in out_dir.iterdir()) == [
        "Company.Product.Feature.Widget`1.md",
        "index.md",
    ]
    page = (out_dir / "Company.Product.Feature.Widget`1.md").read_text(
        encoding="utf-8"
    )
    assert page.startswith("# Widget<T1>\n")
    assert "```csharp\nwidget.Spin(3);\n```" in page
    assert "Wrote 2 Markdown files" in capsys.readouterr().out


def test_cli_options(xml_file: Path, tmp_path: Path) -> None:
    """Verify file name, namespace and code language flags."""
    out_dir = tmp_path / "docs"

    main(
        [
            str(xml_file),
            str(out_dir),
            "--file-names",
            "clean",
            "--root-namespace",
            "Company.Product",
            "--trim-root-in-file-names",
            "--code-language",
            "cs",
        ]
    )

    page = (out_dir / "Feature.Widget.md").read_text(encoding="utf-8")
    assert page.startswith("# Feature.Widget<T1>\n")
    assert "(Feature.Widget.md#company.product.feature.widget`1.spin(int))" in page
    assert "```cs\n" in page


def test_cli_single_file(xml_file: Path, tmp_path: Path) -> None:
    """Verify single-file output."""
    out_file = tmp_path / "api.md"

    assert main([str(xml_file), str(out_file), "--single"]) == 0

    text = out_file.read_text(encoding="utf-8")
    assert text.startswith("# API Reference\n\n- [Widget<T1>](#widgett1)\n")
    assert "(#company.product.feature.widget`1.spin(int))" in text


def test_cli_dry_run_writes_report_only(xml_file: Path, tmp_path: Path) -> None:
    """Verify that a dry run plans files without writing Markdown."""
    out_dir = tmp_path / "docs"
    report_file = tmp_path / "report.json"

    main([str(xml_file), str(out_dir), "--dry-run", "--report", str(report_file)])

    assert not out_dir.exists()
    report = json.loads(report_file.read_text(encoding="utf-8"))
    assert report["meta"]["dry_run"] is True
    assert sorted(Path(f).name for f in report["files"]) == [
        "Company.Product.Feature.Widget`1.md",
        "index.md",
    ]


def test_cli_config_file(xml_file: Path, tmp_path: Path) -> None:
    """Verify that settings come from the config file unless overridden."""
    config_file = tmp_path / "xmldoc2md.yml"
    config_file.write_text(
        yaml.dump(
            {
                "render": {"file_name_style": "clean"},
                "output": {"single_file": True},
            }
        ),
        encoding="utf-8",
    )
    out_file = tmp_path / "all.md"

    main([str(xml_file), str(out_file), "--config", str(config_file)])

    assert out_file.is_file()
    assert "# Widget<T1>" in out_file.read_text(encoding="utf-8")


def test_cli_missing_xml(tmp_path: Path) -> None:
    """Verify that a missing input file stops with a message."""
    with pytest.raises(SystemExit, match="not found"):
        main([str(tmp_path / "missing.xml"), str(tmp_path / "docs")])


def test_cli_malformed_xml(tmp_path: Path) -> None:
    """Verify that a broken export stops with a load error."""
    bad = tmp_path / "bad.xml"
    bad.write_text("<doc><members>", encoding="utf-8")
    with pytest.raises(SystemExit, match="Cannot load documentation export"):
        main([str(bad), str(tmp_path / "docs")])

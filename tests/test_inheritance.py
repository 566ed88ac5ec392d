"""Tests for `<inheritdoc>` resolution and content merging."""

import xml.etree.ElementTree as ET

from xmldoc2md.documentation_model import DocumentationModel
from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.effective_content import effective_content
from xmldoc2md.inheritance_resolver import HeuristicInheritanceResolver
from xmldoc2md.merge_inherited_content import merge_inherited_content
from xmldoc2md.render_context import RenderContext

INHERIT_XML = """<?xml version="1.0"?>
<doc><members>
  <member name="M:Lib.Mathx.Add(System.Int32,System.Int32)">
    <summary>Add two integers.</summary>
    <param name="a">First operand.</param>
    <param name="b">Second operand.</param>
    <returns>The sum.</returns>
    <exception cref="T:System.OverflowException">On overflow.</exception>
  </member>
  <member name="M:Lib.Mathx.AddAlias(System.Int32,System.Int32)">
    <inheritdoc cref="M:Lib.Mathx.Add(System.Int32,System.Int32)"/>
  </member>
  <member name="M:Lib.Mathx.AddOwn(System.Int32,System.Int32)">
    <inheritdoc cref="M:Lib.Mathx.Add(System.Int32,System.Int32)"/>
    <summary>Own words.</summary>
    <param name="a">Own first.</param>
  </member>
  <member name="M:Lib.Mathx.NoInherit(System.Int32,System.Int32)">
    <summary>Stands alone.</summary>
  </member>
  <member name="M:Lib.Shapes.Draw(System.Int32)">
    <summary>Draw a shape.</summary>
  </member>
  <member name="M:Lib.Shapes.Circle.Draw(System.Int32)">
    <inheritdoc/>
  </member>
  <member name="M:Lib.Shapes.Square.Draw(System.Int32)">
    <summary>Draw a square.</summary>
  </member>
  <member name="M:Lib.Chain.A">
    <inheritdoc cref="M:Lib.Chain.B"/>
  </member>
  <member name="M:Lib.Chain.B">
    <inheritdoc cref="M:Lib.Chain.C"/>
  </member>
  <member name="M:Lib.Chain.C">
    <summary>End of chain.</summary>
  </member>
  <member name="M:Lib.Loop.X">
    <inheritdoc cref="M:Lib.Loop.Y"/>
  </member>
  <member name="M:Lib.Loop.Y">
    <inheritdoc cref="M:Lib.Loop.X"/>
  </member>
</members></doc>
"""


def _setup() -> tuple[DocumentationModel, RenderContext]:
    model = DocumentationModel.from_string(INHERIT_XML)
    return model, RenderContext(model=model)


def _entity(model: DocumentationModel, identifier: str) -> DocumentedEntity:
    entity = model.get(identifier)
    assert entity is not None
    return entity


def _text(el: ET.Element, path: str) -> str | None:
    found = el.find(path)
    return None if found is None else "".join(found.itertext()).strip()


def test_explicit_cref_inherits_missing_sections() -> None:
    """Verify that an explicit cref fills every undocumented section."""
    model, ctx = _setup()
    alias = _entity(model, "M:Lib.Mathx.AddAlias(System.Int32,System.Int32)")

    content = effective_content(alias, ctx)

    assert _text(content, "summary") == "Add two integers."
    assert _text(content, "returns") == "The sum."
    assert [p.get("name") for p in content.findall("param")] == ["a", "b"]
    assert len(content.findall("exception")) == 1


def test_own_content_is_never_overwritten() -> None:
    """Verify that inherited sections only fill gaps."""
    model, ctx = _setup()
    own = _entity(model, "M:Lib.Mathx.AddOwn(System.Int32,System.Int32)")

    content = effective_content(own, ctx)

    assert _text(content, "summary") == "Own words."
    params = {p.get("name"): "".join(p.itertext()) for p in content.findall("param")}
    assert params == {"a": "Own first.", "b": "Second operand."}


def test_no_inheritdoc_means_no_inheritance() -> None:
    """Verify that entities without `<inheritdoc>` are rendered as written."""
    model, ctx = _setup()
    square = _entity(model, "M:Lib.Shapes.Square.Draw(System.Int32)")
    plain = _entity(model, "M:Lib.Mathx.NoInherit(System.Int32,System.Int32)")

    assert effective_content(square, ctx) is square.element
    assert effective_content(plain, ctx).find("returns") is None


def test_prefix_walk_without_cref() -> None:
    """Verify the identifier-based heuristic for a bare `<inheritdoc/>`."""
    model, ctx = _setup()
    circle = _entity(model, "M:Lib.Shapes.Circle.Draw(System.Int32)")

    target = HeuristicInheritanceResolver().resolve(model, circle)

    assert target is not None
    assert target.identifier == "M:Lib.Shapes.Draw(System.Int32)"
    assert _text(effective_content(circle, ctx), "summary") == "Draw a shape."


def test_chains_are_followed() -> None:
    """Verify that inheritance is transitive."""
    model, ctx = _setup()
    a = _entity(model, "M:Lib.Chain.A")
    assert _text(effective_content(a, ctx), "summary") == "End of chain."


def test_cycles_terminate() -> None:
    """Verify that a reference loop stops instead of recursing forever."""
    model, ctx = _setup()
    x = _entity(model, "M:Lib.Loop.X")
    content = effective_content(x, ctx)
    assert content.find("summary") is None


def test_loaded_model_is_not_mutated() -> None:
    """Verify that merging works on a copy of the loaded record."""
    model, ctx = _setup()
    alias = _entity(model, "M:Lib.Mathx.AddAlias(System.Int32,System.Int32)")

    effective_content(alias, ctx)
    effective_content(alias, ctx)

    assert alias.element.find("summary") is None
    assert alias.element.findall("param") == []


def test_merge_lists_only_when_absent() -> None:
    """Verify that repeatable sections are copied as a whole or not at all."""
    into = ET.fromstring('<member><exception cref="T:A">mine</exception></member>')
    source = ET.fromstring(
        "<member>"
        '<exception cref="T:B">theirs</exception>'
        '<seealso cref="T:C"/>'
        "</member>"
    )

    merge_inherited_content(into, source)
    merge_inherited_content(into, source)

    assert [e.get("cref") for e in into.findall("exception")] == ["T:A"]
    assert [s.get("cref") for s in into.findall("seealso")] == ["T:C"]


def test_merge_is_idempotent_for_every_section() -> None:
    """Verify that a second merge leaves the merged content unchanged."""
    into = ET.fromstring('<member><inheritdoc/><param name="a">Own a.</param></member>')
    source = ET.fromstring(
        "<member>"
        "<summary>Inherited summary.</summary>"
        "<returns>Inherited result.</returns>"
        '<param name="a">Their a.</param>'
        '<param name="b">Their b.</param>'
        '<typeparam name="T">Their T.</typeparam>'
        "<example><code>Run();</code></example>"
        "</member>"
    )

    merge_inherited_content(into, source)
    once = ET.tostring(into)
    merge_inherited_content(into, source)

    assert ET.tostring(into) == once
    params = {p.get("name"): p.text for p in into.findall("param")}
    assert params == {"a": "Own a.", "b": "Their b."}
    assert len(into.findall("summary")) == 1

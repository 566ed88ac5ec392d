"""Lookup of the entity a member inherits its documentation from."""

from typing import Protocol

from xmldoc2md.documentation_model import DocumentationModel
from xmldoc2md.documented_entity import DocumentedEntity


class InheritanceStrategy(Protocol):
    """Finds the entity whose documentation `entity` should inherit."""

    def resolve(
        self,
        model: DocumentationModel,
        entity: DocumentedEntity,
    ) -> DocumentedEntity | None:
        """Return the inheritance source, or None when nothing matches."""
        ...


class HeuristicInheritanceResolver:
    """Explicit `<inheritdoc cref="...">` first, then a prefix walk.

    The walk only sees identifiers, not the real type hierarchy: for
    `M:A.B.C.Run(int)` it tries `M:A.B.Run(int)` then `M:A.Run(int)`. It can
    therefore match a same-named method on a type that is not a base type.
    """

    def resolve(
        self,
        model: DocumentationModel,
        entity: DocumentedEntity,
    ) -> DocumentedEntity | None:
        """Return the inheritance source for `entity`, if one can be found."""
        inherit = entity.element.find("inheritdoc")
        cref = (inherit.get("cref") or "").strip() if inherit is not None else ""
        if cref:
            target = model.get(cref)
            if target is not None:
                return target
        return self._walk_type_prefixes(model, entity)

    def _walk_type_prefixes(
        self,
        model: DocumentationModel,
        entity: DocumentedEntity,
    ) -> DocumentedEntity | None:
        member_id = entity.id
        paren = member_id.find("(")
        head = member_id[:paren] if paren >= 0 else member_id
        type_id, dot, _ = head.rpartition(".")
        if not dot:
            return None
        simple = member_id[len(type_id) + 1 :]  # Method(...)

        parts = type_id.split(".")
        for cut in range(len(parts) - 1, 0, -1):
            candidate = f"M:{'.'.join(parts[:cut])}.{simple}"
            target = model.get(candidate)
            if target is not None and target.identifier != entity.identifier:
                return target
        return None

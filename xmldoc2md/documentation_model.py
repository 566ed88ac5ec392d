"""Loading and indexing of compiler-generated XML documentation exports."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from xmldoc2md.containing_type_id import containing_type_id
from xmldoc2md.documented_entity import DocumentedEntity
from xmldoc2md.load_error import LoadError

logger = logging.getLogger(__name__)

MEMBER_KINDS = {"M", "P", "F", "E"}


class DocumentationModel:
    """Read-only mapping of full identifiers to documented entities."""

    def __init__(self, members: dict[str, DocumentedEntity] | None = None) -> None:
        """Wrap an identifier -> entity mapping."""
        self._members: dict[str, DocumentedEntity] = dict(members or {})

    @classmethod
    def load(cls, path: Path | str) -> "DocumentationModel":
        """Parse an XML documentation export.

        Whitespace inside content nodes is kept as-is so code samples survive.
        Records without a name are skipped; a repeated name replaces the earlier record.
        """
        p = Path(path)
        try:
            tree = ET.parse(p)  # noqa: S314
        except ET.ParseError as exc:
            raise LoadError(p, f"not well-formed ({exc})") from exc
        except OSError as exc:
            raise LoadError(p, exc.strerror or str(exc)) from exc
        return cls.from_element(tree.getroot())

    @classmethod
    def from_string(cls, xml_text: str) -> "DocumentationModel":
        """Parse an XML documentation export held in memory."""
        try:
            root = ET.fromstring(xml_text)  # noqa: S314
        except ET.ParseError as exc:
            raise LoadError("<string>", f"not well-formed ({exc})") from exc
        return cls.from_element(root)

    @classmethod
    def from_element(cls, root: ET.Element) -> "DocumentationModel":
        """Index every `<member name="...">` element below `root`."""
        members: dict[str, DocumentedEntity] = {}
        for el in root.iter("member"):
            name = el.get("name")
            if not name or not name.strip():
                continue
            if name in members:
                logger.debug("Duplicate member %s, keeping the last record", name)
            members[name] = DocumentedEntity(identifier=name, element=el)
        logger.info("Loaded %d documented members", len(members))
        return cls(members)

    @property
    def members(self) -> dict[str, DocumentedEntity]:
        """Return a copy of the identifier -> entity mapping."""
        return dict(self._members)

    def __len__(self) -> int:
        """Return the number of documented entities."""
        return len(self._members)

    def __contains__(self, identifier: object) -> bool:
        """Check for an exact, case-sensitive identifier match."""
        return identifier in self._members

    def get(self, identifier: str) -> DocumentedEntity | None:
        """Look up an entity by its full identifier (e.g. `T:Ns.Type`)."""
        return self._members.get(identifier)

    def get_types(self) -> list[DocumentedEntity]:
        """Return all type entities, sorted by identifier."""
        return sorted(
            (m for m in self._members.values() if m.kind == "T"),
            key=lambda m: m.id,
        )

    def members_of(self, type_entity: DocumentedEntity) -> list[DocumentedEntity]:
        """Return the method/property/field/event entities owned by a type."""
        owner = f"T:{type_entity.id}"
        return sorted(
            (
                m
                for m in self._members.values()
                if m.kind in MEMBER_KINDS
                and m.id.startswith(type_entity.id + ".")
                and containing_type_id(m.identifier) == owner
            ),
            key=lambda m: m.id,
        )

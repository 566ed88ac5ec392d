"""Data model for a single documentation record."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

KIND_WORDS = {
    "T": "Type",
    "M": "Method",
    "P": "Property",
    "F": "Field",
    "E": "Event",
}


@dataclass(frozen=True)
class DocumentedEntity:
    """Represents one exported `<member name="K:Id">` record."""

    identifier: str  # full identifier, e.g. M:Ns.Type.Method(System.String)
    element: ET.Element  # the <member> element with its documentation sections

    @property
    def kind(self) -> str:
        """Return the one-letter kind tag (T, M, P, F, E, N, ...)."""
        kind, sep, _ = self.identifier.partition(":")
        return kind if sep else ""

    @property
    def id(self) -> str:
        """Return the identifier without its kind prefix."""
        kind, sep, rest = self.identifier.partition(":")
        return rest if sep else kind

    @property
    def kind_word(self) -> str:
        """Return the long-form kind name used in headings."""
        return KIND_WORDS.get(self.kind, self.kind)

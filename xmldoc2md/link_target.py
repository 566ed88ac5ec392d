"""Data models for representing link targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Represents the resolved target of a cross-reference."""

    title: str
    href: str | None  # None when the token could not be resolved to a location

    def to_markdown(self) -> str:
        """Render as an inline link, or inline code when there is no target."""
        if self.href is None:
            return f"`{self.title}`"
        return f"[{self.title}]({self.href})"

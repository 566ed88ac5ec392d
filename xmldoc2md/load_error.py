"""Error raised when a documentation export cannot be loaded."""

from pathlib import Path


class LoadError(Exception):
    """The export file is missing, unreadable or not well-formed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Record the offending path alongside the failure reason."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load documentation export '{self.path}': {reason}")

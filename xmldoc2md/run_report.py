"""JSON report describing one conversion run."""

import json
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from xmldoc2md.render_options import RenderOptions

logger = logging.getLogger(__name__)


class RunReport:
    """Collects what a run produced and writes it as JSON."""

    def __init__(
        self,
        xml_path: Path | str,
        options: RenderOptions,
        config_hash: str,
        *,
        single_file: bool,
        output: Path | str,
        dry_run: bool = False,
    ) -> None:
        """Record the inputs of the run and start its clock."""
        self.xml_path = str(xml_path)
        self.options = options
        self.config_hash = config_hash
        self.single_file = single_file
        self.output = str(output)
        self.dry_run = dry_run
        self.files: list[str] = []
        self.start_time = time.time()

    def add_files(self, files: list[Path] | list[str]) -> None:
        """Add generated (or, in a dry run, planned) output files."""
        self.files.extend(str(f) for f in files)

    def to_dict(self) -> dict[str, Any]:
        """Return the report content."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "dry_run": self.dry_run,
            },
            "xml": self.xml_path,
            "single": self.single_file,
            "output": self.output,
            "options": asdict(self.options),
            "files": self.files,
        }

    def generate_report(self, path: Path | str) -> Path | None:
        """Write the report; failures are logged, not raised."""
        p = Path(path)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to write report %s: %s", p, exc)
            return None
        return p

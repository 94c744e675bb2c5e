"""JSON output formatter — used by the CLI ``--json`` flag and for file export."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from kisan_ai.models import InterpretedReport


class JSONFormatter:
    """Renders an InterpretedReport as indented JSON bytes."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def format(self, report: InterpretedReport, **kwargs: Any) -> bytes:
        """Serialize *report* (computed fields included) to JSON bytes."""
        return report.model_dump_json(indent=self._indent).encode()

    def format_to_file(self, report: InterpretedReport, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"

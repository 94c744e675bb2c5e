"""Output formatter protocol — defines the contract all formatters implement."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from kisan_ai.models import InterpretedReport


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for report output formatters (JSON, console text, etc.)."""

    def format(self, report: InterpretedReport, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: InterpretedReport, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/json')."""
        ...


__all__ = ["IOutputFormatter"]

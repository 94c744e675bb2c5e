"""Output formatters for rendering an InterpretedReport.

Usage::

    from kisan_ai.formatters import ConsoleFormatter, JSONFormatter

    text = ConsoleFormatter().format(report)
    json_bytes = JSONFormatter().format(report)
"""

from __future__ import annotations

from kisan_ai.formatters.console_formatter import ConsoleFormatter
from kisan_ai.formatters.json_formatter import JSONFormatter
from kisan_ai.formatters.protocols import IOutputFormatter

__all__ = [
    "ConsoleFormatter",
    "IOutputFormatter",
    "JSONFormatter",
]

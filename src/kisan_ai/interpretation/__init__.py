"""Response interpretation: the structured view of a free-text diagnosis."""

from __future__ import annotations

from kisan_ai.interpretation.grouping import group_sections
from kisan_ai.interpretation.pipeline import ReportInterpreter, interpret
from kisan_ai.interpretation.shaper import shape_content
from kisan_ai.interpretation.splitter import split_sections

__all__ = [
    "ReportInterpreter",
    "group_sections",
    "interpret",
    "shape_content",
    "split_sections",
]

"""Plant diagnosis domain: categories, severity tags and classification."""

from __future__ import annotations

from kisan_ai.domains.plant.classifier import (
    ReportSectionClassifier,
    classify_section,
    classify_title,
    detect_severity,
)
from kisan_ai.domains.plant.models import (
    GroupKey,
    ReportCategory,
    SectionClassification,
    SeverityDisplay,
    SeverityTag,
    Urgency,
)

__all__ = [
    "GroupKey",
    "ReportCategory",
    "ReportSectionClassifier",
    "SectionClassification",
    "SeverityDisplay",
    "SeverityTag",
    "Urgency",
    "classify_section",
    "classify_title",
    "detect_severity",
]

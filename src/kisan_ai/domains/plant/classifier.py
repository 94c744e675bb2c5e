"""Plant report section classification: keyword-first, no model calls.

The vision model is prompted to emit fixed upper-case headers, so plain
substring matching on the title is enough to recognise every section type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kisan_ai.domains.plant.categories import CATEGORY_KEYWORDS, SEVERITY_PRIORITY
from kisan_ai.domains.plant.models import ReportCategory, SectionClassification, SeverityTag

if TYPE_CHECKING:
    from kisan_ai.models import Section

log = logging.getLogger(__name__)


class ReportSectionClassifier:
    """Classifies diagnosis report sections by title keyword and content severity.

    Every method is pure and total: unrecognised input resolves to
    ``ReportCategory.UNKNOWN`` / ``SeverityTag.NONE`` instead of raising.
    """

    def __init__(
        self,
        category_keywords: tuple[tuple[ReportCategory, tuple[str, ...]], ...] = CATEGORY_KEYWORDS,
        severity_priority: tuple[tuple[str, SeverityTag], ...] = SEVERITY_PRIORITY,
    ) -> None:
        self._category_keywords = category_keywords
        self._severity_priority = severity_priority

    def classify_by_title(self, title: str) -> ReportCategory:
        """Case-sensitive containment match; first table entry wins."""
        for category, keywords in self._category_keywords:
            for keyword in keywords:
                if keyword in title:
                    return category
        return ReportCategory.UNKNOWN

    def severity_of(self, content: str) -> SeverityTag:
        """Case-insensitive severity lookup in priority order."""
        lowered = content.lower()
        for word, tag in self._severity_priority:
            if word in lowered:
                return tag
        return SeverityTag.NONE

    def classify(self, section: Section) -> SectionClassification:
        """Category from the title, severity from the content."""
        result = SectionClassification(
            category=self.classify_by_title(section.title),
            severity=self.severity_of(section.content),
        )
        if result.category is ReportCategory.UNKNOWN:
            log.debug("Unrecognised section title: %r", section.title)
        return result


_default_classifier = ReportSectionClassifier()


def classify_title(title: str) -> ReportCategory:
    return _default_classifier.classify_by_title(title)


def detect_severity(content: str) -> SeverityTag:
    return _default_classifier.severity_of(content)


def classify_section(section: Section) -> SectionClassification:
    return _default_classifier.classify(section)

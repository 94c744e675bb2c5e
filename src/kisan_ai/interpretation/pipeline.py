"""Report interpretation pipeline: split → classify → shape → group."""

from __future__ import annotations

import logging

from kisan_ai.domains.plant.classifier import ReportSectionClassifier
from kisan_ai.interpretation.grouping import group_sections
from kisan_ai.interpretation.shaper import shape_content
from kisan_ai.interpretation.splitter import split_sections
from kisan_ai.models import InterpretedReport, InterpretedSection, Section

log = logging.getLogger(__name__)


class ReportInterpreter:
    """Turns a raw diagnosis text into a structured ``InterpretedReport``.

    Stateless; one instance may serve any number of concurrent callers.
    """

    def __init__(self, classifier: ReportSectionClassifier | None = None) -> None:
        self._classifier = classifier or ReportSectionClassifier()

    def interpret_section(self, section: Section) -> InterpretedSection:
        classification = self._classifier.classify(section)
        return InterpretedSection(
            title=section.title,
            content=section.content,
            category=classification.category,
            severity=classification.severity,
            items=shape_content(section.content),
        )

    def interpret(self, raw: str) -> InterpretedReport:
        sections = [self.interpret_section(s) for s in split_sections(raw)]
        grouped = group_sections(sections, self._classifier)

        log.debug(
            "Interpreted report: %d sections, %d grouped",
            len(sections),
            sum(len(v) for v in grouped.values()),
        )
        return InterpretedReport(raw=raw, sections=sections, grouped=grouped)


_default_interpreter = ReportInterpreter()


def interpret(raw: str) -> InterpretedReport:
    """Interpret *raw* with the default keyword tables."""
    return _default_interpreter.interpret(raw)

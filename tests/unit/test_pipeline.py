"""Unit tests for the interpretation pipeline (split → classify → shape → group)."""

from __future__ import annotations

from kisan_ai.domains.plant.models import GroupKey, ReportCategory, SeverityTag, Urgency
from kisan_ai.interpretation.pipeline import ReportInterpreter, interpret
from kisan_ai.models import BulletItem, HeadingItem, Section

ROUND_TRIP_TEXT = (
    "**PLANT IDENTIFICATION:**\n- Tomato\n"
    "**DISEASE/ISSUE DETECTED:**\nSeverity: Moderate\n- Early blight"
)


class TestInterpret:
    def test_round_trip_scenario(self) -> None:
        report = interpret(ROUND_TRIP_TEXT)
        assert len(report.sections) == 2

        first, second = report.sections
        assert (first.category, first.severity) == (ReportCategory.IDENTIFICATION, SeverityTag.NONE)
        assert (second.category, second.severity) == (ReportCategory.DISEASE_OR_ISSUE, SeverityTag.MODERATE)
        assert second.items == (HeadingItem(text="Severity: Moderate"), BulletItem(text="Early blight"))

    def test_full_report(self, plant_report: str) -> None:
        report = interpret(plant_report)
        assert report.has_structure
        assert len(report.sections) == 7
        assert [len(report.group(key)) for key in GroupKey] == [1, 1, 2, 1, 2]
        assert report.ungrouped == []

    def test_unstructured_text_falls_back_to_raw(self) -> None:
        raw = "This image does not show a plant."
        report = interpret(raw)
        assert not report.has_structure
        assert report.sections == []
        assert report.raw == raw
        assert all(v == [] for v in report.grouped.values())

    def test_empty_text(self) -> None:
        report = interpret("")
        assert not report.has_structure
        assert report.raw == ""

    def test_unknown_sections_kept_but_ungrouped(self) -> None:
        report = interpret("**ADDITIONAL NOTES:**\n- Photo was blurry\n**PROGNOSIS:**\n- Good")
        assert [s.title for s in report.sections] == ["ADDITIONAL NOTES", "PROGNOSIS"]
        assert [s.title for s in report.ungrouped] == ["ADDITIONAL NOTES"]
        grouped_titles = [s.title for members in report.grouped.values() for s in members]
        assert "ADDITIONAL NOTES" not in grouped_titles

    def test_sections_keep_source_text(self) -> None:
        report = interpret(ROUND_TRIP_TEXT)
        assert report.sections[1].content == "Severity: Moderate\n- Early blight"

    def test_grouped_entries_are_report_sections(self, plant_report: str) -> None:
        report = interpret(plant_report)
        diagnosis = report.group(GroupKey.DIAGNOSIS)[0]
        assert diagnosis in report.sections
        assert diagnosis.display.urgency == Urgency.MEDIUM

    def test_treatment_marked_as_recommendation(self, plant_report: str) -> None:
        report = interpret(plant_report)
        (treatment,) = report.group(GroupKey.TREATMENT)
        assert treatment.is_recommendation
        assert not report.group(GroupKey.IDENTIFICATION)[0].is_recommendation

    def test_repeatable(self, plant_report: str) -> None:
        assert interpret(plant_report) == interpret(plant_report)


class TestReportInterpreter:
    def test_default_instance_matches_function(self, plant_report: str) -> None:
        assert ReportInterpreter().interpret(plant_report) == interpret(plant_report)

    def test_interpret_section(self) -> None:
        result = ReportInterpreter().interpret_section(
            Section(title="DISEASE DETECTED", content="- Leaf rust\nSeverity: Severe")
        )
        assert result.category == ReportCategory.DISEASE_OR_ISSUE
        assert result.severity == SeverityTag.SEVERE
        assert result.items == (BulletItem(text="Leaf rust"), HeadingItem(text="Severity: Severe"))

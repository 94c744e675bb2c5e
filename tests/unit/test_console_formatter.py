"""Tests for the rich ConsoleFormatter."""

from __future__ import annotations

from rich.console import Console

from kisan_ai.formatters.console_formatter import ConsoleFormatter
from kisan_ai.formatters.protocols import IOutputFormatter
from kisan_ai.interpretation.pipeline import interpret


def _text(raw: str) -> str:
    return ConsoleFormatter().format(interpret(raw)).decode()


class TestConsoleFormatter:
    def test_cards_for_every_section(self, plant_report: str) -> None:
        text = _text(plant_report)
        for title in (
            "PLANT IDENTIFICATION",
            "DISEASE/ISSUE DETECTED",
            "SYMPTOMS OBSERVED",
            "POSSIBLE CAUSES",
            "TREATMENT RECOMMENDATIONS",
            "PREVENTION TIPS",
            "PROGNOSIS",
        ):
            assert title in text

    def test_group_headings(self, plant_report: str) -> None:
        text = _text(plant_report)
        assert "Analysis Details" in text
        assert "Prevention & Prognosis" in text
        assert text.index("Analysis Details") < text.index("SYMPTOMS OBSERVED")

    def test_diagnosis_badge_and_urgency(self) -> None:
        text = _text("**DISEASE/ISSUE DETECTED:**\n- Late blight\nSeverity: Severe")
        assert "Severe" in text
        assert "Urgent Action Required" in text

    def test_no_badge_without_severity(self) -> None:
        text = _text("**DISEASE/ISSUE DETECTED:**\n- Unclear")
        assert "Action" not in text

    def test_bullets_and_headings(self) -> None:
        text = _text("**TREATMENT:**\nImmediate actions:\n- Remove infected leaves")
        assert "Immediate actions:" in text
        assert "• Remove infected leaves" in text

    def test_unknown_sections_not_rendered(self) -> None:
        text = _text("**ADDITIONAL NOTES:**\n- blurry\n**PROGNOSIS:**\n- Good")
        assert "ADDITIONAL NOTES" not in text
        assert "PROGNOSIS" in text

    def test_raw_text_fallback(self) -> None:
        assert _text("The image does not show a plant.").strip() == "The image does not show a plant."

    def test_render_to_console(self, plant_report: str) -> None:
        console = Console(record=True, width=100)
        ConsoleFormatter().render(interpret(plant_report), console)
        assert "Diagnosis Report" in console.export_text()

    def test_title_with_markup_characters(self) -> None:
        text = _text("**TREATMENT [organic]:**\n- Neem oil")
        assert "TREATMENT [organic]" in text

    def test_content_type(self) -> None:
        assert ConsoleFormatter().content_type == "text/plain"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ConsoleFormatter(), IOutputFormatter)

    def test_format_to_file(self, tmp_path, plant_report: str) -> None:
        path = ConsoleFormatter().format_to_file(interpret(plant_report), tmp_path / "report.txt")
        assert "PLANT IDENTIFICATION" in path.read_text()

"""Terminal renderer: one rich panel ("card") per report section.

Cards follow the display groups in order: identification, diagnosis with a
severity badge and urgency line, analysis details, treatment
recommendations, then prevention and prognosis. A report without structured
sections is printed verbatim.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from kisan_ai.domains.plant.categories import GROUP_TITLES
from kisan_ai.domains.plant.models import GroupKey
from kisan_ai.models import BulletItem, InterpretedReport, InterpretedSection

# Group keys rendered under a shared sub-heading rather than one per card
_HEADED_GROUPS = frozenset({GroupKey.ANALYSIS, GroupKey.PREVENTION_PROGNOSIS})

_GROUP_BORDER: dict[GroupKey, str] = {
    GroupKey.IDENTIFICATION: "green",
    GroupKey.ANALYSIS: "grey50",
    GroupKey.TREATMENT: "blue",
    GroupKey.PREVENTION_PROGNOSIS: "grey50",
}

# rich has no "orange" / "gray" names matching the badge palette
_RICH_COLORS = {"orange": "dark_orange", "gray": "grey50"}


def _rich_color(color: str) -> str:
    return _RICH_COLORS.get(color, color)


class ConsoleFormatter:
    """Renders an InterpretedReport as rich panels or plain text."""

    def __init__(self, width: int = 88) -> None:
        self._width = width

    def _body(self, section: InterpretedSection) -> Group:
        marker = "[blue]•[/blue]" if section.is_recommendation else "•"
        lines: list[Text] = []
        for item in section.items:
            if isinstance(item, BulletItem):
                lines.append(Text.from_markup(f"  {marker} ") + Text(item.text))
            else:
                lines.append(Text(item.text, style="bold"))
        return Group(*lines)

    def _card(self, section: InterpretedSection, key: GroupKey) -> Panel:
        if key is GroupKey.DIAGNOSIS:
            display = section.display
            color = _rich_color(display.color)
            subtitle = None
            if display.has_badge:
                subtitle = f"[bold {color}]{display.label}[/]"
                if display.urgency_label:
                    subtitle += f" · [{color}]{display.urgency_label}[/]"
            return Panel(
                self._body(section),
                title=f"[bold]{escape(section.title)}[/bold]",
                subtitle=subtitle,
                border_style=color,
            )
        return Panel(
            self._body(section),
            title=f"[bold]{escape(section.title)}[/bold]",
            border_style=_GROUP_BORDER.get(key, "white"),
        )

    def render(self, report: InterpretedReport, console: Console) -> None:
        """Print *report* to *console*."""
        if not report.has_structure:
            console.print(Text(report.raw))
            return

        console.print(Rule("Diagnosis Report"))
        for key in GroupKey:
            sections = report.group(key)
            if not sections:
                continue
            if key in _HEADED_GROUPS:
                console.print(Text(GROUP_TITLES[key], style="bold underline"))
            for section in sections:
                console.print(self._card(section, key))

    def format(self, report: InterpretedReport, **kwargs: Any) -> bytes:
        """Plain-text rendering (no ANSI codes)."""
        console = Console(record=True, width=self._width, file=io.StringIO())
        self.render(report, console)
        return console.export_text().encode()

    def format_to_file(self, report: InterpretedReport, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/plain"


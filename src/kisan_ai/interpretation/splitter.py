"""Split a raw diagnosis text into titled sections on ``**`` bold markers.

The model is prompted to wrap each header in bold markers, so the text
alternates header / body once the marker-delimited fragments are collected::

    **PLANT IDENTIFICATION:**
    - Tomato
    **DISEASE/ISSUE DETECTED:**
    Severity: Moderate

yields ``[Section("PLANT IDENTIFICATION", "- Tomato"),
Section("DISEASE/ISSUE DETECTED", "Severity: Moderate")]``.
"""

from __future__ import annotations

import logging

from kisan_ai.models import Section

log = logging.getLogger(__name__)

BOLD_MARKER = "**"


def _normalize_title(fragment: str) -> str:
    return fragment.strip().rstrip(":").strip()


def normalize_content(fragment: str) -> str:
    """Trim every line and drop blank ones, keeping line order."""
    lines = (line.strip() for line in fragment.split("\n"))
    return "\n".join(line for line in lines if line)


def split_sections(raw: str) -> list[Section]:
    """Break *raw* into ``(title, content)`` sections in source order.

    Fragments are paired header-then-body. A trailing unpaired fragment is
    dropped, and text without any bold marker yields no sections at all.
    """
    if BOLD_MARKER not in raw:
        return []

    fragments = [f for f in raw.split(BOLD_MARKER) if f.strip()]
    if len(fragments) % 2:
        log.debug("Dropping unpaired trailing fragment (%d chars)", len(fragments[-1]))

    sections: list[Section] = []
    for i in range(0, len(fragments) - 1, 2):
        title = _normalize_title(fragments[i])
        if not title:
            continue
        sections.append(Section(title=title, content=normalize_content(fragments[i + 1])))
    return sections

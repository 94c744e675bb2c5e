"""Shape section content into display items (bullets and heading lines)."""

from __future__ import annotations

from kisan_ai.models import BulletItem, DisplayItem, HeadingItem

BULLET_PREFIX = "-"


def shape_content(content: str) -> list[DisplayItem]:
    """One item per non-blank line; ``-`` lines become bullets."""
    items: list[DisplayItem] = []
    for line in content.split("\n"):
        text = line.strip()
        if not text:
            continue
        if text.startswith(BULLET_PREFIX):
            items.append(BulletItem(text=text[len(BULLET_PREFIX):].strip()))
        else:
            items.append(HeadingItem(text=text))
    return items

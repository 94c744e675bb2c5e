"""Bucket classified sections into the display groups."""

from __future__ import annotations

from typing import Sequence, TypeVar

from kisan_ai.domains.plant.categories import GROUP_CATEGORIES
from kisan_ai.domains.plant.classifier import ReportSectionClassifier
from kisan_ai.domains.plant.models import GroupKey
from kisan_ai.models import Section

S = TypeVar("S", bound=Section)


def group_sections(
    sections: Sequence[S],
    classifier: ReportSectionClassifier | None = None,
) -> dict[GroupKey, list[S]]:
    """Filter *sections* into every ``GroupKey`` bucket, keeping source order.

    All keys are present in the result. Sections with an unrecognised title
    belong to no group and are left out.
    """
    classifier = classifier or ReportSectionClassifier()
    categories = [classifier.classify_by_title(s.title) for s in sections]
    return {
        key: [s for s, category in zip(sections, categories) if category in members]
        for key, members in GROUP_CATEGORIES.items()
    }

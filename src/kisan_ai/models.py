"""Pydantic data models for kisan-ai.

Report models are produced by the interpretation pipeline and are never
mutated after construction. Domain enums (``ReportCategory``,
``SeverityTag``, ``GroupKey``) live in ``kisan_ai.domains.plant.models``.
"""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from kisan_ai.domains.plant.categories import RECOMMENDATION_CATEGORIES, SEVERITY_DISPLAY
from kisan_ai.domains.plant.models import (
    GroupKey,
    ReportCategory,
    SeverityDisplay,
    SeverityTag,
)

# ── Sections ─────────────────────────────────────────────────────────


class Section(BaseModel):
    """A titled block of a diagnosis report, in source order."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str = ""


# ── Display items ────────────────────────────────────────────────────


class BulletItem(BaseModel):
    """A content line that started with ``-``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet"] = "bullet"
    text: str


class HeadingItem(BaseModel):
    """Any other non-blank content line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    text: str


DisplayItem = Annotated[Union[BulletItem, HeadingItem], Field(discriminator="kind")]


# ── Interpreted report ───────────────────────────────────────────────


class InterpretedSection(Section):
    """A section extended with its classification and shaped content."""

    category: ReportCategory = ReportCategory.UNKNOWN
    severity: SeverityTag = SeverityTag.NONE
    items: tuple[DisplayItem, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display(self) -> SeverityDisplay:
        """Badge label, urgency and colour for this section's severity."""
        return SEVERITY_DISPLAY[self.severity]

    @property
    def is_recommendation(self) -> bool:
        """True when the bullets are actionable advice (treatment steps)."""
        return self.category in RECOMMENDATION_CATEGORIES


class InterpretedReport(BaseModel):
    """Full result of interpreting one raw diagnosis text."""

    model_config = ConfigDict(frozen=True)

    raw: str = ""
    sections: list[InterpretedSection] = Field(default_factory=list)
    grouped: dict[GroupKey, list[InterpretedSection]] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_structure(self) -> bool:
        """False when no bold headers were found; show ``raw`` instead."""
        return bool(self.sections)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ungrouped(self) -> list[InterpretedSection]:
        """Sections left out of every group (unrecognised titles)."""
        return [s for s in self.sections if s.category is ReportCategory.UNKNOWN]

    def group(self, key: GroupKey) -> list[InterpretedSection]:
        return self.grouped.get(key, [])


# ── Image input / diagnosis result ───────────────────────────────────


class ImageInput(BaseModel):
    """An encoded image submitted for diagnosis."""

    data: bytes
    mime_type: str
    filename: str = "upload"

    @classmethod
    def from_path(cls, path: Path) -> ImageInput:
        """Read an image file, guessing its MIME type from the extension."""
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            data=path.read_bytes(),
            mime_type=mime_type or "application/octet-stream",
            filename=path.name,
        )

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


class DiagnosisResult(BaseModel):
    """Interpreted diagnosis for one submitted image."""

    filename: str
    model: str
    report: InterpretedReport

"""Plant diagnosis domain models — enums and display metadata.

This is the canonical location for the categories, severity tags and
groupings the report interpreter produces. ``kisan_ai.models`` builds the
pydantic report types on top of these.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ── Section categories ───────────────────────────────────────────────


class ReportCategory(str, Enum):
    """Semantic bucket of a diagnosis report section, derived from its title."""

    IDENTIFICATION = "identification"
    DISEASE_OR_ISSUE = "disease_or_issue"
    SYMPTOMS = "symptoms"
    CAUSES = "causes"
    TREATMENT = "treatment"
    PREVENTION = "prevention"
    PROGNOSIS = "prognosis"
    UNKNOWN = "unknown"


# ── Severity ─────────────────────────────────────────────────────────


class SeverityTag(str, Enum):
    """Coarse seriousness of a detected issue, derived from section content."""

    SEVERE = "severe"
    MODERATE = "moderate"
    MILD = "mild"
    HEALTHY = "healthy"
    NONE = "none"


class Urgency(str, Enum):
    """How soon the grower should act on a severity tag."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SeverityDisplay:
    """Presentation metadata for a severity tag (badge, color, urgency line)."""

    label: str
    urgency: Urgency
    color: str
    urgency_label: str = ""

    @property
    def has_badge(self) -> bool:
        return bool(self.label)


# ── Classification result ────────────────────────────────────────────


@dataclass(frozen=True)
class SectionClassification:
    """Category and severity assigned to a single report section."""

    category: ReportCategory
    severity: SeverityTag = SeverityTag.NONE


# ── Display groups ───────────────────────────────────────────────────


class GroupKey(str, Enum):
    """Display groupings used by presentation layers."""

    IDENTIFICATION = "identification"
    DIAGNOSIS = "diagnosis"
    ANALYSIS = "analysis"
    TREATMENT = "treatment"
    PREVENTION_PROGNOSIS = "prevention_prognosis"

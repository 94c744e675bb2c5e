"""Keyword tables for plant diagnosis report classification.

Titles are matched case-sensitively against the upper-case header tokens
that the diagnosis prompt asks the model to emit. Content is matched
case-insensitively for severity words.
"""

from __future__ import annotations

from kisan_ai.domains.plant.models import (
    GroupKey,
    ReportCategory,
    SeverityDisplay,
    SeverityTag,
    Urgency,
)

# Checked in order; the first category with a keyword contained in the
# title wins.
CATEGORY_KEYWORDS: tuple[tuple[ReportCategory, tuple[str, ...]], ...] = (
    (ReportCategory.IDENTIFICATION, ("IDENTIFICATION",)),
    (ReportCategory.DISEASE_OR_ISSUE, ("DISEASE", "ISSUE")),
    (ReportCategory.SYMPTOMS, ("SYMPTOMS",)),
    (ReportCategory.CAUSES, ("CAUSES",)),
    (ReportCategory.TREATMENT, ("TREATMENT",)),
    (ReportCategory.PREVENTION, ("PREVENTION",)),
    (ReportCategory.PROGNOSIS, ("PROGNOSIS",)),
)

# Highest priority first.
SEVERITY_PRIORITY: tuple[tuple[str, SeverityTag], ...] = (
    ("severe", SeverityTag.SEVERE),
    ("moderate", SeverityTag.MODERATE),
    ("mild", SeverityTag.MILD),
    ("healthy", SeverityTag.HEALTHY),
)

SEVERITY_DISPLAY: dict[SeverityTag, SeverityDisplay] = {
    SeverityTag.SEVERE: SeverityDisplay("Severe", Urgency.HIGH, "red", "Urgent Action Required"),
    SeverityTag.MODERATE: SeverityDisplay("Moderate", Urgency.MEDIUM, "orange", "Action Needed Soon"),
    SeverityTag.MILD: SeverityDisplay("Mild", Urgency.LOW, "yellow", "Monitor Closely"),
    SeverityTag.HEALTHY: SeverityDisplay("Healthy", Urgency.NONE, "green"),
    SeverityTag.NONE: SeverityDisplay("", Urgency.UNKNOWN, "gray"),
}

GROUP_CATEGORIES: dict[GroupKey, tuple[ReportCategory, ...]] = {
    GroupKey.IDENTIFICATION: (ReportCategory.IDENTIFICATION,),
    GroupKey.DIAGNOSIS: (ReportCategory.DISEASE_OR_ISSUE,),
    GroupKey.ANALYSIS: (ReportCategory.SYMPTOMS, ReportCategory.CAUSES),
    GroupKey.TREATMENT: (ReportCategory.TREATMENT,),
    GroupKey.PREVENTION_PROGNOSIS: (ReportCategory.PREVENTION, ReportCategory.PROGNOSIS),
}

GROUP_TITLES: dict[GroupKey, str] = {
    GroupKey.IDENTIFICATION: "Plant Identification",
    GroupKey.DIAGNOSIS: "Diagnosis",
    GroupKey.ANALYSIS: "Analysis Details",
    GroupKey.TREATMENT: "Treatment Recommendations",
    GroupKey.PREVENTION_PROGNOSIS: "Prevention & Prognosis",
}

# Sections whose bullets are actionable recommendations
RECOMMENDATION_CATEGORIES: frozenset[ReportCategory] = frozenset({ReportCategory.TREATMENT})

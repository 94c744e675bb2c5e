"""kisan-ai: plant disease diagnosis from photos, with structured report interpretation.

Core API::

    from kisan_ai import interpret

    report = interpret(raw_text)
    for section in report.group(GroupKey.DIAGNOSIS):
        print(section.title, section.severity, section.display.urgency_label)

Service API::

    from kisan_ai import AppSettings, DiagnosisService, ImageInput, VisionClient

    settings = AppSettings()
    service = DiagnosisService(VisionClient(settings.vision))
    result = await service.diagnose(ImageInput.from_path(path))
"""

from __future__ import annotations

from kisan_ai.core.config import AppSettings
from kisan_ai.domains.plant.classifier import ReportSectionClassifier
from kisan_ai.domains.plant.models import (
    GroupKey,
    ReportCategory,
    SectionClassification,
    SeverityTag,
    Urgency,
)
from kisan_ai.exceptions import (
    EmptyAnalysisError,
    ImageInputError,
    KisanError,
    NonRetryableError,
    RetryableError,
    VisionClientError,
)
from kisan_ai.interpretation import (
    ReportInterpreter,
    group_sections,
    interpret,
    shape_content,
    split_sections,
)
from kisan_ai.models import (
    BulletItem,
    DiagnosisResult,
    HeadingItem,
    ImageInput,
    InterpretedReport,
    InterpretedSection,
    Section,
)
from kisan_ai.providers.vision.client import VisionClient
from kisan_ai.services.diagnosis_service import DiagnosisService

__all__ = [
    # Interpretation core
    "interpret",
    "split_sections",
    "shape_content",
    "group_sections",
    "ReportInterpreter",
    "ReportSectionClassifier",
    # Models
    "Section",
    "InterpretedSection",
    "InterpretedReport",
    "BulletItem",
    "HeadingItem",
    "ImageInput",
    "DiagnosisResult",
    "ReportCategory",
    "SeverityTag",
    "Urgency",
    "GroupKey",
    "SectionClassification",
    # Services
    "AppSettings",
    "VisionClient",
    "DiagnosisService",
    # Errors
    "KisanError",
    "ImageInputError",
    "VisionClientError",
    "RetryableError",
    "NonRetryableError",
    "EmptyAnalysisError",
]

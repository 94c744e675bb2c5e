"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kisan_ai.core.config import AppSettings

log = logging.getLogger(__name__)

# LiteLLM prefixes served locally, which need no API key
_NO_KEY_PREFIXES = ("ollama/", "ollama_chat/")


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_auth(settings)


def _check_api_key(settings: AppSettings) -> None:
    """Reject a missing API key for hosted vision providers."""
    if settings.vision.model.startswith(_NO_KEY_PREFIXES):
        return
    if not settings.vision.api_key:
        raise ValueError(
            f"KISAN_VISION_API_KEY is required for model '{settings.vision.model}'. "
            f"Set it via environment variable or secrets manager."
        )


def _check_auth(settings: AppSettings) -> None:
    """Reject auth enabled with no keys, since every request would be refused."""
    if settings.auth.enabled and not settings.auth.api_keys:
        raise ValueError(
            "KISAN_AUTH_ENABLED=true but no API keys configured. "
            "Set KISAN_AUTH_API_KEYS or disable auth."
        )
    if not settings.auth.enabled:
        log.info("API authentication disabled")

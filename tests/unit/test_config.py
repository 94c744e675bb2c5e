"""Tests for settings loading and startup validation."""

from __future__ import annotations

import pytest

from kisan_ai.core.config import AppSettings, AuthConfig, VisionConfig
from kisan_ai.core.startup_checks import validate_settings


class TestVisionConfig:
    def test_defaults(self) -> None:
        config = VisionConfig()
        assert config.model == "gemini/gemini-1.5-flash"
        assert config.max_retries >= 1
        assert config.max_image_bytes == 10 * 1024 * 1024

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KISAN_VISION_MODEL", "openai/gpt-4o")
        monkeypatch.setenv("KISAN_VISION_MAX_RETRIES", "5")
        config = VisionConfig()
        assert config.model == "openai/gpt-4o"
        assert config.max_retries == 5

    def test_rejects_zero_retries(self) -> None:
        with pytest.raises(ValueError):
            VisionConfig(max_retries=0)


class TestAuthConfig:
    def test_api_keys_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KISAN_AUTH_ENABLED", "true")
        monkeypatch.setenv("KISAN_AUTH_API_KEYS", '["a", "b"]')
        config = AuthConfig()
        assert config.enabled
        assert config.api_keys == ["a", "b"]


class TestValidateSettings:
    def test_valid(self, settings: AppSettings) -> None:
        validate_settings(settings)

    def test_missing_api_key(self, settings: AppSettings) -> None:
        settings.vision = VisionConfig(api_key="")
        with pytest.raises(ValueError, match="KISAN_VISION_API_KEY"):
            validate_settings(settings)

    def test_local_model_needs_no_key(self, settings: AppSettings) -> None:
        settings.vision = VisionConfig(model="ollama/llava", api_key="")
        validate_settings(settings)

    def test_auth_without_keys(self, settings: AppSettings) -> None:
        settings.auth = AuthConfig(enabled=True, api_keys=[])
        with pytest.raises(ValueError, match="no API keys"):
            validate_settings(settings)

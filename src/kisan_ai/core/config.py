"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``KISAN_<GROUP>_*`` environment variables::

    export KISAN_VISION_MODEL=gemini/gemini-1.5-flash
    export KISAN_VISION_API_KEY=...
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024


class VisionConfig(BaseSettings):
    """Vision provider configuration.

    Env vars use ``KISAN_VISION_`` prefix. ``model`` is a LiteLLM model id,
    so the provider is selected by its prefix (``gemini/``, ``openai/``, ...).
    """

    model_config = {"env_prefix": "KISAN_VISION_"}

    model: str = "gemini/gemini-1.5-flash"
    api_key: str = ""
    temperature: float = 0.2
    timeout: float = 60.0
    max_retries: int = Field(default=3, ge=1)
    retry_jitter_factor: float = 0.5
    retry_max_delay: float = 30.0
    max_image_bytes: int = Field(default=DEFAULT_MAX_IMAGE_BYTES, gt=0)


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``KISAN_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "KISAN_OBSERVABILITY_"}

    service_name: str = "kisan-ai"
    log_level: str = "INFO"


class AuthConfig(BaseSettings):
    """API key authentication.

    Env vars use ``KISAN_AUTH_`` prefix::

        export KISAN_AUTH_ENABLED=true
        export KISAN_AUTH_API_KEYS='["key-one", "key-two"]'
    """

    model_config = {"env_prefix": "KISAN_AUTH_"}

    enabled: bool = False
    api_keys: list[str] = Field(default_factory=list)


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``KISAN_API_`` prefix.
    """

    model_config = {"env_prefix": "KISAN_API_"}

    title: str = "kisan-ai"
    description: str = "Plant disease diagnosis from photos, with structured report interpretation"
    port: int = 8080


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    vision: VisionConfig = VisionConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    auth: AuthConfig = AuthConfig()
    api: APIConfig = APIConfig()

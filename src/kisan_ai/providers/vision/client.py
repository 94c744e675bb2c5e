"""Async vision client routed through LiteLLM for multi-provider support.

The image travels as a base64 ``data:`` URL inside an ``image_url`` content
block, which LiteLLM translates for Gemini, OpenAI and Anthropic models alike.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from kisan_ai.core.config import VisionConfig
from kisan_ai.exceptions import EmptyAnalysisError, NonRetryableError, RetryableError
from kisan_ai.interfaces.vision import IVisionProvider
from kisan_ai.models import ImageInput

log = logging.getLogger(__name__)


class VisionClient(IVisionProvider):
    """Async multimodal completion client with retry and backoff."""

    def __init__(self, config: VisionConfig) -> None:
        self._config = config

    @property
    def model(self) -> str:
        return self._config.model

    @staticmethod
    def _is_retryable(exc: Exception) -> bool:
        """Classify whether a provider error should be retried.

        Non-retryable: AuthenticationError, BadRequestError, NotFoundError (4xx non-429).
        Retryable (default): everything else including rate limits, timeouts, 5xx.
        """
        from litellm.exceptions import (
            AuthenticationError,
            BadRequestError,
            NotFoundError,
        )

        non_retryable = (AuthenticationError, BadRequestError, NotFoundError)
        return not isinstance(exc, non_retryable)

    @staticmethod
    def build_messages(image: ImageInput, prompt: str) -> list[dict[str, Any]]:
        """Single user turn carrying the prompt text and the image."""
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": image.to_data_url()}},
                ],
            }
        ]

    async def analyze(self, image: ImageInput, prompt: str) -> str:
        """Send *image* with *prompt*; returns the answer text.

        Raises:
            NonRetryableError: the provider rejected the request outright.
            RetryableError: every attempt failed with a transient error.
            EmptyAnalysisError: the provider answered with no text.
        """
        from litellm import acompletion

        messages = self.build_messages(image, prompt)
        max_retries = self._config.max_retries
        last_error: Exception | None = None

        for attempt in range(max_retries):
            try:
                kwargs: dict[str, Any] = {
                    "model": self._config.model,
                    "messages": messages,
                    "temperature": self._config.temperature,
                    "timeout": self._config.timeout,
                }
                if self._config.api_key:
                    kwargs["api_key"] = self._config.api_key
                response = await acompletion(**kwargs)
                break

            except Exception as e:
                last_error = e
                if not self._is_retryable(e):
                    raise NonRetryableError(f"Non-retryable vision error: {e}") from e

                base_wait = min(2**attempt, self._config.retry_max_delay)
                jitter = random.uniform(0, base_wait * self._config.retry_jitter_factor)
                wait = base_wait + jitter

                log.warning(
                    "Vision retry %d/%d: %s (wait=%.1fs)",
                    attempt + 1, max_retries, e, wait,
                )
                if attempt < max_retries - 1:
                    await asyncio.sleep(wait)
        else:
            raise RetryableError(
                f"Vision API failed after {max_retries} retries: {last_error}"
            ) from last_error

        content = response.choices[0].message.content or ""
        if not content.strip():
            raise EmptyAnalysisError("No analysis received", model=self.model)
        return content

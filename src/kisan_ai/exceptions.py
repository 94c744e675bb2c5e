"""Exception hierarchy for kisan-ai.

The interpretation pipeline itself never raises; these errors belong to the
collaborators around it (image intake, the vision provider, the API).
"""


class KisanError(Exception):
    """Base exception for all kisan-ai errors."""


class ImageInputError(KisanError):
    """Raised when a submitted file is not a usable image."""


class VisionClientError(KisanError):
    """Raised when the vision provider call fails."""


class RetryableError(VisionClientError):
    """Rate limits, timeouts, 5xx — should be retried."""


class NonRetryableError(VisionClientError):
    """Auth errors, bad requests, 4xx (non-429) — fail immediately."""


class EmptyAnalysisError(VisionClientError):
    """The provider answered but returned no analysis text."""

    def __init__(self, message: str, model: str = "") -> None:
        super().__init__(message)
        self.model = model

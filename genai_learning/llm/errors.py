from __future__ import annotations

from typing import Optional

from google.genai import errors as genai_errors


class ProviderError(Exception):
    """Base exception for generative-model provider failures"""

    user_message = "Sorry, I encountered an error while processing your request."

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderConfigurationError(ProviderError):
    """Raised when the provider credential is missing or rejected"""

    user_message = "API configuration error. Please check the server configuration."


class QuotaExceededError(ProviderError):
    """Raised when the provider refuses the call for quota reasons"""

    user_message = "API quota exceeded. Please try again later."


class ContentFilteredError(ProviderError):
    """Raised when the provider's safety filter blocks the prompt or answer"""

    user_message = "Content filtered for safety. Please rephrase your question."


_STATUS_CODES = {
    401: ProviderConfigurationError,
    403: ProviderConfigurationError,
    429: QuotaExceededError,
}

_STATUS_NAMES = {
    "UNAUTHENTICATED": ProviderConfigurationError,
    "PERMISSION_DENIED": ProviderConfigurationError,
    "RESOURCE_EXHAUSTED": QuotaExceededError,
}

# Checked in order, first match wins
_MESSAGE_MARKERS = (
    ("API key", ProviderConfigurationError),
    ("quota", QuotaExceededError),
    ("safety", ContentFilteredError),
)


def classify_provider_error(exc: BaseException) -> ProviderError:
    """
    Map an arbitrary provider failure onto the ProviderError hierarchy.

    Structured API error codes are preferred; the message text is only
    inspected when the code is missing or not one we recognise.
    """
    if isinstance(exc, ProviderError):
        return exc

    message = str(exc)
    status_code = None

    if isinstance(exc, genai_errors.APIError):
        status_code = exc.code
        message = exc.message or message
        error_cls = _STATUS_CODES.get(exc.code) or _STATUS_NAMES.get(exc.status or "")
        if error_cls is not None:
            return error_cls(message, status_code=status_code)

    for marker, error_cls in _MESSAGE_MARKERS:
        if marker in message:
            return error_cls(message, status_code=status_code)

    return ProviderError(message, status_code=status_code)

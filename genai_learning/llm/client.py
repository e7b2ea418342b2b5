from __future__ import annotations

import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from genai_learning.core.constants import AppSettings
from genai_learning.llm.errors import (
    ContentFilteredError,
    ProviderConfigurationError,
    ProviderError,
    classify_provider_error,
)

logger = logging.getLogger(__name__)

# Finish reasons that mean the provider withheld the answer
_BLOCKED_FINISH_REASONS = frozenset({
    types.FinishReason.SAFETY,
    types.FinishReason.PROHIBITED_CONTENT,
    types.FinishReason.BLOCKLIST,
    types.FinishReason.SPII,
})


class GeminiClient:
    """
    Thin async wrapper around the Gemini generate-content call.

    Features:
    - One SDK client built at construction and reused for every call
    - No retries, no caching, no streaming: one prompt in, one text out
    - Every SDK failure re-raised as a classified ProviderError
    - Safety blocks surfaced as ContentFilteredError
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = AppSettings.GEMINI_MODEL.value,
    ):
        self.model = model
        self._client: genai.Client | None = None

        if api_key:
            self._client = genai.Client(api_key=api_key)
        else:
            logger.warning("GEMINI_API_KEY is not set; model calls will fail")

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def generate(self, prompt: str) -> str:
        """
        Send a single prompt and wait for the complete response text

        Raises:
            ProviderConfigurationError: When no API key is configured
            ContentFilteredError: When the provider blocks the content
            ProviderError: On any other provider failure
        """
        if self._client is None:
            raise ProviderConfigurationError("API key not configured")

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            raise classify_provider_error(e) from e

        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        feedback = getattr(response, "prompt_feedback", None)
        if feedback is not None and getattr(feedback, "block_reason", None):
            raise ContentFilteredError(
                f"Prompt blocked by safety filter: {feedback.block_reason}")

        for candidate in getattr(response, "candidates", None) or []:
            if getattr(candidate, "finish_reason", None) in _BLOCKED_FINISH_REASONS:
                raise ContentFilteredError(
                    "Response blocked by safety filter")

        text = response.text
        if not text:
            raise ProviderError("Empty response from provider")
        return text

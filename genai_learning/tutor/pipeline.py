from typing import Optional

from langchain_core.prompts import PromptTemplate

import genai_learning.core.prompts as prompts
from genai_learning.llm.client import GeminiClient
from genai_learning.llm.errors import ProviderError
from genai_learning.tutor.formatter import format_educational_response
import logging

# Module-level logger for observability
logger = logging.getLogger(__name__)

_CHAT_TEMPLATE = PromptTemplate.from_template(prompts.CHAT_PROMPT).partial(
    system_prompt=prompts.SYSTEM_PROMPT
)


class QuestionValidationError(ValueError):
    """Raised when the caller sends no usable question"""
    pass


def validate_question(question: Optional[str]) -> str:
    if question is None or not question.strip():
        raise QuestionValidationError("Question is required")
    return question.strip()


def compose_prompt(question: str) -> str:
    return _CHAT_TEMPLATE.format(question=question)


class TutorPipeline:
    """Validate, prompt, generate, format.

    Holds a reference to the shared model client and nothing else, so an
    instance can be built per request.
    """

    def __init__(self, model_client: GeminiClient):
        self.model_client = model_client

    async def answer(self, question: Optional[str]) -> str:
        """Runs the chat pipeline and returns display-ready markup.

        Raises QuestionValidationError before any provider call when the
        question is blank.
        """
        cleaned = validate_question(question)
        prompt = compose_prompt(cleaned)

        logger.info("Sending question to model (%d chars)", len(cleaned))
        try:
            raw_answer = await self.model_client.generate(prompt)
        except ProviderError as e:
            logger.error("Error with Gemini API: %s", e)
            raise

        return format_educational_response(raw_answer)

    async def diagnose(self) -> str:
        """Sends the fixed diagnostic prompt and returns the raw text."""
        try:
            return await self.model_client.generate(prompts.DIAGNOSTIC_PROMPT)
        except ProviderError as e:
            logger.error("Gemini connectivity check failed: %s", e)
            raise

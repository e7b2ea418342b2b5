from fastapi import Depends, Request

from genai_learning.core.config import Settings
from genai_learning.llm.client import GeminiClient
from genai_learning.tutor.pipeline import TutorPipeline


def build_model_client(settings: Settings) -> GeminiClient:
    return GeminiClient(**settings.gemini_config)


def get_model_client(request: Request) -> GeminiClient:
    """Shared client created once in the application lifespan"""
    return request.app.state.model_client


def get_pipeline(
    model_client: GeminiClient = Depends(get_model_client),
) -> TutorPipeline:
    return TutorPipeline(model_client=model_client)

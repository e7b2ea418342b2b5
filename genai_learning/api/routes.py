from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Annotated

from .schemas import ChatRequest, ChatResponse, DiagnosticResponse
from .dependencies import get_pipeline
from genai_learning.core.constants import Messages
from genai_learning.llm.errors import ProviderError
from genai_learning.tutor.pipeline import TutorPipeline


router = APIRouter(tags=["GenAI Learning"])

SAMPLE_RESPONSE_LENGTH = 100


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ChatResponse, "description": "Missing or blank question"},
        500: {"model": ChatResponse, "description": "Model provider failure"},
    },
)
async def chat(
    request: ChatRequest,
    pipeline: Annotated[TutorPipeline, Depends(get_pipeline)],
):
    """
    Wrap the question in the tutor prompt, ask the model, and return
    formatted markup.
    """
    try:
        answer = await pipeline.answer(request.question)
    except ProviderError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ChatResponse(error=exc.user_message).model_dump(),
        )

    return ChatResponse(answer=answer, success=True)


@router.get(
    "/test-ai",
    response_model=DiagnosticResponse,
    response_model_exclude_none=True,
    responses={500: {"model": DiagnosticResponse}},
)
async def check_ai(
    pipeline: Annotated[TutorPipeline, Depends(get_pipeline)],
):
    try:
        text = await pipeline.diagnose()
    except ProviderError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=DiagnosticResponse(
                success=False,
                message=Messages.AI_CONNECTION_FAILED,
                error=str(exc),
            ).model_dump(exclude_none=True),
        )

    return DiagnosticResponse(
        success=True,
        message=Messages.AI_CONNECTION_OK,
        sample_response=text[:SAMPLE_RESPONSE_LENGTH] + "...",
    )

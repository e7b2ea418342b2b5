from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from genai_learning.api.dependencies import build_model_client
from genai_learning.api.routes import router
from genai_learning.api.schemas import ChatResponse, HealthResponse
from genai_learning.core.config import get_settings
from genai_learning.core.constants import Messages
from genai_learning.tutor.pipeline import QuestionValidationError

import logging

settings = get_settings()

# Basic console logging configuration
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = get_settings()
    app.state.model_client = build_model_client(settings)

    base_url = f"http://localhost:{settings.PORT}"
    logger.info(
        "Starting | env=%s | model=%s | api_key=%s",
        settings.ENVIRONMENT,
        settings.GEMINI_MODEL.value,
        "set" if app.state.model_client.is_configured else "missing",
    )
    logger.info("Health check: %s/health", base_url)
    logger.info("Test AI: %s/test-ai", base_url)
    logger.info("Chat endpoint: %s/chat", base_url)

    try:
        yield
    finally:
        logger.info("Shutting down")


app = FastAPI(
    title="GenAI Learning Backend",
    description="AI tutor relay in front of Gemini",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


def error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ChatResponse(error=message).model_dump(),
    )


@app.exception_handler(QuestionValidationError)
async def question_validation_handler(request: Request, exc: QuestionValidationError):
    return error_envelope(status.HTTP_400_BAD_REQUEST, Messages.QUESTION_REQUIRED)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s",
                request.url.path, exc.errors())
    return error_envelope(status.HTTP_400_BAD_REQUEST, Messages.QUESTION_REQUIRED)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path or wrong method on a known path
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_envelope(status.HTTP_404_NOT_FOUND, Messages.ENDPOINT_NOT_FOUND)
    return error_envelope(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, Messages.UNHANDLED)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return HealthResponse(
        message=Messages.HEALTHY,
        timestamp=timestamp.replace("+00:00", "Z"),
    )


def run() -> None:
    import uvicorn

    uvicorn.run(
        "genai_learning.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()

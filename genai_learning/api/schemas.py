from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    question: str | None = Field(None, description="User question or topic")


class ChatResponse(BaseModel):
    answer: str | None = None
    error: str | None = None
    success: bool = False


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str
    timestamp: str


class DiagnosticResponse(BaseModel):
    success: bool
    message: str
    sample_response: str | None = None
    error: str | None = None

from enum import Enum


class GeminiModels(Enum):
    """Supported Gemini model identifiers"""

    GEMINI_15_FLASH = "gemini-1.5-flash"
    GEMINI_15_PRO = "gemini-1.5-pro"
    GEMINI_20_FLASH = "gemini-2.0-flash"
    GEMINI_25_FLASH = "gemini-2.5-flash"


class AppSettings:
    """Central place for all application-level configuration"""

    GEMINI_MODEL: GeminiModels = GeminiModels.GEMINI_15_FLASH
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    CORS_ORIGINS = ["*"]
    LOG_LEVEL = "INFO"


class Messages:
    """User-facing strings returned in response envelopes"""

    QUESTION_REQUIRED = "Question is required"
    ENDPOINT_NOT_FOUND = "Endpoint not found"
    UNHANDLED = "Something went wrong!"
    HEALTHY = "GenAI Learning Backend is running"
    AI_CONNECTION_OK = "Gemini API connection successful"
    AI_CONNECTION_FAILED = "Gemini API connection failed"

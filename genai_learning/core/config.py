from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, GeminiModels


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: GeminiModels = AppSettings.GEMINI_MODEL
    HOST: str = AppSettings.HOST
    PORT: int = AppSettings.PORT
    ENVIRONMENT: str = AppSettings.ENVIRONMENT
    CORS_ORIGINS: List[str] = AppSettings.CORS_ORIGINS
    LOG_LEVEL: str = AppSettings.LOG_LEVEL

    @property
    def gemini_config(self) -> dict:
        return {
            "api_key": self.GEMINI_API_KEY,
            "model": self.GEMINI_MODEL.value,
        }

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    return Settings()

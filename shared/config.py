"""
Configuration module - Central access point for environment variables.

CRITICAL: Access ALL environment variables through this module.
NEVER use os.getenv() directly in application code.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Groq (OpenAI-compatible chat completions)
    GROQ_API_KEY: str = Field(
        default="",
        description="Groq API key. Empty disables the model and serves templated replies"
    )
    LLM_MODEL: str = Field(
        default="llama-3.1-8b-instant",
        description="Chat model used for planning, small talk and step phrasing"
    )
    GROQ_BASE_URL: str = Field(
        default="https://api.groq.com/openai/v1",
        description="OpenAI-compatible base URL for Groq"
    )
    LLM_TIMEOUT_SECONDS: float = Field(
        default=15.0,
        description="Per-call timeout for the chat completion request"
    )

    # Sampling per conversation mode
    PLANNER_TEMPERATURE: float = Field(default=0.1)
    SMALL_TALK_TEMPERATURE: float = Field(default=0.7)
    PHRASING_TEMPERATURE: float = Field(default=0.2)
    PHRASING_MAX_TOKENS: int = Field(default=160)

    MAX_BODY_BYTES: int = Field(
        default=1_048_576,
        description="Requests to /chat with a larger JSON body are rejected with 413"
    )
    MAX_TEXT_LENGTH: int = Field(
        default=2000,
        description="Incoming text is truncated to this many characters before planning"
    )

    # HTTP server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated allowed origins ('*' allows any origin)"
    )

    # Application Settings
    LOG_LEVEL: str = Field(default="INFO")
    SALON_NAME: str = Field(
        default="VIP Stylist / Alex Barbershop",
        description="Business name used in prompts"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()

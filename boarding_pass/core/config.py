from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BPX_")

    APP_NAME: str = Field(default="boarding-pass-idp")
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)

    # OCR collaborator
    OCR_BASE_URL: str | None = Field(default=None)
    OCR_TIMEOUT_SECONDS: int = Field(default=30)
    OCR_VERIFY_SSL: bool = Field(default=True)

    # Generative model collaborator (OpenAI-compatible chat completions)
    LLM_BASE_URL: str | None = Field(default=None)
    LLM_API_KEY: str | None = Field(default=None)
    LLM_MODEL: str = Field(default="gpt-4o")
    LLM_TEMPERATURE: float = Field(default=0.1)
    LLM_MAX_TOKENS: int = Field(default=800)
    LLM_TIMEOUT_SECONDS: int = Field(default=60)
    LLM_VERIFY_SSL: bool = Field(default=True)

    # Airline reference lookup; static mapping is used when the API is not configured
    AIRLINE_API_URL: str | None = Field(default=None)
    AIRLINE_API_KEY: str | None = Field(default=None)
    AIRLINE_TIMEOUT_SECONDS: int = Field(default=10)

    # Pipeline behaviour
    STAGE_TIMEOUT_SECONDS: float | None = Field(default=None)
    WAIT_IF_BUSY: bool = Field(default=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]

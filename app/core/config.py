"""
Application configuration from environment variables.
Privacy-safe: no user data in defaults or logs.
"""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from app.core.limits import MAX_EXTRACTED_JSON_CHARS, RESPONSE_CHAR_LIMIT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    service_name: str = Field(
        default="wedding-extraction-service",
        description="Service name reported by health endpoints"
    )
    service_env: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        description="Service environment"
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # Extraction limits
    max_extracted_json_chars: int = Field(
        default=MAX_EXTRACTED_JSON_CHARS,
        ge=256,
        le=200000,
        description=(
            "Maximum length of the extracted JSON payload. "
            "Longer payloads are rejected before parsing."
        )
    )
    response_char_limit: int = Field(
        default=RESPONSE_CHAR_LIMIT,
        ge=100,
        le=200000,
        description="Maximum length of the conversational reply before truncation"
    )

    # Response shaping
    include_parse_error_detail: bool = Field(
        default=False,
        validate_default=True,
        description=(
            "Include the JSON decoder message in API responses. "
            "Always included when SERVICE_ENV=dev."
        )
    )

    @field_validator("include_parse_error_detail", mode="after")
    @classmethod
    def force_detail_in_dev(cls, v: bool, info) -> bool:
        """Parse error details are always exposed in dev."""
        if info.data.get("service_env", "dev") == "dev":
            return True
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

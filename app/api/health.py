"""
Health check endpoints.
Privacy-safe: no user data in responses.
"""
from typing import Annotated

from pydantic import BaseModel, Field

from fastapi import APIRouter, Depends, status

from app.core.config import Settings, get_settings

SERVICE_VERSION = "0.1.0"

router = APIRouter(tags=["health"])


# === Response Models ===

class HealthResponse(BaseModel):
    """Basic health check response."""
    ok: bool


class DetailedHealthResponse(BaseModel):
    """Detailed health response for /v1/health."""
    ok: bool
    service: str
    version: str
    environment: str
    max_extracted_json_chars: int = Field(alias="maxExtractedJsonChars")

    class Config:
        populate_by_name = True


# === Endpoints ===

@router.get(
    "/healthz",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Returns 200 if the service is alive"
)
async def health_check() -> HealthResponse:
    """
    Liveness probe.
    The service has no backends, so alive means ready.
    """
    return HealthResponse(ok=True)


@router.get(
    "/v1/health",
    response_model=DetailedHealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Detailed health check",
    description="Returns service info and the active extraction size limit"
)
async def detailed_health_check(
    settings: Annotated[Settings, Depends(get_settings)]
) -> DetailedHealthResponse:
    """
    Detailed health check with service info.
    Upstream callers read maxExtractedJsonChars to skip oversized payloads.
    """
    return DetailedHealthResponse(
        ok=True,
        service=settings.service_name,
        version=SERVICE_VERSION,
        environment=settings.service_env,
        max_extracted_json_chars=settings.max_extracted_json_chars
    )

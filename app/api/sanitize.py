"""
Sanitization API endpoints.
Privacy-safe: no logging of request bodies, results or warnings.
"""
import time
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Header, status

from app.core.config import Settings, get_settings
from app.core.logging import get_safe_logger
from app.schemas.request import ModelReplyRequest, SanitizeRequest
from app.schemas.response import (
    ErrorResponse,
    ModelReplyData,
    ModelReplyResponse,
    ResponseMetadata,
    SanitizeResponse,
)
from app.schemas.wedding import SanitizationResult
from app.services.model_reply import compose_reply_with_notes, process_model_reply
from app.services.sanitizers import sanitize_extracted_payload

router = APIRouter(prefix="/v1", tags=["sanitize"])
logger = get_safe_logger(__name__)

# Replaces decoder messages outside dev; they can echo payload fragments
GENERIC_PARSE_ERROR = "PARSE_ERROR"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}


def get_request_id(
    x_request_id: Annotated[str | None, Header(alias="X-Request-ID")] = None
) -> str:
    """
    Get or generate request ID from header.
    """
    if x_request_id and len(x_request_id) <= 100:
        return x_request_id
    return str(uuid.uuid4())


def _redact_parse_error(result: SanitizationResult, settings: Settings) -> SanitizationResult:
    if result.parse_error and not settings.include_parse_error_detail:
        return result.model_copy(update={"parse_error": GENERIC_PARSE_ERROR})
    return result


@router.post(
    "/sanitize",
    response_model=SanitizeResponse,
    status_code=status.HTTP_200_OK,
    summary="Sanitize extracted wedding data",
    description=(
        "Validates, canonicalizes and deduplicates the JSON block extracted "
        "from a model reply. Bad data never fails the request; it is "
        "reported in data.warnings."
    ),
    responses=_ERROR_RESPONSES,
)
async def sanitize(
    body: SanitizeRequest,
    request_id: Annotated[str, Depends(get_request_id)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SanitizeResponse:
    """Run the sanitization pipeline over one payload."""
    start = time.perf_counter()

    result = sanitize_extracted_payload(body.payload, max_chars=settings.max_extracted_json_chars)
    result = _redact_parse_error(result, settings)

    latency_ms = int((time.perf_counter() - start) * 1000)
    logger.info(
        "Payload sanitized",
        request_id=request_id,
        latency_ms=latency_ms,
        status="parse_error" if result.parse_error else "ok",
        warning_count=len(result.warnings)
    )

    return SanitizeResponse(
        data=result,
        metadata=ResponseMetadata(
            requestId=request_id,
            latencyMs=latency_ms,
            warningCount=len(result.warnings)
        )
    )


@router.post(
    "/model-reply",
    response_model=ModelReplyResponse,
    status_code=status.HTTP_200_OK,
    summary="Process a complete model reply",
    description=(
        "Splits a reply into its <response> and <extracted_data> blocks, "
        "sanitizes the data and appends clarification notes to the message."
    ),
    responses=_ERROR_RESPONSES,
)
async def model_reply(
    body: ModelReplyRequest,
    request_id: Annotated[str, Depends(get_request_id)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ModelReplyResponse:
    """Split, sanitize and compose one model reply."""
    start = time.perf_counter()

    processed = process_model_reply(
        body.reply,
        max_extracted_chars=settings.max_extracted_json_chars,
        response_char_limit=settings.response_char_limit
    )
    result = _redact_parse_error(processed.result, settings)

    latency_ms = int((time.perf_counter() - start) * 1000)
    logger.info(
        "Model reply processed",
        request_id=request_id,
        latency_ms=latency_ms,
        status="parse_error" if result.parse_error else "ok",
        warning_count=len(processed.notes)
    )

    return ModelReplyResponse(
        data=ModelReplyData(
            message=compose_reply_with_notes(processed.message, processed.notes),
            notes=processed.notes,
            result=result
        ),
        metadata=ResponseMetadata(
            requestId=request_id,
            latencyMs=latency_ms,
            warningCount=len(processed.notes)
        )
    )

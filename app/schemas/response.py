"""
Response schemas for the sanitizer API.
Privacy note: data payloads contain end-user details - NEVER log.
"""
from typing import List, Literal

from pydantic import BaseModel, Field

from app.schemas.wedding import SanitizationResult


class ResponseMetadata(BaseModel):
    """Metadata included in all responses."""
    request_id: str = Field(..., alias="requestId", description="Request ID for tracing")
    latency_ms: int = Field(default=0, alias="latencyMs", description="Processing time in ms")
    warning_count: int = Field(default=0, alias="warningCount", description="Number of warnings")

    class Config:
        populate_by_name = True


class ErrorDetail(BaseModel):
    """Error details for failed requests."""
    code: Literal[
        "BAD_REQUEST",
        "NOT_FOUND",
        "METHOD_NOT_ALLOWED",
        "INTERNAL_ERROR",
    ] = Field(
        ...,
        description="Error code"
    )
    message: str = Field(..., description="Human-readable error message")
    retryable: bool = Field(default=False, description="Whether the request can be retried")


class SanitizeResponse(BaseModel):
    """Successful sanitization response."""
    success: Literal[True] = True
    data: SanitizationResult = Field(..., description="Sanitized records and warnings")
    metadata: ResponseMetadata = Field(..., description="Response metadata")

    class Config:
        populate_by_name = True


class ModelReplyData(BaseModel):
    """A processed model reply."""
    message: str = Field(..., description="Reply text with clarification notes appended")
    notes: List[str] = Field(default_factory=list, description="Notes shown to the couple")
    result: SanitizationResult = Field(..., description="Sanitized extracted data")


class ModelReplyResponse(BaseModel):
    """Successful model reply processing response."""
    success: Literal[True] = True
    data: ModelReplyData
    metadata: ResponseMetadata

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error response."""
    success: Literal[False] = False
    error: ErrorDetail = Field(..., description="Error details")
    metadata: ResponseMetadata = Field(..., description="Response metadata")

    class Config:
        populate_by_name = True

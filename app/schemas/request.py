"""
Request schemas with strict Pydantic validation.
Privacy note: bodies carry end-user wedding details - NEVER log instances.
"""
from typing import Optional

from pydantic import BaseModel, Field

# Upper bound on request bodies; the sanitizer applies its own, smaller cap
MAX_REQUEST_TEXT_CHARS = 200000


class SanitizeRequest(BaseModel):
    """Raw text extracted from the <extracted_data> block of a model reply."""

    payload: Optional[str] = Field(
        default=None,
        max_length=MAX_REQUEST_TEXT_CHARS,
        description="JSON text to sanitize (may be malformed)"
    )


class ModelReplyRequest(BaseModel):
    """A complete model reply with <response> and <extracted_data> blocks."""

    reply: str = Field(
        ...,
        max_length=MAX_REQUEST_TEXT_CHARS,
        description="Raw model reply text"
    )

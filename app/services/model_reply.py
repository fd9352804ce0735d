"""
Splitting and post-processing of the assistant's raw reply.

The reply model is prompted to answer in two tagged blocks:

    <response>text shown to the couple</response>
    <extracted_data>{"wedding_info": {...}, "vendors": [...], ...}</extracted_data>

This module pulls both blocks out, runs the extracted block through the
sanitizer, and composes the final message with clarification notes.
"""
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from app.core.limits import MAX_EXTRACTED_JSON_CHARS, RESPONSE_CHAR_LIMIT
from app.core.logging import get_safe_logger
from app.schemas.wedding import SanitizationResult
from app.services.sanitizers import sanitize_extracted_payload

logger = get_safe_logger(__name__)

_RESPONSE_BLOCK_REGEX = re.compile(r"<response>(.*?)</response>", re.DOTALL)
_EXTRACTED_BLOCK_REGEX = re.compile(r"<extracted_data>(.*?)</extracted_data>", re.DOTALL)

TRUNCATION_NOTE = "I shortened my reply slightly to keep things running smoothly."
NOTES_HEADER = "ℹ️ I reviewed the details before saving. A few items need clarification:"


@dataclass(frozen=True)
class ModelReply:
    """The two blocks of a model reply."""
    message: str
    extracted_text: Optional[str] = None
    notes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProcessedReply:
    """A split reply with its sanitized payload."""
    message: str
    result: SanitizationResult
    notes: List[str] = field(default_factory=list)


def split_model_reply(
    full_text: str,
    response_char_limit: int = RESPONSE_CHAR_LIMIT
) -> ModelReply:
    """
    Split a raw reply into the user-facing message and the extracted block.

    Without a <response> block the whole reply is the message. Messages
    over the limit are cut and a note is recorded.
    """
    text = full_text or ""

    response_match = _RESPONSE_BLOCK_REGEX.search(text)
    message = response_match.group(1).strip() if response_match else text

    extracted_match = _EXTRACTED_BLOCK_REGEX.search(text)
    extracted_text = extracted_match.group(1) if extracted_match else None

    notes: List[str] = []
    if len(message) > response_char_limit:
        message = f"{message[:response_char_limit]}…"
        notes.append(TRUNCATION_NOTE)

    return ModelReply(message=message, extracted_text=extracted_text, notes=notes)


def process_model_reply(
    full_text: str,
    max_extracted_chars: int = MAX_EXTRACTED_JSON_CHARS,
    response_char_limit: int = RESPONSE_CHAR_LIMIT
) -> ProcessedReply:
    """
    Split a reply and sanitize its extracted block.

    A reply without an <extracted_data> block yields an empty result.
    Notes are the sanitizer warnings followed by envelope notes.
    """
    reply = split_model_reply(full_text, response_char_limit=response_char_limit)

    if reply.extracted_text is None:
        result = SanitizationResult()
    else:
        result = sanitize_extracted_payload(reply.extracted_text, max_chars=max_extracted_chars)
        if result.parse_error:
            logger.error("Failed to parse extracted data", error_code="PARSE_ERROR")

    return ProcessedReply(
        message=reply.message,
        result=result,
        notes=[*result.warnings, *reply.notes]
    )


def compose_reply_with_notes(message: str, notes: Iterable[str]) -> str:
    """
    Append clarification notes to the message as a bulleted list.

    Repeated notes are shown once, in first-seen order.
    """
    unique_notes = list(dict.fromkeys(notes))
    if not unique_notes:
        return message

    bullets = "\n".join(f"• {note}" for note in unique_notes)
    return f"{message}\n\n{NOTES_HEADER}\n{bullets}"

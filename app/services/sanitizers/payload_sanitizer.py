"""
Top-level sanitizer for the JSON block extracted from a model reply.

Pipeline:
1. Missing, non-text or blank input -> empty result, no warnings
2. Input longer than the size cap -> empty result + one warning, never parsed
3. JSON parse; failure or a non-object document -> empty result,
   parse_error set, one warning
4. Each section sanitized independently; warnings concatenated in the
   order wedding_info, vendors, budget_items, tasks

The function is pure and never raises. Every drop or adjustment is
reported as a warning string meant to be shown to the couple.

Privacy: only sizes and counts are logged, never payload content.
"""
import json
from typing import Any, Optional

from app.core.limits import MAX_EXTRACTED_JSON_CHARS
from app.core.logging import get_safe_logger
from app.schemas.wedding import SanitizationResult
from app.services.sanitizers.budget_sanitizer import sanitize_budget_items
from app.services.sanitizers.profile_sanitizer import sanitize_wedding_info
from app.services.sanitizers.task_sanitizer import sanitize_tasks
from app.services.sanitizers.vendor_sanitizer import sanitize_vendors

logger = get_safe_logger(__name__)

SIZE_LIMIT_WARNING = (
    "I received a very large set of details, so I skipped saving them to keep things stable."
)
PARSE_ERROR_WARNING = (
    "I could not read the structured details this time, so I did not save any changes. "
    "Could you share them again?"
)


def _parse_document(text: str) -> tuple[Optional[dict], Optional[str]]:
    """Parse text as a JSON object. Returns (document, error_description)."""
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; deep nesting raises RecursionError
        return None, f"{type(e).__name__}: {e}"

    if not isinstance(document, dict):
        return None, f"Expected a JSON object, got {type(document).__name__}"

    return document, None


def sanitize_extracted_payload(
    raw_text: Any,
    max_chars: int = MAX_EXTRACTED_JSON_CHARS
) -> SanitizationResult:
    """
    Convert an untrusted extracted-data payload into validated records.

    Args:
        raw_text: Text between the extraction tags of a model reply
        max_chars: Size cap, checked on the trimmed text before parsing

    Returns:
        A fresh SanitizationResult
    """
    if not isinstance(raw_text, str):
        return SanitizationResult()

    trimmed = raw_text.strip()
    if not trimmed:
        return SanitizationResult()

    if len(trimmed) > max_chars:
        logger.warning(
            "Extracted payload over size limit, skipped",
            payload_chars=len(trimmed),
            max_chars=max_chars
        )
        return SanitizationResult(warnings=(SIZE_LIMIT_WARNING,))

    document, parse_error = _parse_document(trimmed)
    if document is None:
        logger.warning(
            "Extracted payload could not be parsed",
            error_code="PARSE_ERROR",
            payload_chars=len(trimmed)
        )
        return SanitizationResult(
            warnings=(PARSE_ERROR_WARNING,),
            parse_error=parse_error
        )

    wedding_info = sanitize_wedding_info(document.get("wedding_info"))
    vendors = sanitize_vendors(document.get("vendors"))
    budget_items = sanitize_budget_items(document.get("budget_items"))
    tasks = sanitize_tasks(document.get("tasks"))

    warnings = (
        *wedding_info.warnings,
        *vendors.warnings,
        *budget_items.warnings,
        *tasks.warnings,
    )

    logger.debug(
        "Extracted payload sanitized",
        payload_chars=len(trimmed),
        profile_field_count=len(wedding_info.sanitized),
        vendor_count=len(vendors.sanitized),
        budget_item_count=len(budget_items.sanitized),
        task_count=len(tasks.sanitized),
        warning_count=len(warnings)
    )

    return SanitizationResult(
        wedding_info=wedding_info.sanitized,
        vendors=tuple(vendors.sanitized),
        budget_items=tuple(budget_items.sanitized),
        tasks=tuple(tasks.sanitized),
        warnings=warnings
    )

"""
Sanitizers for model-extracted wedding planning data.
"""
from app.services.sanitizers.payload_sanitizer import (
    MAX_EXTRACTED_JSON_CHARS,
    PARSE_ERROR_WARNING,
    SIZE_LIMIT_WARNING,
    sanitize_extracted_payload,
)
from app.services.sanitizers.task_sanitizer import task_key
from app.services.sanitizers.vendor_sanitizer import vendor_key

__all__ = [
    "MAX_EXTRACTED_JSON_CHARS",
    "PARSE_ERROR_WARNING",
    "SIZE_LIMIT_WARNING",
    "sanitize_extracted_payload",
    "task_key",
    "vendor_key",
]

"""
Shared result shape for the per-section sanitizers.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

T = TypeVar("T")

# Raw values are echoed back to the user inside warnings; keep them short
MAX_RAW_VALUE_CHARS = 80


@dataclass(frozen=True)
class SectionResult(Generic[T]):
    """Sanitized output of one payload section plus the warnings it produced."""
    sanitized: T
    warnings: List[str] = field(default_factory=list)


def format_raw_value(value: Any) -> str:
    """Render an untrusted raw value for a warning message."""
    if isinstance(value, str):
        text = value
    else:
        try:
            text = json.dumps(value, default=str)
        except (TypeError, ValueError):
            text = repr(value)

    if len(text) > MAX_RAW_VALUE_CHARS:
        text = text[:MAX_RAW_VALUE_CHARS - 1] + "…"
    return text

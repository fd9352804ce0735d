"""
Sanitizer for the wedding profile section (`wedding_info`).

Only recognized keys survive. Each value is validated on its own; a key
whose value fails validation is left out and explained in a warning.
Absent, null and blank values are skipped without a warning.
"""
from typing import Any, Callable, Dict, Optional, Tuple

from app.schemas.wedding import ProfileValue
from app.services.sanitizers.normalizers import (
    is_blank,
    normalize_currency,
    normalize_date,
    normalize_integer,
    normalize_time_of_day,
    to_trimmed_string,
)
from app.services.sanitizers.section_result import SectionResult, format_raw_value


# key -> (normalizer, reason template used in the rejection warning)
_FieldRule = Tuple[Callable[[Any], Optional[ProfileValue]], str]

_TEXT_RULE: _FieldRule = (to_trimmed_string, 'expected non-empty text, received "{raw}"')
_MONEY_RULE: _FieldRule = (normalize_currency, 'expected positive currency, received "{raw}"')

PROFILE_FIELD_RULES: Dict[str, _FieldRule] = {
    "wedding_date": (normalize_date, 'expected YYYY-MM-DD, received "{raw}"'),
    "wedding_time": (normalize_time_of_day, 'unrecognized time "{raw}"'),
    "expected_guest_count": (normalize_integer, 'expected whole number, received "{raw}"'),
    "total_budget": _MONEY_RULE,
    "venue_cost": _MONEY_RULE,
    "partner1_name": _TEXT_RULE,
    "partner2_name": _TEXT_RULE,
    "ceremony_location": _TEXT_RULE,
    "reception_location": _TEXT_RULE,
    "venue_name": _TEXT_RULE,
    "color_scheme_primary": _TEXT_RULE,
    "color_scheme_secondary": _TEXT_RULE,
    "wedding_style": _TEXT_RULE,
    "wedding_name": _TEXT_RULE,
}

PROFILE_FIELDS = frozenset(PROFILE_FIELD_RULES)


def sanitize_wedding_info(wedding_info: Any) -> SectionResult[Dict[str, ProfileValue]]:
    """
    Build a sparse profile update from the raw `wedding_info` object.

    Walks the input's own keys, so unknown keys are dropped silently.

    Args:
        wedding_info: Raw parsed value (anything; non-objects yield nothing)

    Returns:
        SectionResult with a dict containing only validated, recognized keys
    """
    if not isinstance(wedding_info, dict):
        return SectionResult(sanitized={})

    sanitized: Dict[str, ProfileValue] = {}
    warnings = []

    for key, value in wedding_info.items():
        rule = PROFILE_FIELD_RULES.get(key)
        if rule is None or is_blank(value):
            continue

        normalizer, reason = rule
        normalized = normalizer(value)
        if normalized is None:
            reason_text = reason.format(raw=format_raw_value(value))
            warnings.append(f"Ignored {key}: {reason_text}.")
            continue

        sanitized[key] = normalized

    return SectionResult(sanitized=sanitized, warnings=warnings)

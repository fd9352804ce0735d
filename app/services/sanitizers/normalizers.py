"""
Primitive field normalizers for model-extracted wedding data.

Every function takes one untrusted value and returns either a validated
value or None. None always means "rejected or absent"; callers decide
whether that deserves a warning. Nothing in here raises.
"""
import math
import re
from datetime import date
from typing import Any, Optional


_DATE_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_REGEX = re.compile(r"^\+?[0-9()\[\]\s-]{7,}$")

# Currency keeps the decimal point and sign so negatives can be rejected
_CURRENCY_STRIP_REGEX = re.compile(r"[^0-9.\-]")
_INTEGER_STRIP_REGEX = re.compile(r"[^0-9]")
_LEADING_FLOAT_REGEX = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

TRUTHY_TOKENS = frozenset({"true", "yes", "y", "paid", "completed"})
FALSY_TOKENS = frozenset({"false", "no", "n", "unpaid", "not paid"})

# Time-of-day patterns, tried in this order
_TIME_DIRECT_REGEX = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")
_TIME_AMPM_REGEX = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(am|pm)")
_TIME_EMBEDDED_24H_REGEX = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)\b")
_TIME_BARE_HOUR_REGEX = re.compile(r"\b(1[0-2]|[1-9])\b")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a quantity here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fits_float(value: int) -> bool:
    # JSON integers are unbounded; amounts past float range are treated as infinite
    try:
        float(value)
    except OverflowError:
        return False
    return True


def _round_half_up(value: float) -> int:
    """Round a finite float, halves up."""
    return int(math.floor(value + 0.5))


def _parse_leading_float(text: str) -> Optional[float]:
    """Parse the longest numeric prefix, like a lenient float parser would."""
    match = _LEADING_FLOAT_REGEX.match(text)
    if not match:
        return None
    return float(match.group(0))


def to_trimmed_string(value: Any) -> Optional[str]:
    """Return the stripped string, or None for non-strings and blanks."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def normalize_token(value: Any) -> Optional[str]:
    """Lowercase and strip a vocabulary token. Non-strings and blanks give None."""
    trimmed = to_trimmed_string(value)
    return trimmed.lower() if trimmed else None


def normalize_date(value: Any) -> Optional[str]:
    """
    Validate a calendar date in strict YYYY-MM-DD form.

    Impossible dates (2025-02-30, 2025-13-01) are rejected.

    Returns:
        The zero-padded date string or None.
    """
    trimmed = to_trimmed_string(value)
    if not trimmed or not _DATE_REGEX.match(trimmed):
        return None

    year, month, day = (int(part) for part in trimmed.split("-"))
    try:
        parsed = date(year, month, day)
    except ValueError:
        return None

    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


def normalize_currency(value: Any) -> Optional[int]:
    """
    Convert a money amount to a non-negative whole number.

    Numbers are rounded (halves up). Strings lose every character except
    digits, '.' and '-' before parsing, so "$25,000" becomes 25000 and
    "-5" is rejected.
    """
    if value is None:
        return None

    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0 or not _fits_float(value):
            return None
        return value

    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            return None
        return _round_half_up(value)

    if not isinstance(value, str):
        return None

    cleaned = _CURRENCY_STRIP_REGEX.sub("", value)
    if not cleaned:
        return None

    parsed = _parse_leading_float(cleaned)
    if parsed is None or not math.isfinite(parsed) or parsed < 0:
        return None
    return _round_half_up(parsed)


def normalize_integer(value: Any) -> Optional[int]:
    """
    Convert a count (guests, people) to a non-negative integer.

    Numbers must already be whole. Strings keep digits only, so "150
    guests" and "1,200" are accepted.
    """
    if value is None:
        return None

    if _is_number(value):
        if isinstance(value, float):
            if not value.is_integer():
                return None
            value = int(value)
        return value if value >= 0 else None

    if not isinstance(value, str):
        return None

    cleaned = _INTEGER_STRIP_REGEX.sub("", value)
    if not cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        # over the interpreter's int string-conversion digit limit
        return None


def normalize_boolean(value: Any) -> Optional[bool]:
    """
    Read a yes/no flag.

    Returns True, False, or None when the value is not in the closed
    vocabulary. None means "unknown" and is never the same as False.
    """
    if isinstance(value, bool):
        return value

    token = normalize_token(value)
    if token is None:
        return None
    if token in TRUTHY_TOKENS:
        return True
    if token in FALSY_TOKENS:
        return False
    return None


def normalize_time_of_day(value: Any) -> Optional[str]:
    """
    Convert a free-text time to 24-hour HH:MM.

    Patterns are tried in priority order, first match wins:
    1. "noon" / "midnight"
    2. a whole-string 24-hour time, H:MM or HH:MM[:SS]
    3. 12-hour time with am/pm ("5:30pm", "11 am"); once am/pm is
       present an out-of-range hour or minute rejects the value
    4. a 24-hour time anywhere in the text ("around 18:45")
    5. a bare hour 1-12 anywhere in the text, minutes default to 00
    """
    trimmed = to_trimmed_string(value)
    if not trimmed:
        return None

    lower = trimmed.lower()

    if lower == "noon":
        return "12:00"
    if lower == "midnight":
        return "00:00"

    direct = _TIME_DIRECT_REGEX.match(lower)
    if direct:
        return f"{int(direct.group(1)):02d}:{direct.group(2)}"

    ampm = _TIME_AMPM_REGEX.search(lower)
    if ampm:
        hours = int(ampm.group(1))
        minutes = int(ampm.group(2) or 0)
        modifier = ampm.group(3)
        # "13pm" and "5:75pm" name a half of the day but no valid time
        if not 1 <= hours <= 12 or minutes > 59:
            return None

        if hours == 12:
            hours = 0 if modifier == "am" else 12
        elif modifier == "pm":
            hours += 12

        return f"{hours:02d}:{minutes:02d}"

    embedded = _TIME_EMBEDDED_24H_REGEX.search(lower)
    if embedded:
        return f"{int(embedded.group(1)):02d}:{embedded.group(2)}"

    bare_hour = _TIME_BARE_HOUR_REGEX.search(lower)
    if bare_hour:
        return f"{int(bare_hour.group(1)):02d}:00"

    return None


def validate_email(value: Any) -> Optional[str]:
    """Return the trimmed address if it looks like name@domain.tld."""
    trimmed = to_trimmed_string(value)
    if not trimmed:
        return None
    return trimmed if _EMAIL_REGEX.match(trimmed) else None


def validate_phone(value: Any) -> Optional[str]:
    """Return the trimmed number if it has at least 7 dial characters."""
    trimmed = to_trimmed_string(value)
    if not trimmed:
        return None
    return trimmed if _PHONE_REGEX.match(trimmed) else None


def is_blank(value: Any) -> bool:
    """True for values that count as "not provided": None and blank strings."""
    return value is None or (isinstance(value, str) and not value.strip())

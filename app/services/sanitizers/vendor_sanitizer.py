"""
Sanitizer for the `vendors` section.

Per item, in order:
- non-object, missing vendor_name or unsupported vendor_type -> item skipped
- (vendor_type, lowercased vendor_name) seen before in this pass -> skipped
- every optional field validated independently; invalid values dropped
- deposit_amount clamped to total_cost
- status canonicalized against the closed status set

A vendor with only a type and a name is kept: identity alone is enough for
the caller to create or match a tracker row.
"""
from typing import Any, Callable, Dict, List, Optional, Set, Union

from app.schemas.wedding import Vendor, VendorType
from app.services.sanitizers.normalizers import (
    is_blank,
    normalize_boolean,
    normalize_currency,
    normalize_date,
    to_trimmed_string,
    validate_email,
    validate_phone,
)
from app.services.sanitizers.section_result import SectionResult, format_raw_value
from app.services.sanitizers.wedding_vocabulary import (
    canonicalize_vendor_status,
    canonicalize_vendor_type,
)


# Optional scalar fields and their validators, in output order
VENDOR_OPTIONAL_FIELDS: Dict[str, Callable[[Any], Any]] = {
    "vendor_contact_name": to_trimmed_string,
    "vendor_email": validate_email,
    "vendor_phone": validate_phone,
    "total_cost": normalize_currency,
    "deposit_amount": normalize_currency,
    "deposit_paid": normalize_boolean,
    "deposit_date": normalize_date,
    "balance_due": normalize_currency,
    "final_payment_date": normalize_date,
    "final_payment_paid": normalize_boolean,
    "contract_signed": normalize_boolean,
    "contract_date": normalize_date,
    "service_date": normalize_date,
    "notes": to_trimmed_string,
}


def vendor_key(vendor_type: Union[VendorType, str], vendor_name: str) -> str:
    """
    Identity key shared with storage reconciliation.

    Example: vendor_key("photographer", "Lens & Co") -> "photographer:lens & co"
    """
    type_token = vendor_type.value if isinstance(vendor_type, VendorType) else vendor_type
    return f"{type_token}:{vendor_name.lower()}"


def _sanitize_optional_fields(
    item: Dict[str, Any],
    vendor_name: str,
    warnings: List[str]
) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for key, validator in VENDOR_OPTIONAL_FIELDS.items():
        raw = item.get(key)
        if is_blank(raw):
            continue
        value = validator(raw)
        if value is None:
            warnings.append(
                f'Dropped invalid {key} "{format_raw_value(raw)}" for vendor "{vendor_name}".'
            )
            continue
        fields[key] = value
    return fields


def _sanitize_vendor(
    index: int,
    item: Any,
    seen: Set[str],
    warnings: List[str]
) -> Optional[Vendor]:
    if not isinstance(item, dict):
        warnings.append(f"Skipped vendor at index {index}: expected object.")
        return None

    vendor_name = to_trimmed_string(item.get("vendor_name"))
    if not vendor_name:
        warnings.append(f"Skipped vendor at index {index}: missing vendor_name.")
        return None

    raw_type = item.get("vendor_type")
    vendor_type = canonicalize_vendor_type(raw_type)
    if vendor_type is None:
        warnings.append(
            f'Skipped vendor "{vendor_name}": unsupported vendor_type "{format_raw_value(raw_type)}".'
        )
        return None

    key = vendor_key(vendor_type, vendor_name)
    if key in seen:
        warnings.append(f'Skipped vendor "{vendor_name}" ({vendor_type.value}): duplicate entry.')
        return None
    seen.add(key)

    fields = _sanitize_optional_fields(item, vendor_name, warnings)

    total_cost = fields.get("total_cost")
    deposit_amount = fields.get("deposit_amount")
    if total_cost is not None and deposit_amount is not None and deposit_amount > total_cost:
        fields["deposit_amount"] = total_cost
        warnings.append(f'Adjusted deposit for vendor "{vendor_name}" to not exceed total_cost.')

    raw_status = item.get("status")
    if not is_blank(raw_status):
        status = canonicalize_vendor_status(raw_status)
        if status is None:
            warnings.append(
                f'Dropped unsupported status "{format_raw_value(raw_status)}" for vendor "{vendor_name}".'
            )
        else:
            fields["status"] = status

    return Vendor(vendor_type=vendor_type, vendor_name=vendor_name, **fields)


def sanitize_vendors(vendors: Any) -> SectionResult[List[Vendor]]:
    """
    Sanitize the raw `vendors` list.

    Processing never stops early; each rejected item adds one warning.

    Args:
        vendors: Raw parsed value (non-lists yield nothing)

    Returns:
        SectionResult with vendors in input order, first occurrence kept
    """
    if not isinstance(vendors, list):
        return SectionResult(sanitized=[])

    sanitized: List[Vendor] = []
    warnings: List[str] = []
    seen: Set[str] = set()

    for index, item in enumerate(vendors):
        vendor = _sanitize_vendor(index, item, seen, warnings)
        if vendor is not None:
            sanitized.append(vendor)

    return SectionResult(sanitized=sanitized, warnings=warnings)

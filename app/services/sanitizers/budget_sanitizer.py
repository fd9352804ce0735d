"""
Sanitizer for the `budget_items` section.

Items are merged by canonical category instead of deduplicated:
- spent_amount accumulates across every item for the category
- budgeted_amount, transaction_amount, transaction_date,
  transaction_description and notes keep the last non-null value

An item without any of budgeted_amount, spent_amount or
transaction_amount is rejected: a category with only a description
carries nothing the budget tracker can record.
"""
from typing import Any, Dict, List

from app.schemas.wedding import BudgetCategory, BudgetItem
from app.services.sanitizers.normalizers import (
    is_blank,
    normalize_currency,
    normalize_date,
    to_trimmed_string,
)
from app.services.sanitizers.section_result import SectionResult, format_raw_value
from app.services.sanitizers.wedding_vocabulary import canonicalize_budget_category


MONETARY_FIELDS = ("budgeted_amount", "spent_amount", "transaction_amount")

# Fields where the last non-null value in the pass wins
LAST_WRITE_WINS_FIELDS = (
    "budgeted_amount",
    "transaction_amount",
    "transaction_date",
    "transaction_description",
    "notes",
)


def _merge_into(accumulated: Dict[str, Any], values: Dict[str, Any]) -> None:
    spent = values.get("spent_amount")
    if spent is not None:
        accumulated["spent_amount"] = (accumulated.get("spent_amount") or 0) + spent

    for field_name in LAST_WRITE_WINS_FIELDS:
        if values.get(field_name) is not None:
            accumulated[field_name] = values[field_name]


def sanitize_budget_items(budget_items: Any) -> SectionResult[List[BudgetItem]]:
    """
    Sanitize and merge the raw `budget_items` list.

    Args:
        budget_items: Raw parsed value (non-lists yield nothing)

    Returns:
        SectionResult with one BudgetItem per category, in order of first
        appearance
    """
    if not isinstance(budget_items, list):
        return SectionResult(sanitized=[])

    # dict preserves first-seen category order
    aggregated: Dict[BudgetCategory, Dict[str, Any]] = {}
    warnings: List[str] = []

    for index, item in enumerate(budget_items):
        if not isinstance(item, dict):
            warnings.append(f"Skipped budget item at index {index}: expected object.")
            continue

        raw_category = item.get("category")
        category = canonicalize_budget_category(raw_category)
        if category is None:
            warnings.append(
                f'Skipped budget item at index {index}: '
                f'unsupported category "{format_raw_value(raw_category)}".'
            )
            continue

        values = {name: normalize_currency(item.get(name)) for name in MONETARY_FIELDS}
        values["transaction_date"] = normalize_date(item.get("transaction_date"))
        values["transaction_description"] = to_trimmed_string(item.get("transaction_description"))
        values["notes"] = to_trimmed_string(item.get("notes"))

        if all(values[name] is None for name in MONETARY_FIELDS):
            warnings.append(
                f'Skipped budget item for category "{category.value}": no monetary values provided.'
            )
            continue

        for name in MONETARY_FIELDS + ("transaction_date",):
            raw = item.get(name)
            if not is_blank(raw) and values[name] is None:
                warnings.append(
                    f'Removed invalid {name} "{format_raw_value(raw)}" '
                    f'for budget category "{category.value}".'
                )

        if category in aggregated:
            warnings.append(f'Merged duplicate budget category "{category.value}".')
        accumulated = aggregated.setdefault(category, {})
        _merge_into(accumulated, values)

    sanitized = [
        BudgetItem(category=category, **accumulated)
        for category, accumulated in aggregated.items()
    ]
    return SectionResult(sanitized=sanitized, warnings=warnings)

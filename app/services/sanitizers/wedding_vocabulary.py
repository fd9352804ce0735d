"""
Canonicalization tables for wedding planning vocabularies.

Tables are read-only mappings from a lowercased free-text synonym to one
canonical enum member. Lookups never raise: an unknown value gives None.
"""
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type, TypeVar

from app.schemas.wedding import (
    BudgetCategory,
    TaskCategory,
    TaskPriority,
    TaskStatus,
    VendorStatus,
    VendorType,
)
from app.services.sanitizers.normalizers import normalize_token

E = TypeVar("E", VendorType, BudgetCategory, TaskCategory, VendorStatus, TaskStatus, TaskPriority)


# Vendor types: canonical tokens are accepted directly, aliases second
VENDOR_TYPE_ALIASES: Mapping[str, VendorType] = MappingProxyType({
    "photography": VendorType.PHOTOGRAPHER,
    "photo": VendorType.PHOTOGRAPHER,
    "photos": VendorType.PHOTOGRAPHER,
    "dj/band": VendorType.DJ,
    "band": VendorType.DJ,
    "music": VendorType.DJ,
    "bakery": VendorType.BAKER,
    "cake": VendorType.BAKER,
    "cakes": VendorType.BAKER,
    "makeup": VendorType.HAIR_MAKEUP,
    "hair & makeup": VendorType.HAIR_MAKEUP,
    "hair and makeup": VendorType.HAIR_MAKEUP,
    "transport": VendorType.TRANSPORTATION,
    "planner/coordinator": VendorType.PLANNER,
    "coordinator": VendorType.PLANNER,
    "decor": VendorType.DECORATOR,
    "lighting": VendorType.DECORATOR,
})


def _with_canonical_tokens(synonyms: dict, enum_cls: Type[E]) -> Mapping[str, E]:
    # Every canonical token resolves to itself
    table = {member.value: member for member in enum_cls}
    table.update(synonyms)
    return MappingProxyType(table)


BUDGET_CATEGORY_SYNONYMS: Mapping[str, BudgetCategory] = _with_canonical_tokens({
    "ceremony": BudgetCategory.VENUE,
    "reception": BudgetCategory.VENUE,
    "food": BudgetCategory.CATERING,
    "floral": BudgetCategory.FLOWERS,
    "photo": BudgetCategory.PHOTOGRAPHY,
    "dj": BudgetCategory.MUSIC,
    "band": BudgetCategory.MUSIC,
    "dessert": BudgetCategory.CAKE,
    "decor": BudgetCategory.DECORATIONS,
    "dress": BudgetCategory.ATTIRE,
    "suit": BudgetCategory.ATTIRE,
    "stationery": BudgetCategory.INVITATIONS,
    "transport": BudgetCategory.TRANSPORTATION,
}, BudgetCategory)

TASK_CATEGORY_SYNONYMS: Mapping[str, TaskCategory] = _with_canonical_tokens({
    "floral": TaskCategory.FLOWERS,
    "photo": TaskCategory.PHOTOGRAPHY,
    "dress": TaskCategory.ATTIRE,
    "decor": TaskCategory.DECORATIONS,
    "transport": TaskCategory.TRANSPORTATION,
    "day-of": TaskCategory.DAY_OF,
}, TaskCategory)


def _lookup_member(value: Any, enum_cls: Type[E]) -> Optional[E]:
    token = normalize_token(value)
    if token is None:
        return None
    try:
        return enum_cls(token)
    except ValueError:
        return None


def canonicalize_vendor_type(value: Any) -> Optional[VendorType]:
    """Resolve a vendor type against the canonical set, then the alias table."""
    member = _lookup_member(value, VendorType)
    if member is not None:
        return member
    token = normalize_token(value)
    return VENDOR_TYPE_ALIASES.get(token) if token else None


def canonicalize_budget_category(value: Any) -> Optional[BudgetCategory]:
    token = normalize_token(value)
    return BUDGET_CATEGORY_SYNONYMS.get(token) if token else None


def canonicalize_task_category(value: Any) -> Optional[TaskCategory]:
    token = normalize_token(value)
    return TASK_CATEGORY_SYNONYMS.get(token) if token else None


# Flat closed sets: exact token match only, no aliasing

def canonicalize_vendor_status(value: Any) -> Optional[VendorStatus]:
    return _lookup_member(value, VendorStatus)


def canonicalize_task_status(value: Any) -> Optional[TaskStatus]:
    return _lookup_member(value, TaskStatus)


def canonicalize_task_priority(value: Any) -> Optional[TaskPriority]:
    return _lookup_member(value, TaskPriority)

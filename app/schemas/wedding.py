"""
Wedding planning records produced by the extraction sanitizer.

Field names match the storage columns used by downstream writers, so
entity models are snake_case. The aggregate result exposes camelCase
aliases for API clients.

Privacy note: instances contain names and contact details - NEVER log them.
"""
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator


# === Closed vocabularies ===

class VendorType(str, Enum):
    """Canonical vendor types."""
    PHOTOGRAPHER = "photographer"
    CATERER = "caterer"
    FLORIST = "florist"
    DJ = "dj"
    VIDEOGRAPHER = "videographer"
    BAKER = "baker"
    PLANNER = "planner"
    VENUE = "venue"
    DECORATOR = "decorator"
    HAIR_MAKEUP = "hair_makeup"
    TRANSPORTATION = "transportation"
    RENTALS = "rentals"
    OTHER = "other"


class VendorStatus(str, Enum):
    """Booking lifecycle of a vendor."""
    INQUIRY = "inquiry"
    PENDING = "pending"
    BOOKED = "booked"
    CONTRACT_SIGNED = "contract_signed"
    DEPOSIT_PAID = "deposit_paid"
    FULLY_PAID = "fully_paid"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class BudgetCategory(str, Enum):
    """Budget tracker categories. One row per category per wedding."""
    VENUE = "venue"
    CATERING = "catering"
    FLOWERS = "flowers"
    PHOTOGRAPHY = "photography"
    VIDEOGRAPHY = "videography"
    MUSIC = "music"
    CAKE = "cake"
    DECORATIONS = "decorations"
    ATTIRE = "attire"
    INVITATIONS = "invitations"
    FAVORS = "favors"
    TRANSPORTATION = "transportation"
    HONEYMOON = "honeymoon"
    OTHER = "other"


class TaskCategory(str, Enum):
    """Task list categories."""
    VENUE = "venue"
    CATERING = "catering"
    FLOWERS = "flowers"
    PHOTOGRAPHY = "photography"
    ATTIRE = "attire"
    INVITATIONS = "invitations"
    DECORATIONS = "decorations"
    TRANSPORTATION = "transportation"
    LEGAL = "legal"
    HONEYMOON = "honeymoon"
    DAY_OF = "day_of"
    OTHER = "other"


class TaskStatus(str, Enum):
    """Task progress."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Task urgency."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# === Entities ===

class Vendor(BaseModel):
    """
    A vendor the couple is talking to or has booked.

    Identity within one pass is (vendor_type, lowercased vendor_name).
    Money fields are whole currency units.
    """
    vendor_type: VendorType = Field(..., description="Canonical vendor type")
    vendor_name: str = Field(..., min_length=1, description="Business name as given")
    vendor_contact_name: Optional[str] = Field(default=None, description="Contact person")
    vendor_email: Optional[str] = Field(default=None, description="Validated email address")
    vendor_phone: Optional[str] = Field(default=None, description="Validated phone number")
    total_cost: Optional[int] = Field(default=None, ge=0, description="Contract total")
    deposit_amount: Optional[int] = Field(
        default=None,
        ge=0,
        description="Deposit, never above total_cost when both are known"
    )
    deposit_paid: Optional[bool] = Field(default=None)
    deposit_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    balance_due: Optional[int] = Field(default=None, ge=0)
    final_payment_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    final_payment_paid: Optional[bool] = Field(default=None)
    status: Optional[VendorStatus] = Field(default=None)
    contract_signed: Optional[bool] = Field(default=None)
    contract_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    service_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    notes: Optional[str] = Field(default=None)

    class Config:
        frozen = True


class BudgetItem(BaseModel):
    """
    Budget activity for one category.

    spent_amount is the sum of all spend mentioned in one pass; storage
    writers add it to the stored total.
    """
    category: BudgetCategory = Field(..., description="Canonical budget category")
    budgeted_amount: Optional[int] = Field(default=None, ge=0)
    spent_amount: Optional[int] = Field(default=None, ge=0)
    transaction_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    transaction_amount: Optional[int] = Field(default=None, ge=0)
    transaction_description: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    class Config:
        frozen = True


class Task(BaseModel):
    """A planning task. Identity is (lowercased task_name, due_date or none)."""
    task_name: str = Field(..., min_length=1)
    task_description: Optional[str] = Field(default=None)
    category: Optional[TaskCategory] = Field(default=None)
    due_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    status: Optional[TaskStatus] = Field(default=None)
    priority: Optional[TaskPriority] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    class Config:
        frozen = True


ProfileValue = Union[int, str]


class ReadOnlyDict(dict):
    """A dict that rejects mutation after construction."""

    def _readonly(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __reduce__(self):
        return (type(self), (dict(self),))


class SanitizationResult(BaseModel):
    """
    Output of one sanitization pass.

    parse_error is set only when the payload was not a readable JSON
    object; an empty result without parse_error means "nothing to save".
    """
    wedding_info: Dict[str, ProfileValue] = Field(
        default_factory=dict,
        alias="weddingInfo",
        validate_default=True,
        description="Sparse profile update, recognized keys only"
    )
    vendors: Tuple[Vendor, ...] = Field(default=())
    budget_items: Tuple[BudgetItem, ...] = Field(default=(), alias="budgetItems")
    tasks: Tuple[Task, ...] = Field(default=())
    warnings: Tuple[str, ...] = Field(
        default=(),
        description="Human-readable notes about dropped, adjusted or merged data"
    )
    parse_error: Optional[str] = Field(default=None, alias="parseError")

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("wedding_info")
    @classmethod
    def freeze_wedding_info(cls, v: Dict[str, ProfileValue]) -> Dict[str, ProfileValue]:
        return ReadOnlyDict(v)

    @property
    def has_data(self) -> bool:
        """True if any entity collection is non-empty."""
        return bool(self.wedding_info or self.vendors or self.budget_items or self.tasks)

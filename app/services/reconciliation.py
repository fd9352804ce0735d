"""
Write planning for sanitized records against rows already stored.

Nothing here touches storage. Callers load the existing rows for one
wedding, ask for a plan, then execute the inserts and updates with their
own client. Identity keys are the same ones the sanitizer dedups on, so a
record seen in an earlier pass is updated (or skipped) instead of
inserted twice.

Row shapes (plain dicts, as returned by the storage client):
- vendors: {"id", "vendor_type", "vendor_name"}
- budget:  {"id", "category", "spent_amount"}
- tasks:   {"task_name", "due_date"}
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from app.schemas.wedding import BudgetItem, Task, Vendor
from app.services.sanitizers import task_key, vendor_key


@dataclass(frozen=True)
class RowUpdate:
    """Changes to apply to one stored row."""
    row_id: Any
    changes: Dict[str, Any]


@dataclass(frozen=True)
class WritePlan:
    """Rows to insert, rows to update and notes for the couple."""
    inserts: List[Dict[str, Any]] = field(default_factory=list)
    updates: List[RowUpdate] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.inserts and not self.updates


def _with_scope(row: Dict[str, Any], scope: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return {**scope, **row} if scope else row


def plan_vendor_writes(
    existing_rows: Iterable[Mapping[str, Any]],
    vendors: Iterable[Vendor],
    scope: Optional[Mapping[str, Any]] = None
) -> WritePlan:
    """
    Decide insert vs update for each vendor.

    Matches never change type or name, and only carry fields that were
    actually provided, so stored values are not cleared.

    Args:
        existing_rows: Stored vendor rows for the wedding
        vendors: Sanitized vendors
        scope: Columns added to every insert (e.g. {"wedding_id": ...})
    """
    existing_ids: Dict[str, Any] = {}
    for row in existing_rows:
        if not row.get("vendor_type") or not row.get("vendor_name"):
            continue
        existing_ids[vendor_key(row["vendor_type"], row["vendor_name"])] = row.get("id")

    inserts: List[Dict[str, Any]] = []
    updates: List[RowUpdate] = []

    for vendor in vendors:
        row_id = existing_ids.get(vendor_key(vendor.vendor_type, vendor.vendor_name))
        if row_id is None:
            inserts.append(_with_scope(vendor.model_dump(mode="json"), scope))
            continue

        changes = vendor.model_dump(
            mode="json",
            exclude={"vendor_type", "vendor_name"},
            exclude_none=True
        )
        if changes:
            updates.append(RowUpdate(row_id=row_id, changes=changes))

    return WritePlan(inserts=inserts, updates=updates)


def plan_budget_writes(
    existing_rows: Iterable[Mapping[str, Any]],
    items: Iterable[BudgetItem],
    scope: Optional[Mapping[str, Any]] = None
) -> WritePlan:
    """
    Decide insert vs update for each budget category.

    spent_amount is cumulative: the sanitized amount is added to the stored
    total. Transaction fields are stored as last_transaction_*.
    """
    existing: Dict[str, Mapping[str, Any]] = {
        row["category"]: row for row in existing_rows if row.get("category")
    }

    inserts: List[Dict[str, Any]] = []
    updates: List[RowUpdate] = []

    for item in items:
        category = item.category.value
        row = existing.get(category)

        if row is None:
            inserts.append(_with_scope({
                "category": category,
                "budgeted_amount": item.budgeted_amount or 0,
                "spent_amount": item.spent_amount or 0,
                "last_transaction_date": item.transaction_date,
                "last_transaction_amount": item.transaction_amount,
                "last_transaction_description": item.transaction_description,
                "notes": item.notes,
            }, scope))
            continue

        changes: Dict[str, Any] = {}
        if item.budgeted_amount is not None:
            changes["budgeted_amount"] = item.budgeted_amount
        if item.spent_amount is not None:
            changes["spent_amount"] = (row.get("spent_amount") or 0) + item.spent_amount
        if item.transaction_date is not None:
            changes["last_transaction_date"] = item.transaction_date
        if item.transaction_amount is not None:
            changes["last_transaction_amount"] = item.transaction_amount
        if item.transaction_description is not None:
            changes["last_transaction_description"] = item.transaction_description
        if item.notes is not None:
            changes["notes"] = item.notes

        if changes:
            updates.append(RowUpdate(row_id=row.get("id"), changes=changes))

    return WritePlan(inserts=inserts, updates=updates)


def plan_task_inserts(
    existing_rows: Iterable[Mapping[str, Any]],
    tasks: Iterable[Task],
    scope: Optional[Mapping[str, Any]] = None
) -> WritePlan:
    """
    Select tasks that are not stored yet.

    Tasks are never updated from chat; a task already on the list is
    skipped with a note.
    """
    known_keys = {
        task_key(row["task_name"], row.get("due_date"))
        for row in existing_rows
        if row.get("task_name")
    }

    inserts: List[Dict[str, Any]] = []
    notes: List[str] = []

    for task in tasks:
        key = task_key(task.task_name, task.due_date)
        if key in known_keys:
            notes.append(
                f'"{task.task_name}" is already on the task list, so I skipped adding it again.'
            )
            continue
        known_keys.add(key)
        inserts.append(_with_scope(task.model_dump(mode="json"), scope))

    return WritePlan(inserts=inserts, notes=notes)

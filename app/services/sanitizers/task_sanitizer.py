"""
Sanitizer for the `tasks` section.

task_name is the only required field. An invalid due_date, category,
status or priority is dropped with a warning but never rejects the task.
Tasks are unique on (lowercased name, due date); the first one wins.
"""
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from app.schemas.wedding import Task
from app.services.sanitizers.normalizers import is_blank, normalize_date, to_trimmed_string
from app.services.sanitizers.section_result import SectionResult, format_raw_value
from app.services.sanitizers.wedding_vocabulary import (
    canonicalize_task_category,
    canonicalize_task_priority,
    canonicalize_task_status,
)


NO_DUE_DATE = "none"

# field -> (canonicalizer, label used in the warning)
_VOCABULARY_FIELDS: Dict[str, Tuple[Callable[[Any], Any], str]] = {
    "category": (canonicalize_task_category, "task category"),
    "status": (canonicalize_task_status, "task status"),
    "priority": (canonicalize_task_priority, "task priority"),
}


def task_key(task_name: str, due_date: Optional[str]) -> str:
    """
    Identity key shared with storage reconciliation.

    Example: task_key("Send invites", None) -> "send invites::none"
    """
    return f"{task_name.lower()}::{due_date or NO_DUE_DATE}"


def _sanitize_task(
    index: int,
    item: Any,
    seen: Set[str],
    warnings: List[str]
) -> Optional[Task]:
    if not isinstance(item, dict):
        warnings.append(f"Skipped task at index {index}: expected object.")
        return None

    name = to_trimmed_string(item.get("task_name"))
    if not name:
        warnings.append(f"Skipped task at index {index}: missing task_name.")
        return None

    fields: Dict[str, Any] = {}

    raw_due_date = item.get("due_date")
    due_date = normalize_date(raw_due_date)
    if due_date is not None:
        fields["due_date"] = due_date
    elif not is_blank(raw_due_date):
        warnings.append(
            f'Removed invalid due_date "{format_raw_value(raw_due_date)}" for task "{name}".'
        )

    for field_name, (canonicalize, label) in _VOCABULARY_FIELDS.items():
        raw = item.get(field_name)
        if is_blank(raw):
            continue
        value = canonicalize(raw)
        if value is None:
            warnings.append(f'Dropped unsupported {label} "{format_raw_value(raw)}" for "{name}".')
            continue
        fields[field_name] = value

    key = task_key(name, due_date)
    if key in seen:
        warnings.append(
            f'Skipped duplicate task "{name}" with due date {due_date or "unspecified"}.'
        )
        return None
    seen.add(key)

    description = to_trimmed_string(item.get("task_description"))
    notes = to_trimmed_string(item.get("notes"))

    return Task(task_name=name, task_description=description, notes=notes, **fields)


def sanitize_tasks(tasks: Any) -> SectionResult[List[Task]]:
    """
    Sanitize the raw `tasks` list.

    Args:
        tasks: Raw parsed value (non-lists yield nothing)

    Returns:
        SectionResult with tasks in input order, duplicates removed
    """
    if not isinstance(tasks, list):
        return SectionResult(sanitized=[])

    sanitized: List[Task] = []
    warnings: List[str] = []
    seen: Set[str] = set()

    for index, item in enumerate(tasks):
        task = _sanitize_task(index, item, seen, warnings)
        if task is not None:
            sanitized.append(task)

    return SectionResult(sanitized=sanitized, warnings=warnings)

"""Row-to-record conversion shared by the feed adapters."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from mis_engine.dates import coerce_date
from mis_engine.schema import AttendanceRecord, TaskRecord

logger = logging.getLogger(__name__)

TASK_REQUIRED_FIELDS = {"task_id", "employee_email", "planned_date", "actual_date"}
ATTENDANCE_REQUIRED_FIELDS = {"name", "present_days"}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def missing_fields(fields, required: set[str]) -> list[str]:
    present = set(fields or ())
    return sorted(required - present)


def task_from_mapping(row: Mapping[str, Any]) -> Optional[TaskRecord]:
    """Build a task, or ``None`` for a row carrying neither id nor description."""

    task_id = _text(row.get("task_id"))
    description = _text(row.get("description") or row.get("task"))
    if not task_id and not description:
        return None

    return TaskRecord(
        task_id=task_id,
        description=description,
        employee_name=_text(row.get("employee_name")),
        employee_email=_text(row.get("employee_email")),
        planned_date=coerce_date(row.get("planned_date")),
        actual_date=coerce_date(row.get("actual_date")),
        step_code=_text(row.get("step_code")),
        system_type=_text(row.get("system_type")),
        status=_text(row.get("status")),
        form_link=_text(row.get("form_link")),
        avatar_url=_text(row.get("avatar_url")) or None,
    )


def attendance_from_values(name: Any, present_days: Any, position: int) -> Optional[AttendanceRecord]:
    """Build an attendance row; blank or non-numeric rows are dropped."""

    name_text = _text(name)
    days_text = _text(present_days)
    if not name_text or days_text == "":
        logger.debug("row %d: skipping blank attendance row", position)
        return None

    try:
        days = float(days_text)
    except ValueError:
        logger.warning("row %d: non-numeric present days %r for %r", position, days_text, name_text)
        return None

    if math.isnan(days) or days < 0:
        logger.warning("row %d: invalid present days %r for %r", position, days_text, name_text)
        return None

    return AttendanceRecord(employee_name=name_text, present_days=days)

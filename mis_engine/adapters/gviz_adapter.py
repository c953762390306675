"""Adapter for Google Visualization (gviz) sheet response bodies.

Only the response text is handled here; fetching it is the caller's job.
"""

from __future__ import annotations

import json
import logging

from mis_engine.adapters.rows import attendance_from_values, task_from_mapping
from mis_engine.schema import AttendanceRecord, TaskRecord

logger = logging.getLogger(__name__)

# Zero-based sheet column for each task field (B, C, D, E, F, H, J, N, O, P, Q).
TASK_COLUMNS = {
    "task_id": 1,
    "description": 2,
    "step_code": 3,
    "planned_date": 4,
    "actual_date": 5,
    "form_link": 7,
    "system_type": 9,
    "status": 13,
    "employee_name": 14,
    "employee_email": 15,
    "avatar_url": 16,
}

# The attendance range starts at column J: count first, name second.
ATTENDANCE_COUNT_COLUMN = 0
ATTENDANCE_NAME_COLUMN = 1


def _cell_value(cell) -> str:
    """Formatted value ``f`` wins over the raw value ``v``."""

    if not cell:
        return ""
    if cell.get("f"):
        return str(cell["f"])
    raw = cell.get("v")
    return "" if raw is None else str(raw)


def _cell(cells: list, index: int) -> str:
    return _cell_value(cells[index]) if index < len(cells) else ""


def _load_rows(text: str, feed: str) -> list:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ValueError(f"{feed}: response does not contain a JSON object")

    try:
        payload = json.loads(text[start : end + 1])
    except json.JSONDecodeError as exc:
        raise ValueError(f"{feed}: malformed JSON in response") from exc

    if payload.get("status") != "ok":
        raise ValueError(f"{feed}: sheet returned status {payload.get('status')!r}")

    try:
        return list(payload["table"]["rows"])
    except (KeyError, TypeError) as exc:
        raise ValueError(f"{feed}: response has no table rows") from exc


def parse_tasks(text: str) -> list[TaskRecord]:
    """Parse the task sheet, skipping its header row."""

    tasks: list[TaskRecord] = []
    for row in _load_rows(text, "tasks")[1:]:
        if not row or not row.get("c"):
            continue
        cells = row["c"]
        task = task_from_mapping({field: _cell(cells, index) for field, index in TASK_COLUMNS.items()})
        if task is not None:
            tasks.append(task)
    logger.debug("parsed %d tasks from gviz response", len(tasks))
    return tasks


def parse_attendance(text: str) -> list[AttendanceRecord]:
    records: list[AttendanceRecord] = []
    for position, row in enumerate(_load_rows(text, "attendance"), start=1):
        cells = (row or {}).get("c") or []
        if len(cells) <= ATTENDANCE_NAME_COLUMN:
            continue
        record = attendance_from_values(
            _cell(cells, ATTENDANCE_NAME_COLUMN),
            _cell(cells, ATTENDANCE_COUNT_COLUMN),
            position,
        )
        if record is not None:
            records.append(record)
    return records

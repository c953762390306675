"""JSON adapters for the task, attendance and holiday feeds."""

from __future__ import annotations

import json

from mis_engine.adapters.rows import (
    ATTENDANCE_REQUIRED_FIELDS,
    TASK_REQUIRED_FIELDS,
    attendance_from_values,
    missing_fields,
    task_from_mapping,
)
from mis_engine.schema import AttendanceRecord, TaskRecord
from mis_engine.workdays import HolidayCalendar


def _load_list(file_path: str) -> list:
    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{file_path}: malformed JSON") from exc

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list")
    return payload


def _check_item(item, index: int, required: set[str]) -> dict:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")
    missing = missing_fields(item.keys(), required)
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")
    return item


def parse_tasks(file_path: str) -> list[TaskRecord]:
    tasks = []
    for index, item in enumerate(_load_list(file_path), start=1):
        task = task_from_mapping(_check_item(item, index, TASK_REQUIRED_FIELDS))
        if task is not None:
            tasks.append(task)
    return tasks


def parse_attendance(file_path: str) -> list[AttendanceRecord]:
    records = []
    for index, item in enumerate(_load_list(file_path), start=1):
        item = _check_item(item, index, ATTENDANCE_REQUIRED_FIELDS)
        record = attendance_from_values(item["name"], item["present_days"], index)
        if record is not None:
            records.append(record)
    return records


def parse_holidays(file_path: str) -> HolidayCalendar:
    """Parse a list of ``DD/MM/YYYY`` strings or ``{"date": ...}`` objects."""

    values = []
    for index, item in enumerate(_load_list(file_path), start=1):
        if isinstance(item, dict):
            item = item.get("date")
        if not isinstance(item, str):
            raise ValueError(f"Item {index}: holiday must be a DD/MM/YYYY string")
        values.append(item)
    return HolidayCalendar.from_strings(values)

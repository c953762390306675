"""CSV adapters for the task, attendance and holiday feeds."""

from __future__ import annotations

import csv

from mis_engine.adapters.rows import (
    ATTENDANCE_REQUIRED_FIELDS,
    TASK_REQUIRED_FIELDS,
    attendance_from_values,
    missing_fields,
    task_from_mapping,
)
from mis_engine.schema import AttendanceRecord, TaskRecord
from mis_engine.workdays import HolidayCalendar


def _read_rows(file_path: str, required: set[str]) -> list[dict]:
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        missing = missing_fields(reader.fieldnames, required)
        if missing:
            raise ValueError(f"{file_path}: missing required columns {missing}")
        return list(reader)


def parse_tasks(file_path: str) -> list[TaskRecord]:
    """Parse a task feed CSV; unparseable dates become absent."""

    tasks: list[TaskRecord] = []
    for row in _read_rows(file_path, TASK_REQUIRED_FIELDS):
        task = task_from_mapping(row)
        if task is not None:
            tasks.append(task)
    return tasks


def parse_attendance(file_path: str) -> list[AttendanceRecord]:
    """Parse an attendance CSV with ``name`` and ``present_days`` columns."""

    records: list[AttendanceRecord] = []
    for row_number, row in enumerate(_read_rows(file_path, ATTENDANCE_REQUIRED_FIELDS), start=2):
        record = attendance_from_values(row.get("name"), row.get("present_days"), row_number)
        if record is not None:
            records.append(record)
    return records


def parse_holidays(file_path: str) -> HolidayCalendar:
    """Parse a holiday CSV with a ``date`` column in DD/MM/YYYY form."""

    rows = _read_rows(file_path, {"date"})
    try:
        return HolidayCalendar.from_strings(row["date"].strip() for row in rows)
    except ValueError as exc:
        raise ValueError(f"{file_path}: {exc}") from exc

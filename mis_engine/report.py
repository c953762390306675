"""Compose the per-employee MIS report consumed by the display layer."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Optional, Sequence

from mis_engine.attendance import compute_attendance
from mis_engine.dates import delay_in_days
from mis_engine.history import history
from mis_engine.kpi import compute_mis, kpi_counts, work_not_done, work_not_done_on_time
from mis_engine.matching import build_directory
from mis_engine.schema import (
    AttendanceRecord,
    AttendanceStats,
    DateRange,
    Employee,
    HistoricalDataPoint,
    KpiCounts,
    MISStats,
    TaskRecord,
)
from mis_engine.workdays import HolidayCalendar, month_range, week_range, year_range

logger = logging.getLogger(__name__)

LAST_WEEK = "last-week"
LAST_TO_LAST_WEEK = "last-to-last-week"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class Period:
    key: str
    date_range: DateRange
    title_suffix: str
    is_weekly: bool


@dataclass(frozen=True)
class EmployeeReport:
    employee: Optional[Employee]
    period: Period
    mis: Optional[MISStats]
    attendance: Optional[AttendanceStats]
    work_not_done: tuple[TaskRecord, ...]
    work_not_done_on_time: tuple[TaskRecord, ...]
    counts: KpiCounts
    history: tuple[HistoricalDataPoint, ...]


def resolve_period(key: str, as_of: date) -> Period:
    """Map a period key to its date range.

    Keys are ``last-week``, ``last-to-last-week``, a year (``2025``) or a
    year and 1-based month (``2025-03``).
    """

    if key == LAST_WEEK:
        return Period(key, week_range(as_of, 1), "for Last Week", True)
    if key == LAST_TO_LAST_WEEK:
        return Period(key, week_range(as_of, 2), "for Last to Last Week", True)

    try:
        if "-" in key:
            year_text, month_text = key.split("-", maxsplit=1)
            year, month = int(year_text), int(month_text)
            if not 1 <= month <= 12:
                raise ValueError(f"month out of range: {month}")
            return Period(key, month_range(year, month), f"for {MONTH_NAMES[month - 1]} {year}", False)
        year = int(key)
        return Period(key, year_range(year), f"for {year}", False)
    except ValueError as exc:
        raise ValueError(f"Unknown period '{key}'") from exc


def period_options(tasks: Sequence[TaskRecord], as_of: date) -> list[tuple[str, str]]:
    """Selectable (key, label) periods: the two weeks, then every year with planned work."""

    options = [(LAST_WEEK, "Last Week"), (LAST_TO_LAST_WEEK, "Last to Last Week")]
    years = {task.planned_date.year for task in tasks if task.planned_date is not None}
    years.add(as_of.year)

    for year in sorted(years, reverse=True):
        options.append((str(year), f"Full Year {year}"))
        for month in range(12, 0, -1):
            options.append((f"{year}-{month:02d}", f"{MONTH_NAMES[month - 1]} {year}"))
    return options


def employee_report(
    tasks: Sequence[TaskRecord],
    attendance: Sequence[AttendanceRecord],
    employee_email: str,
    period: Period,
    as_of: date,
    holidays: Optional[HolidayCalendar] = None,
) -> EmployeeReport:
    """Build every figure shown for one employee and period."""

    directory = build_directory(tasks)
    employee = next((entry for entry in directory if entry.email == employee_email), None)
    if employee is None:
        logger.info("employee %s not found in task feed", employee_email)

    attendance_stats = None
    if period.is_weekly:
        attendance_stats = compute_attendance(attendance, employee_email, directory, period.date_range, holidays)

    return EmployeeReport(
        employee=employee,
        period=period,
        mis=compute_mis(tasks, employee_email, period.date_range),
        attendance=attendance_stats,
        work_not_done=tuple(work_not_done(tasks, employee_email, period.date_range)),
        work_not_done_on_time=tuple(work_not_done_on_time(tasks, employee_email, period.date_range)),
        counts=kpi_counts(tasks, employee_email, as_of),
        history=tuple(history(tasks, employee_email, as_of)),
    )


def _jsonable(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def report_to_dict(report: EmployeeReport) -> dict:
    """JSON-friendly view of a report, with ISO dates and per-task delays."""

    payload = _jsonable(asdict(report))
    payload["work_not_done_on_time"] = [
        {**row, "delay_days": delay_in_days(task)}
        for row, task in zip(payload["work_not_done_on_time"], report.work_not_done_on_time)
    ]
    return payload

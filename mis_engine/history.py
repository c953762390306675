"""Twelve-month completion and on-time trend for one employee."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from mis_engine.metrics import rate_pct
from mis_engine.schema import HistoricalDataPoint, TaskRecord
from mis_engine.workdays import month_range

HISTORY_MONTHS = 12

_MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _trailing_months(as_of: date, count: int) -> list[tuple[int, int]]:
    """(year, month) pairs, oldest first, ending with ``as_of``'s month."""

    index = as_of.year * 12 + (as_of.month - 1)
    return [divmod(index - offset, 12) for offset in range(count - 1, -1, -1)]


def period_label(year: int, month: int) -> str:
    """Short chart label such as ``Oct '25``."""

    return f"{_MONTH_ABBREVIATIONS[month - 1]} '{year % 100:02d}"


def history(tasks: Iterable[TaskRecord], employee_email: Optional[str], as_of: date) -> list[HistoricalDataPoint]:
    """Monthly completion and on-time rates, oldest first, ending at ``as_of``'s month."""

    if not employee_email:
        return []

    own_tasks = [task for task in tasks if task.employee_email == employee_email]
    if not own_tasks:
        return []

    points = []
    for year, zero_based_month in _trailing_months(as_of, HISTORY_MONTHS):
        month = zero_based_month + 1
        month_dates = month_range(year, month)

        planned = [task for task in own_tasks if task.planned_date in month_dates]
        completed = [task for task in planned if task.is_done]
        on_time = [task for task in completed if task.actual_date <= task.planned_date]

        points.append(
            HistoricalDataPoint(
                period=period_label(year, month),
                completion_rate=rate_pct(len(completed), len(planned)),
                on_time_rate=rate_pct(len(on_time), len(completed)),
            )
        )
    return points

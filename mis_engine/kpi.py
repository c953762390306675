"""Plan-vs-actual and on-time KPI scorecards."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from mis_engine.metrics import deviation_pct
from mis_engine.schema import DateRange, KpiCounts, KpiMetric, MISStats, TaskRecord


def _planned_in_range(tasks: Iterable[TaskRecord], employee_email: str, date_range: DateRange) -> list[TaskRecord]:
    return [
        task
        for task in tasks
        if task.employee_email == employee_email and task.planned_date in date_range
    ]


def _is_on_time(task: TaskRecord) -> bool:
    return task.actual_date is not None and task.actual_date <= task.planned_date


def _by_planned_date(tasks: list[TaskRecord]) -> list[TaskRecord]:
    return sorted(tasks, key=lambda task: task.planned_date)


def compute_mis(tasks: Iterable[TaskRecord], employee_email: Optional[str], date_range: DateRange) -> Optional[MISStats]:
    """Score one employee's tasks planned within ``date_range``."""

    if not employee_email:
        return None

    planned = _planned_in_range(tasks, employee_email, date_range)
    completed = [task for task in planned if task.is_done]
    on_time = [task for task in completed if _is_on_time(task)]

    return MISStats(
        plan_vs_actual=KpiMetric(
            base=len(planned),
            met=len(completed),
            performance=deviation_pct(len(completed), len(planned)),
        ),
        on_time=KpiMetric(
            base=len(completed),
            met=len(on_time),
            performance=deviation_pct(len(on_time), len(completed)),
        ),
        date_range=date_range,
    )


def work_not_done(tasks: Iterable[TaskRecord], employee_email: Optional[str], date_range: DateRange) -> list[TaskRecord]:
    """Tasks planned in the range that have no completion date."""

    if not employee_email:
        return []
    planned = _planned_in_range(tasks, employee_email, date_range)
    return _by_planned_date([task for task in planned if not task.is_done])


def work_not_done_on_time(
    tasks: Iterable[TaskRecord], employee_email: Optional[str], date_range: DateRange
) -> list[TaskRecord]:
    """Tasks planned in the range that were completed after their planned date."""

    if not employee_email:
        return []
    planned = _planned_in_range(tasks, employee_email, date_range)
    return _by_planned_date([task for task in planned if task.is_done and not _is_on_time(task)])


def kpi_counts(pending_tasks: Iterable[TaskRecord], employee_email: Optional[str], as_of: date) -> KpiCounts:
    """Overdue, due-today and pending totals over an employee's open tasks."""

    if not employee_email:
        return KpiCounts(overdue=0, due_today=0, pending_total=0)

    overdue = 0
    due_today = 0
    pending_total = 0
    for task in pending_tasks:
        if task.employee_email != employee_email or task.is_done:
            continue

        # Undated tasks are still pending.
        if task.planned_date is None:
            pending_total += 1
            continue

        if task.planned_date <= as_of:
            pending_total += 1
        if task.planned_date < as_of:
            overdue += 1
        elif task.planned_date == as_of:
            due_today += 1

    return KpiCounts(overdue=overdue, due_today=due_today, pending_total=pending_total)

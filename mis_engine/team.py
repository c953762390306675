"""Team-wide classification over last week's KPI scorecards."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from mis_engine.kpi import compute_mis
from mis_engine.schema import Employee, TaskRecord, TeamPerformanceSummary
from mis_engine.workdays import week_range


def summarize(tasks: Sequence[TaskRecord], directory: Sequence[Employee], as_of: date) -> TeamPerformanceSummary:
    """Split employees with planned work last week into needs-attention and on-track."""

    last_week = week_range(as_of, 1)
    needs_attention: list[Employee] = []
    on_track: list[Employee] = []

    for employee in directory:
        stats = compute_mis(tasks, employee.email, last_week)
        if stats is None or stats.plan_vs_actual.base == 0:
            continue

        if stats.plan_vs_actual.performance < 0 or stats.on_time.performance < 0:
            needs_attention.append(employee)
        else:
            on_track.append(employee)

    return TeamPerformanceSummary(needs_attention=tuple(needs_attention), on_track=tuple(on_track))

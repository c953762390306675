"""Attendance percentage against the working-day calendar."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from mis_engine.matching import match_employee
from mis_engine.metrics import rate_pct, round_half_away
from mis_engine.schema import AttendanceRecord, AttendanceStats, DateRange, Employee
from mis_engine.workdays import HolidayCalendar, working_days

logger = logging.getLogger(__name__)


def _find_employee(employee_email: str, directory: Sequence[Employee]) -> Optional[Employee]:
    wanted = employee_email.lower()
    for employee in directory:
        if employee.email.lower() == wanted:
            return employee
    return None


def compute_attendance(
    attendance: Sequence[AttendanceRecord],
    employee_email: Optional[str],
    directory: Sequence[Employee],
    date_range: DateRange,
    holidays: Optional[HolidayCalendar] = None,
) -> Optional[AttendanceStats]:
    """Attendance for one employee over ``date_range``.

    Each attendance row's free-text name is reconciled against ``directory``;
    the first row resolving to the target employee supplies the present-day
    count, otherwise the employee was present for 0 days.
    """

    if not employee_email or not directory or not attendance:
        return None

    target = _find_employee(employee_email, directory)
    if target is None:
        return None

    present_days = 0.0
    for record in attendance:
        matched = match_employee(record.employee_name, directory)
        if matched is not None and matched.email.lower() == target.email.lower():
            present_days = float(record.present_days)
            break
    else:
        logger.debug("no attendance row reconciled to %s", target.email)

    total = working_days(date_range, holidays)
    return AttendanceStats(
        total_working_days=total,
        present_days=round_half_away(present_days, 1),
        attendance_percentage=rate_pct(present_days, total),
        date_range=date_range,
    )

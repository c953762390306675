"""Demo script for mis-engine."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mis_engine.adapters.csv_adapter import parse_attendance, parse_tasks
from mis_engine.matching import build_directory
from mis_engine.report import employee_report, resolve_period
from mis_engine.team import summarize
from mis_engine.workdays import HolidayCalendar


def main() -> None:
    as_of = date(2025, 10, 15)
    tasks = parse_tasks("examples/sample_tasks.csv")
    attendance = parse_attendance("examples/sample_attendance.csv")
    period = resolve_period("last-week", as_of)

    report = employee_report(tasks, attendance, "sahil@example.com", period, as_of, HolidayCalendar.default())
    print("Period:", period.title_suffix, period.date_range)
    print("MIS:", report.mis)
    print("Attendance:", report.attendance)
    print("Team:", summarize(tasks, build_directory(tasks), as_of))


if __name__ == "__main__":
    main()

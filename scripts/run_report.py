"""Run the MIS report for one employee (or the team) from feed files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mis_engine.adapters import csv_adapter, json_adapter
from mis_engine.matching import build_directory
from mis_engine.report import LAST_WEEK, employee_report, report_to_dict, resolve_period
from mis_engine.team import summarize
from mis_engine.workdays import HolidayCalendar


def _adapter_for(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError(f"Unsupported input format for {path}, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute MIS scorecards from task and attendance feeds")
    parser.add_argument("--tasks", required=True, help="Path to CSV/JSON task feed")
    parser.add_argument("--attendance", help="Path to CSV/JSON weekly attendance feed")
    parser.add_argument("--holidays", help="Path to CSV/JSON holiday list (defaults to the built-in table)")
    parser.add_argument("--email", help="Employee email to report on")
    parser.add_argument("--period", default=LAST_WEEK, help="last-week, last-to-last-week, YYYY or YYYY-MM")
    parser.add_argument("--as-of", type=date.fromisoformat, default=date.today(), help="Reference date (YYYY-MM-DD)")
    parser.add_argument("--team", action="store_true", help="Print the team summary instead of one employee")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if not args.team and not args.email:
        parser.error("--email is required unless --team is given")

    try:
        tasks_path = Path(args.tasks)
        tasks = _adapter_for(tasks_path).parse_tasks(str(tasks_path))

        attendance = []
        if args.attendance:
            attendance_path = Path(args.attendance)
            attendance = _adapter_for(attendance_path).parse_attendance(str(attendance_path))

        if args.holidays:
            holidays_path = Path(args.holidays)
            holidays = _adapter_for(holidays_path).parse_holidays(str(holidays_path))
        else:
            holidays = HolidayCalendar.default()

        if args.team:
            summary = summarize(tasks, build_directory(tasks), args.as_of)
            report = asdict(summary)
            out_name = "team_summary.json"
        else:
            period = resolve_period(args.period, args.as_of)
            report = report_to_dict(employee_report(tasks, attendance, args.email, period, args.as_of, holidays))
            out_name = "employee_report.json"
    except ValueError as exc:
        parser.error(str(exc))

    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / out_name
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved report to {out_path}")


if __name__ == "__main__":
    main()

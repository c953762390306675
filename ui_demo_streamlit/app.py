"""Streamlit demo UI for mis-engine."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import Any

from mis_engine.adapters import csv_adapter, json_adapter
from mis_engine.dates import format_date_short
from mis_engine.matching import build_directory
from mis_engine.report import employee_report, period_options, report_to_dict, resolve_period
from mis_engine.team import summarize
from mis_engine.workdays import HolidayCalendar


def _adapter_for(file_path: str):
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _save_uploaded(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        return handle.name


def _performance_level(performance: float) -> str:
    return "ON TARGET" if performance >= 0 else "BELOW TARGET"


def run_engine(tasks: list, attendance: list, email: str, period_key: str, as_of: date) -> dict[str, Any]:
    """Run all engine steps and return a UI-friendly result payload."""

    period = resolve_period(period_key, as_of)
    report = employee_report(tasks, attendance, email, period, as_of, HolidayCalendar.default())
    team = summarize(tasks, build_directory(tasks), as_of)

    payload = report_to_dict(report)
    payload["range_label"] = (
        f"{format_date_short(period.date_range.start)} - {format_date_short(period.date_range.end)}"
    )
    payload["levels"] = {
        "plan_vs_actual": _performance_level(report.mis.plan_vs_actual.performance) if report.mis else None,
        "on_time": _performance_level(report.mis.on_time.performance) if report.mis else None,
    }
    payload["team"] = {
        "needs_attention": [employee.name for employee in team.needs_attention],
        "on_track": [employee.name for employee in team.on_track],
    }
    return payload


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="MIS Engine Demo", layout="wide")
    st.title("MIS Engine - Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded_tasks = st.file_uploader("Upload task feed", type=["csv", "json"])
        uploaded_attendance = st.file_uploader("Upload attendance feed", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        as_of = st.date_input("As of", value=date(2025, 10, 15))

    try:
        if use_demo:
            tasks = csv_adapter.parse_tasks("examples/sample_tasks.csv")
            attendance = csv_adapter.parse_attendance("examples/sample_attendance.csv")
        elif uploaded_tasks is not None:
            tasks_path = _save_uploaded(uploaded_tasks)
            tasks = _adapter_for(tasks_path).parse_tasks(tasks_path)
            attendance = []
            if uploaded_attendance is not None:
                attendance_path = _save_uploaded(uploaded_attendance)
                attendance = _adapter_for(attendance_path).parse_attendance(attendance_path)
        else:
            st.info("Upload a task feed or enable 'Load demo dataset'.")
            return

        directory = build_directory(tasks)
        if not directory:
            st.error("No employees were found in the task feed.")
            return

        with st.sidebar:
            labels = {employee.email: f"{employee.name} ({employee.email})" for employee in directory}
            email = st.selectbox("Employee", options=list(labels), format_func=labels.get)
            options = dict(period_options(tasks, as_of))
            period_key = st.selectbox("Period", options=list(options), format_func=options.get)

        result = run_engine(tasks, attendance, email, period_key, as_of)

        st.subheader(f"A) MIS Scoring {result['period']['title_suffix']} ({result['range_label']})")
        mis = result["mis"]
        c1, c2 = st.columns(2)
        c1.metric("Work done vs planned", f"{mis['plan_vs_actual']['performance']}%",
                  f"{mis['plan_vs_actual']['met']} / {mis['plan_vs_actual']['base']}")
        c2.metric("Work done on time", f"{mis['on_time']['performance']}%",
                  f"{mis['on_time']['met']} / {mis['on_time']['base']}")

        if result["attendance"]:
            st.subheader("B) Attendance")
            a = result["attendance"]
            a1, a2, a3 = st.columns(3)
            a1.metric("Working days", a["total_working_days"])
            a2.metric("Present days", a["present_days"])
            a3.metric("Attendance", f"{a['attendance_percentage']}%")

        st.subheader("C) Breakdown")
        st.write("**Work not done**")
        st.table(result["work_not_done"] or [{"info": "None"}])
        st.write("**Work not done on time**")
        st.table(result["work_not_done_on_time"] or [{"info": "None"}])

        st.subheader("D) 12-Month Trend")
        if result["history"]:
            st.line_chart(
                {
                    "Completion Rate": [point["completion_rate"] for point in result["history"]],
                    "On-Time Rate": [point["on_time_rate"] for point in result["history"]],
                }
            )

        st.subheader("E) Team Highlights (Last Week)")
        t1, t2 = st.columns(2)
        t1.write("**Needs attention**")
        t1.write(", ".join(result["team"]["needs_attention"]) or "-")
        t2.write("**On track**")
        t2.write(", ".join(result["team"]["on_track"]) or "-")

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()

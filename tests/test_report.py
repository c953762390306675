from datetime import date

import pytest

from mis_engine.report import employee_report, period_options, report_to_dict, resolve_period
from mis_engine.schema import AttendanceRecord, DateRange, KpiMetric, TaskRecord
from mis_engine.workdays import HolidayCalendar

AS_OF = date(2025, 10, 15)
EMAIL = "sahil@x.com"


def sample_tasks():
    def task(task_id, planned, actual=None, name="Sahil Kumar", email=EMAIL):
        return TaskRecord(task_id, f"task {task_id}", name, email, planned, actual)

    return [
        task("t1", date(2025, 10, 6), date(2025, 10, 6)),
        task("t2", date(2025, 10, 7), date(2025, 10, 9)),
        task("t3", date(2025, 10, 8)),
        task("t4", date(2025, 10, 9), date(2025, 10, 8)),
        task("p1", date(2024, 5, 2), name="Priya N", email="priya@x.com"),
    ]


def test_resolve_period_weeks():
    last = resolve_period("last-week", AS_OF)
    assert last.date_range == DateRange(date(2025, 10, 6), date(2025, 10, 10))
    assert last.title_suffix == "for Last Week"
    assert last.is_weekly

    before = resolve_period("last-to-last-week", AS_OF)
    assert before.date_range == DateRange(date(2025, 9, 29), date(2025, 10, 3))
    assert before.title_suffix == "for Last to Last Week"


def test_resolve_period_month_and_year():
    month = resolve_period("2025-02", AS_OF)
    assert month.date_range == DateRange(date(2025, 2, 1), date(2025, 2, 28))
    assert month.title_suffix == "for February 2025"
    assert not month.is_weekly

    year = resolve_period("2024", AS_OF)
    assert year.date_range == DateRange(date(2024, 1, 1), date(2024, 12, 31))
    assert year.title_suffix == "for 2024"


@pytest.mark.parametrize("key", ["yesterday", "2025-13", "2025-", "", "0", "10000"])
def test_resolve_period_rejects_unknown_keys(key):
    with pytest.raises(ValueError):
        resolve_period(key, AS_OF)


def test_period_options():
    options = period_options(sample_tasks(), AS_OF)
    assert options[:4] == [
        ("last-week", "Last Week"),
        ("last-to-last-week", "Last to Last Week"),
        ("2025", "Full Year 2025"),
        ("2025-12", "December 2025"),
    ]
    assert ("2024", "Full Year 2024") in options
    assert len(options) == 2 + 2 * 13


def test_employee_report_weekly():
    attendance = [AttendanceRecord("sahil kumar", 4)]
    period = resolve_period("last-week", AS_OF)
    report = employee_report(sample_tasks(), attendance, EMAIL, period, AS_OF, HolidayCalendar.default())

    assert report.employee.name == "Sahil Kumar"
    assert report.mis.plan_vs_actual == KpiMetric(4, 3, -25.0)
    assert report.attendance.attendance_percentage == 80
    assert [t.task_id for t in report.work_not_done] == ["t3"]
    assert [t.task_id for t in report.work_not_done_on_time] == ["t2"]
    assert report.counts.overdue == 1
    assert len(report.history) == 12


def test_employee_report_monthly_has_no_attendance():
    period = resolve_period("2025-10", AS_OF)
    report = employee_report(sample_tasks(), [AttendanceRecord("sahil kumar", 4)], EMAIL, period, AS_OF)
    assert report.attendance is None
    assert report.mis.plan_vs_actual.base == 4


def test_report_to_dict_is_json_friendly():
    period = resolve_period("last-week", AS_OF)
    payload = report_to_dict(employee_report(sample_tasks(), [], EMAIL, period, AS_OF))

    assert payload["period"]["date_range"] == {"start": "2025-10-06", "end": "2025-10-10"}
    assert payload["attendance"] is None
    assert payload["work_not_done_on_time"][0]["task_id"] == "t2"
    assert payload["work_not_done_on_time"][0]["delay_days"] == 2
    assert payload["mis"]["on_time"]["performance"] == -33.33


def test_unknown_year_keeps_period_context():
    with pytest.raises(ValueError, match="Unknown period '0'"):
        resolve_period("0", AS_OF)

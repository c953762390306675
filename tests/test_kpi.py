from datetime import date

from mis_engine.kpi import compute_mis, kpi_counts, work_not_done, work_not_done_on_time
from mis_engine.schema import DateRange, KpiCounts, KpiMetric, TaskRecord

EMAIL = "sahil@x.com"
LAST_WEEK = DateRange(date(2025, 10, 6), date(2025, 10, 10))


def task(task_id, planned, actual=None, email=EMAIL):
    return TaskRecord(task_id, f"task {task_id}", "Sahil Kumar", email, planned, actual)


def sample_tasks():
    return [
        task("t4", date(2025, 10, 9), date(2025, 10, 8)),
        task("t2", date(2025, 10, 7), date(2025, 10, 9)),
        task("t3", date(2025, 10, 8)),
        task("t1", date(2025, 10, 6), date(2025, 10, 6)),
        task("outside", date(2025, 10, 13)),
        task("undated", None),
        task("other", date(2025, 10, 7), email="priya@x.com"),
    ]


def test_compute_mis_scorecard():
    stats = compute_mis(sample_tasks(), EMAIL, LAST_WEEK)
    assert stats.plan_vs_actual == KpiMetric(base=4, met=3, performance=-25.0)
    assert stats.on_time == KpiMetric(base=3, met=2, performance=-33.33)
    assert stats.date_range == LAST_WEEK


def test_compute_mis_zero_base():
    stats = compute_mis(sample_tasks(), "nobody@x.com", LAST_WEEK)
    assert stats.plan_vs_actual == KpiMetric(0, 0, 0.0)
    assert stats.on_time == KpiMetric(0, 0, 0.0)


def test_compute_mis_nothing_completed():
    stats = compute_mis([task("a", date(2025, 10, 6))], EMAIL, LAST_WEEK)
    assert stats.plan_vs_actual.performance == -100.0
    assert stats.on_time == KpiMetric(0, 0, 0.0)


def test_compute_mis_without_email():
    assert compute_mis(sample_tasks(), None, LAST_WEEK) is None
    assert compute_mis(sample_tasks(), "", LAST_WEEK) is None


def test_compute_mis_is_repeatable():
    tasks = sample_tasks()
    assert compute_mis(tasks, EMAIL, LAST_WEEK) == compute_mis(tasks, EMAIL, LAST_WEEK)


def test_work_not_done():
    tasks = sample_tasks() + [task("t0", date(2025, 10, 6))]
    assert [t.task_id for t in work_not_done(tasks, EMAIL, LAST_WEEK)] == ["t0", "t3"]


def test_work_not_done_on_time_is_only_late_completions():
    assert [t.task_id for t in work_not_done_on_time(sample_tasks(), EMAIL, LAST_WEEK)] == ["t2"]


def test_kpi_counts():
    as_of = date(2025, 10, 15)
    tasks = [
        task("overdue", date(2025, 10, 14)),
        task("today", as_of),
        task("future", date(2025, 10, 20)),
        task("undated", None),
        task("done", date(2025, 10, 1), date(2025, 10, 2)),
        task("someone-else", date(2025, 10, 1), email="priya@x.com"),
    ]
    assert kpi_counts(tasks, EMAIL, as_of) == KpiCounts(overdue=1, due_today=1, pending_total=3)
    assert kpi_counts(tasks, None, as_of) == KpiCounts(0, 0, 0)

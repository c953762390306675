"""Core value records shared by the MIS engine modules."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class TaskRecord:
    """One row of the task feed. Absent dates are ``None``."""

    task_id: str
    description: str
    employee_name: str
    employee_email: str
    planned_date: Optional[date] = None
    actual_date: Optional[date] = None
    step_code: str = ""
    system_type: str = ""
    status: str = ""
    form_link: str = ""
    avatar_url: Optional[str] = None

    @property
    def is_done(self) -> bool:
        return self.actual_date is not None


@dataclass(frozen=True)
class AttendanceRecord:
    """Weekly attendance count keyed by a free-text name."""

    employee_name: str
    present_days: float


@dataclass(frozen=True)
class Employee:
    email: str
    name: str
    avatar_url: str = ""


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    def __contains__(self, value: Optional[date]) -> bool:
        return value is not None and self.start <= value <= self.end


@dataclass(frozen=True)
class KpiMetric:
    base: int
    met: int
    performance: float


@dataclass(frozen=True)
class MISStats:
    plan_vs_actual: KpiMetric
    on_time: KpiMetric
    date_range: DateRange


@dataclass(frozen=True)
class KpiCounts:
    overdue: int
    due_today: int
    pending_total: int


@dataclass(frozen=True)
class AttendanceStats:
    total_working_days: int
    present_days: float
    attendance_percentage: int
    date_range: Optional[DateRange] = None


@dataclass(frozen=True)
class HistoricalDataPoint:
    period: str
    completion_rate: int
    on_time_rate: int


@dataclass(frozen=True)
class TeamPerformanceSummary:
    needs_attention: tuple[Employee, ...] = field(default_factory=tuple)
    on_track: tuple[Employee, ...] = field(default_factory=tuple)

"""Working-day calendar and canonical reporting ranges."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

import numpy as np

from mis_engine.dates import parse_date
from mis_engine.schema import DateRange

logger = logging.getLogger(__name__)

# A reporting week runs Monday through Friday.
WORK_WEEK_DAYS = 5

DEFAULT_HOLIDAYS = (
    "26/01/2025",  # Republic Day
    "26/02/2025",  # Maha Shivratri
    "14/03/2025",  # Holi
    "31/03/2025",  # Id-ul Fitr
    "18/04/2025",  # Good Friday
    "15/08/2025",  # Independence Day
    "01/10/2025",  # Dussehra
    "02/10/2025",  # Gandhi Jayanti
    "20/10/2025",  # Diwali
    "25/12/2025",  # Christmas
)


@dataclass(frozen=True)
class HolidayCalendar:
    """Read-only set of non-working calendar dates."""

    holidays: frozenset[date] = field(default_factory=frozenset)

    def __post_init__(self):
        normalized = frozenset(value.date() if isinstance(value, datetime) else value for value in self.holidays)
        object.__setattr__(self, "holidays", normalized)

    @classmethod
    def from_dates(cls, dates: Iterable[date]) -> HolidayCalendar:
        """Build a calendar from dates; datetimes keep only their date part."""

        return cls(frozenset(dates))

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> HolidayCalendar:
        """Build a calendar from ``DD/MM/YYYY`` strings."""

        parsed = []
        for value in values:
            holiday = parse_date(value)
            if holiday is None:
                raise ValueError(f"Invalid holiday date '{value}', expected DD/MM/YYYY")
            parsed.append(holiday)
        return cls(frozenset(parsed))

    @classmethod
    def default(cls) -> HolidayCalendar:
        return cls.from_strings(DEFAULT_HOLIDAYS)

    def merge(self, other: HolidayCalendar) -> HolidayCalendar:
        return HolidayCalendar(self.holidays | other.holidays)

    def is_holiday(self, value: date) -> bool:
        return value in self.holidays

    def is_working_day(self, value: date) -> bool:
        return value.weekday() < 5 and not self.is_holiday(value)


def week_range(reference_date: date, weeks_back: int = 1) -> DateRange:
    """Monday..Friday of the week ``weeks_back`` weeks before ``reference_date``'s week."""

    current_monday = reference_date - timedelta(days=reference_date.weekday())
    start = current_monday - timedelta(weeks=weeks_back)
    return DateRange(start, start + timedelta(days=WORK_WEEK_DAYS - 1))


def month_range(year: int, month: int) -> DateRange:
    """First through last calendar day of ``month``."""

    _, last_day = calendar.monthrange(year, month)
    return DateRange(date(year, month, 1), date(year, month, last_day))


def year_range(year: int) -> DateRange:
    """January 1st through December 31st of ``year``."""

    return DateRange(date(year, 1, 1), date(year, 12, 31))


def working_days(date_range: DateRange, holidays: Optional[HolidayCalendar] = None) -> int:
    """Count weekdays in the inclusive range that are not configured holidays."""

    if date_range.end < date_range.start:
        return 0

    holiday_list = sorted(holidays.holidays) if holidays else []
    count = np.busday_count(
        date_range.start,
        date_range.end + timedelta(days=1),
        holidays=holiday_list,
    )
    logger.debug("working_days %s..%s -> %d", date_range.start, date_range.end, count)
    return int(count)

"""Date parsing and formatting helpers for feed values."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from mis_engine.schema import TaskRecord

_DMY_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_GVIZ_PATTERN = re.compile(r"Date\((\d+),(\d+),(\d+)")
_MDY_PREFIX_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})")


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(text: Optional[str]) -> Optional[date]:
    """Parse a ``DD/MM/YYYY`` string, returning ``None`` for anything else."""

    if not text:
        return None
    match = _DMY_PATTERN.match(text.strip())
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    return _safe_date(year, month, day)


def parse_datetime(text: Optional[str]) -> Optional[date]:
    """Parse a sheet timestamp, keeping only the date part.

    Two shapes are understood: the Google Visualization ``Date(Y,M,D,...)``
    literal, whose month is zero-based, and a ``MM/DD/YYYY ...`` timestamp.
    """

    if not text:
        return None
    text = text.strip()

    gviz = _GVIZ_PATTERN.search(text)
    if gviz:
        year, month, day = (int(part) for part in gviz.groups())
        return _safe_date(year, month + 1, day)

    mdy = _MDY_PREFIX_PATTERN.match(text)
    if mdy:
        month, day, year = (int(part) for part in mdy.groups())
        return _safe_date(year, month, day)

    return None


def coerce_date(value: Any) -> Optional[date]:
    """Turn a feed cell into a calendar date or ``None``."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value) or parse_datetime(value)
    return None


def delay_in_days(task: TaskRecord) -> Optional[int]:
    """Days between planned and actual completion; 0 when on time or early."""

    if task.planned_date is None or task.actual_date is None:
        return None
    return max(0, (task.actual_date - task.planned_date).days)


def format_date_short(value: Optional[date]) -> str:
    """Format as ``DD/MM``; empty string for an absent date."""

    if value is None:
        return ""
    return value.strftime("%d/%m")

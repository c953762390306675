"""Reconcile free-text names to canonical, email-keyed employees."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from mis_engine.schema import Employee, TaskRecord

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return name.strip().lower()


def build_directory(tasks: Iterable[TaskRecord]) -> list[Employee]:
    """Derive the employee directory from the task feed.

    The first observed name and avatar win for each email; the result is
    sorted by name.
    """

    by_email: dict[str, Employee] = {}
    for task in tasks:
        if not task.employee_email or not task.employee_name:
            continue
        if task.employee_email in by_email:
            continue
        by_email[task.employee_email] = Employee(
            email=task.employee_email,
            name=task.employee_name,
            avatar_url=task.avatar_url or "",
        )
    return sorted(by_email.values(), key=lambda employee: _normalize(employee.name))


def match_employee(name: Optional[str], directory: Sequence[Employee]) -> Optional[Employee]:
    """Resolve ``name`` to a directory entry.

    An exact case-insensitive match wins. Otherwise the query must be a
    substring of exactly one directory name; zero or several candidates give
    no match rather than a guess.
    """

    if not name or not directory:
        return None

    query = _normalize(name)
    if not query:
        return None

    for employee in directory:
        if _normalize(employee.name) == query:
            return employee

    partial = [employee for employee in directory if query in _normalize(employee.name)]
    if len(partial) == 1:
        return partial[0]

    if partial:
        logger.debug("ambiguous name %r matches %d employees", name, len(partial))
    return None

from datetime import date

from mis_engine.matching import build_directory, match_employee
from mis_engine.schema import Employee, TaskRecord

KUMAR = Employee("sahil@x.com", "Sahil Kumar")
SHARMA = Employee("sharma@x.com", "Sahil Sharma")
PRIYA = Employee("priya@x.com", "Priya N")


def test_ambiguous_partial_match_returns_none():
    assert match_employee("Sahil", [KUMAR, SHARMA]) is None


def test_exact_match_wins():
    assert match_employee("Sahil Kumar", [KUMAR, SHARMA]) == KUMAR
    assert match_employee("  sahil kumar ", [KUMAR, SHARMA]) == KUMAR


def test_unique_partial_match():
    assert match_employee("priya", [PRIYA]) == PRIYA
    assert match_employee("Sharma", [KUMAR, SHARMA, PRIYA]) == SHARMA


def test_no_match_cases():
    assert match_employee("Rahul", [KUMAR, PRIYA]) is None
    assert match_employee("", [KUMAR]) is None
    assert match_employee("   ", [KUMAR]) is None
    assert match_employee("Sahil Kumar", []) is None


def test_build_directory_keeps_first_observation_sorted_by_name():
    tasks = [
        TaskRecord("1", "a", "zoya", "zoya@x.com", date(2025, 1, 1), avatar_url="z.png"),
        TaskRecord("2", "b", "Arjun", "arjun@x.com"),
        TaskRecord("3", "c", "Zoya Renamed", "zoya@x.com", avatar_url="other.png"),
        TaskRecord("4", "d", "", "ghost@x.com"),
        TaskRecord("5", "e", "No Email", ""),
    ]
    directory = build_directory(tasks)
    assert directory == [
        Employee("arjun@x.com", "Arjun", ""),
        Employee("zoya@x.com", "zoya", "z.png"),
    ]

from datetime import date, timedelta
from types import SimpleNamespace

from app.services.immunization_schedule import (
    OVERDUE,
    SCHEDULED,
    UPCOMING,
    days_overdue,
    days_until_due,
    due_state,
    is_overdue,
    is_upcoming,
    split_by_due_state,
)

TODAY = date(2025, 9, 1)


def test_past_due_date_is_overdue():
    due = TODAY - timedelta(days=5)
    assert is_overdue(due, TODAY)
    assert days_overdue(due, TODAY) == 5
    assert not is_upcoming(due, 30, TODAY)
    assert due_state(due, 30, TODAY) == OVERDUE


def test_due_date_inside_window_is_upcoming():
    due = TODAY + timedelta(days=10)
    assert is_upcoming(due, 30, TODAY)
    assert days_until_due(due, TODAY) == 10
    assert not is_overdue(due, TODAY)
    assert due_state(due, 30, TODAY) == UPCOMING


def test_window_bounds_are_inclusive():
    assert is_upcoming(TODAY, 30, TODAY)
    assert is_upcoming(TODAY + timedelta(days=30), 30, TODAY)
    assert not is_upcoming(TODAY + timedelta(days=31), 30, TODAY)
    assert due_state(TODAY + timedelta(days=31), 30, TODAY) == SCHEDULED


def test_due_today_is_not_overdue():
    assert not is_overdue(TODAY, TODAY)


def test_no_due_date_is_inert():
    assert due_state(None, 30, TODAY) is None
    assert not is_overdue(None, TODAY)
    assert not is_upcoming(None, 30, TODAY)
    assert days_until_due(None, TODAY) is None


def test_split_by_due_state_sorts_and_excludes():
    records = [
        SimpleNamespace(id=1, next_due_date=TODAY + timedelta(days=20)),
        SimpleNamespace(id=2, next_due_date=TODAY - timedelta(days=1)),
        SimpleNamespace(id=3, next_due_date=None),
        SimpleNamespace(id=4, next_due_date=TODAY + timedelta(days=3)),
        SimpleNamespace(id=5, next_due_date=TODAY - timedelta(days=9)),
        SimpleNamespace(id=6, next_due_date=TODAY + timedelta(days=90)),
    ]
    upcoming, overdue = split_by_due_state(records, 30, TODAY)
    assert [r.id for r in upcoming] == [4, 1]
    assert [r.id for r in overdue] == [5, 2]

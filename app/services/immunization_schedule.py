"""Due-date rules for immunization follow-ups.

"Upcoming" and "overdue" are never stored; they are recomputed against the
current date every time a record is read.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple, TypeVar

DEFAULT_UPCOMING_DAYS = 30

OVERDUE = "overdue"
UPCOMING = "upcoming"
SCHEDULED = "scheduled"

T = TypeVar("T")


def upcoming_window(days_ahead: int = DEFAULT_UPCOMING_DAYS, today: Optional[date] = None) -> Tuple[date, date]:
    """Inclusive [today, today + days_ahead] window."""
    today = today or date.today()
    return today, today + timedelta(days=days_ahead)


def days_until_due(next_due_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if next_due_date is None:
        return None
    return (next_due_date - (today or date.today())).days


def days_overdue(next_due_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if next_due_date is None:
        return None
    return ((today or date.today()) - next_due_date).days


def is_overdue(next_due_date: Optional[date], today: Optional[date] = None) -> bool:
    return next_due_date is not None and next_due_date < (today or date.today())


def is_upcoming(
    next_due_date: Optional[date],
    days_ahead: int = DEFAULT_UPCOMING_DAYS,
    today: Optional[date] = None,
) -> bool:
    if next_due_date is None:
        return False
    start, end = upcoming_window(days_ahead, today)
    return start <= next_due_date <= end


def due_state(
    next_due_date: Optional[date],
    days_ahead: int = DEFAULT_UPCOMING_DAYS,
    today: Optional[date] = None,
) -> Optional[str]:
    """Classify a follow-up date.

    Returns 'overdue', 'upcoming', 'scheduled' (due after the window) or None
    for a one-off dose with no follow-up.
    """
    if next_due_date is None:
        return None
    if is_overdue(next_due_date, today):
        return OVERDUE
    if is_upcoming(next_due_date, days_ahead, today):
        return UPCOMING
    return SCHEDULED


def split_by_due_state(
    records: Iterable[T],
    days_ahead: int = DEFAULT_UPCOMING_DAYS,
    today: Optional[date] = None,
) -> Tuple[List[T], List[T]]:
    """Split already-fetched records (anything with `next_due_date`) into
    (upcoming, overdue), each sorted by due date ascending.
    """
    upcoming: List[T] = []
    overdue: List[T] = []
    for record in records:
        state = due_state(record.next_due_date, days_ahead, today)
        if state == UPCOMING:
            upcoming.append(record)
        elif state == OVERDUE:
            overdue.append(record)
    upcoming.sort(key=lambda r: r.next_due_date)
    overdue.sort(key=lambda r: r.next_due_date)
    return upcoming, overdue

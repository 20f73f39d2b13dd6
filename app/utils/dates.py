"""Calendar-date helpers shared by the child profile, report and dashboard views.

All arithmetic is whole-day; there is no time-of-day or timezone anywhere.
"""

from datetime import date
from typing import Optional


def calculate_age_in_months(dob: date, today: Optional[date] = None) -> int:
    """Age in completed months (whole years * 12 + remaining whole months)."""
    today = today or date.today()
    months = (today.year - dob.year) * 12 + (today.month - dob.month)
    if today.day < dob.day:
        months -= 1
    return max(months, 0)


def format_age(dob: date, today: Optional[date] = None) -> str:
    """Human readable age, e.g. "2 years 3 months", "5 months" or "1 year"."""
    months = calculate_age_in_months(dob, today)
    years, months = divmod(months, 12)

    def _plural(count: int, unit: str) -> str:
        return f"{count} {unit}" + ("s" if count != 1 else "")

    if years == 0:
        return _plural(months, "month")
    if months == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(months, 'month')}"

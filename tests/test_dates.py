from datetime import date

from app.utils.dates import calculate_age_in_months, format_age


def test_age_counts_completed_months():
    assert calculate_age_in_months(date(2023, 1, 15), date(2025, 4, 15)) == 27
    assert calculate_age_in_months(date(2023, 1, 15), date(2025, 4, 14)) == 26


def test_age_is_never_negative():
    assert calculate_age_in_months(date(2025, 5, 1), date(2025, 4, 1)) == 0


def test_format_age():
    today = date(2025, 6, 1)
    assert format_age(date(2023, 3, 1), today) == "2 years 3 months"
    assert format_age(date(2025, 1, 1), today) == "5 months"
    assert format_age(date(2024, 6, 1), today) == "1 year"
    assert format_age(date(2024, 5, 1), today) == "1 year 1 month"

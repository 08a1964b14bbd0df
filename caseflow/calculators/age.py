"""Age calculation from ISO date-of-birth strings."""

from __future__ import annotations

from datetime import date, datetime


def parse_birth_date(value: str | date | None) -> date | None:
    """Parse an ISO date (or datetime) string. Returns None when unreadable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def calculate_age(date_of_birth: str | date | None, today: date | None = None) -> int:
    """Whole years between date_of_birth and today.

    One year is subtracted when this year's birthday has not happened yet.
    Missing, unparseable or future dates give 0.
    """
    birthdate = parse_birth_date(date_of_birth)
    if birthdate is None:
        return 0

    today = today or date.today()
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return max(age, 0)

from __future__ import annotations

import datetime as dt


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        next_month = dt.date(year + 1, 1, 1)
    else:
        next_month = dt.date(year, month + 1, 1)
    return (next_month - dt.date(year, month, 1)).days


def clamp_day(year: int, month: int, day: int) -> dt.date:
    """Date for ``day`` in the given month, using the last day when the month is too short."""
    return dt.date(year, month, min(day, days_in_month(year, month)))


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    total_months = month - 1 + months
    return year + total_months // 12, total_months % 12 + 1


def previous_occurrence(day: int, reference: dt.date) -> dt.date:
    """Latest date on or before ``reference`` falling on ``day`` (clamped)."""
    candidate = clamp_day(reference.year, reference.month, day)
    if candidate > reference:
        year, month = _shift_month(reference.year, reference.month, -1)
        candidate = clamp_day(year, month, day)
    return candidate


def next_occurrence(day: int, reference: dt.date) -> dt.date:
    """Earliest date strictly after ``reference`` falling on ``day`` (clamped)."""
    candidate = clamp_day(reference.year, reference.month, day)
    if candidate <= reference:
        year, month = _shift_month(reference.year, reference.month, 1)
        candidate = clamp_day(year, month, day)
    return candidate

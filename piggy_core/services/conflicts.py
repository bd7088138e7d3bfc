from __future__ import annotations

from typing import Iterable, List, Optional

from piggy_core.domain.models import MonthlyTransaction


def same_cause(records: Iterable[MonthlyTransaction], cause: str) -> List[MonthlyTransaction]:
    return [r for r in records if r.cause == cause]


def conflicts(a: MonthlyTransaction, b: MonthlyTransaction) -> bool:
    """
    Whether two monthly transactions sharing a cause have overlapping active periods.
    An absent end date means the period is open-ended. Records with different
    causes never conflict; callers normally group with ``same_cause`` first.
    """
    if a.cause != b.cause:
        return False

    a_starts_in_time = b.end_date is None or a.start_date <= b.end_date
    b_starts_in_time = a.end_date is None or b.start_date <= a.end_date
    return a_starts_in_time and b_starts_in_time


def find_conflict(
    records: Iterable[MonthlyTransaction], candidate: MonthlyTransaction
) -> Optional[MonthlyTransaction]:
    for existing in same_cause(records, candidate.cause):
        if existing is candidate:
            continue
        if conflicts(candidate, existing):
            return existing
    return None

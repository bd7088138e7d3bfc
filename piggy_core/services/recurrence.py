from __future__ import annotations

import datetime as dt
from typing import List

import pandas as pd

from piggy_core.domain.models import MonthlyTransaction, Transaction
from piggy_core.services.calendar import clamp_day


def expand(record: MonthlyTransaction, up_to: dt.date) -> List[Transaction]:
    """
    Concrete instances of a monthly transaction realized on or before ``up_to``:
    - One per calendar month from the start month to the last month in range.
    - Dated on ``record.day``, clamped to the month length.
    - Kept only inside [start_date, min(up_to, end_date)].
    """
    last = up_to if record.end_date is None else min(up_to, record.end_date)
    if record.start_date > last:
        return []

    instances: List[Transaction] = []
    months = pd.period_range(
        start=pd.Period(record.start_date, freq="M"),
        end=pd.Period(last, freq="M"),
        freq="M",
    )
    for period in months:
        when = clamp_day(period.year, period.month, record.day)
        if record.start_date <= when <= last:
            instances.append(Transaction(amount=record.amount, cause=record.cause, date=when))
    return instances

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import List, Optional

from piggy_core.domain.models import ActivityEntry, EntryKind, MarkerState, PiggyBank, Transaction
from piggy_core.services import recurrence
from piggy_core.services.calendar import next_occurrence, previous_occurrence


def transactions_up_to(bank: PiggyBank, date: dt.date) -> List[Transaction]:
    """
    Point transactions dated on or before ``date`` plus every monthly
    transaction expanded up to ``date``, ascending by date.
    """
    instances = [t for t in bank.transactions if t.date <= date]
    for monthly in bank.monthly_transactions:
        instances.extend(recurrence.expand(monthly, date))
    # sorted() is stable: point transactions stay ahead of expanded instances on ties
    return sorted(instances, key=lambda t: t.date)


def balance_as_of(bank: PiggyBank, date: dt.date) -> Decimal:
    return sum((t.amount for t in transactions_up_to(bank, date)), start=Decimal("0"))


class TodayMarker:
    """
    Two-state scan helper placing the "today" marker in a date-ordered walk.

    The marker is due before the first instance dated after ``today``. An
    instance dated exactly ``today`` takes its place, and ``finish`` emits it
    when the walk ends while still pending.
    """

    def __init__(self, today: dt.date) -> None:
        self.today = today
        self.state = MarkerState.PENDING

    def observe(self, instance_date: dt.date, balance: Decimal) -> Optional[ActivityEntry]:
        if self.state is MarkerState.EMITTED:
            return None
        if instance_date == self.today:
            self.state = MarkerState.EMITTED
            return None
        if instance_date > self.today:
            self.state = MarkerState.EMITTED
            return self._entry(balance)
        return None

    def finish(self, balance: Decimal) -> Optional[ActivityEntry]:
        if self.state is MarkerState.EMITTED:
            return None
        self.state = MarkerState.EMITTED
        return self._entry(balance)

    def _entry(self, balance: Decimal) -> ActivityEntry:
        return ActivityEntry(date=self.today, balance=balance, kind=EntryKind.MARKER)


def period_activity(bank: PiggyBank, date: dt.date) -> List[ActivityEntry]:
    """Activity of the pay period containing ``date`` with running balances."""
    prev_payday = previous_occurrence(bank.config.payday, date)
    next_payday = next_occurrence(bank.config.payday, date)

    instances = transactions_up_to(bank, next_payday)
    working_balance = sum(
        (t.amount for t in instances if t.date < prev_payday), start=Decimal("0")
    )

    marker = TodayMarker(date)
    entries: List[ActivityEntry] = []
    for transaction in instances:
        if transaction.date < prev_payday:
            continue
        marker_entry = marker.observe(transaction.date, working_balance)
        if marker_entry is not None:
            entries.append(marker_entry)

        working_balance += transaction.amount
        entries.append(
            ActivityEntry(
                date=transaction.date,
                balance=working_balance,
                amount=transaction.amount,
                cause=transaction.cause,
            )
        )

    marker_entry = marker.finish(working_balance)
    if marker_entry is not None:
        entries.append(marker_entry)
    return entries

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
from decimal import Decimal
from typing import List, Optional

from piggy_core.domain.errors import InvalidInputError


MIN_DAY = 1
MAX_DAY = 31


def check_day(value: int, name: str = "day") -> int:
    if not MIN_DAY <= value <= MAX_DAY:
        raise InvalidInputError(f"{name} must be between {MIN_DAY} and {MAX_DAY}, got {value}")
    return value


def check_decimal_places(value: int) -> int:
    if value < 0:
        raise InvalidInputError(f"decimal places must not be negative, got {value}")
    return value


@dataclasses.dataclass(frozen=True)
class Transaction:
    amount: Decimal
    cause: str
    date: dt.date


@dataclasses.dataclass
class MonthlyTransaction:
    """
    A recurring amount realized once per month on ``day`` (clamped to the
    month length) from ``start_date`` until ``end_date`` inclusive.

    ``end_date`` is the only field that changes after creation and it is set
    at most once, see ``close``.
    """

    amount: Decimal
    cause: str
    day: int
    start_date: dt.date
    end_date: Optional[dt.date] = None

    @property
    def is_active(self) -> bool:
        return self.end_date is None

    def close(self, on: dt.date) -> None:
        if self.end_date is not None:
            raise ValueError(f"Monthly transaction '{self.cause}' already ended on {self.end_date}")
        self.end_date = on


@dataclasses.dataclass
class BankConfig:
    payday: int = 1
    currency: str = "$"
    decimal_places: int = 2


@dataclasses.dataclass
class PiggyBank:
    transactions: List[Transaction] = dataclasses.field(default_factory=list)
    monthly_transactions: List[MonthlyTransaction] = dataclasses.field(default_factory=list)
    config: BankConfig = dataclasses.field(default_factory=BankConfig)

    def sort_transactions(self) -> None:
        self.transactions.sort(key=lambda t: t.date)


class EntryKind(str, enum.Enum):
    TRANSACTION = "transaction"
    MARKER = "marker"


@dataclasses.dataclass(frozen=True)
class ActivityEntry:
    date: dt.date
    balance: Decimal
    amount: Optional[Decimal] = None
    cause: Optional[str] = None
    kind: EntryKind = EntryKind.TRANSACTION

    @property
    def is_marker(self) -> bool:
        return self.kind is EntryKind.MARKER


class MarkerState(enum.Enum):
    PENDING = "pending"
    EMITTED = "emitted"

"""
Ledger mutations. Each action validates everything before touching the bank,
so a rejected action leaves it unchanged. Point transactions are re-sorted
after every successful mutation.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from piggy_core.domain.errors import ConflictError, NotFoundError
from piggy_core.domain.models import (
    MonthlyTransaction,
    PiggyBank,
    Transaction,
    check_day,
    check_decimal_places,
)
from piggy_core.logging_setup import get_logger
from piggy_core.services.aggregator import balance_as_of
from piggy_core.services.conflicts import find_conflict, same_cause


logger = get_logger(__name__)


def add_transaction(
    bank: PiggyBank,
    amount: Decimal,
    cause: str,
    on: dt.date,
    monthly: Optional[int] = None,
) -> PiggyBank:
    if monthly is None:
        bank.transactions.append(Transaction(amount=amount, cause=cause, date=on))
        bank.sort_transactions()
        logger.info("added transaction cause=%s amount=%s date=%s", cause, amount, on)
        return bank

    check_day(monthly, "monthly day")
    candidate = MonthlyTransaction(amount=amount, cause=cause, day=monthly, start_date=on)
    clash = find_conflict(bank.monthly_transactions, candidate)
    if clash is not None:
        raise ConflictError(
            f"Ongoing monthly transaction '{cause}' already exists. "
            "Consider `end`ing it or choosing a different name."
        )

    bank.monthly_transactions.append(candidate)
    bank.sort_transactions()
    logger.info("added monthly transaction cause=%s amount=%s day=%s start=%s", cause, amount, monthly, on)
    return bank


def end_monthly(bank: PiggyBank, name: str, on: dt.date) -> PiggyBank:
    active = [m for m in same_cause(bank.monthly_transactions, name) if m.is_active]
    if not active:
        raise NotFoundError(f"No monthly transaction named '{name}' was found.")

    active[0].close(on)
    bank.sort_transactions()
    logger.info("ended monthly transaction cause=%s on=%s", name, on)
    return bank


def set_balance(bank: PiggyBank, amount: Decimal, cause: str, on: dt.date) -> PiggyBank:
    """Record the difference needed for the balance on ``on`` to equal ``amount``."""
    change = amount - balance_as_of(bank, on)
    return add_transaction(bank, change, cause, on)


def update_config(
    bank: PiggyBank,
    payday: Optional[int] = None,
    currency: Optional[str] = None,
    decimal_places: Optional[int] = None,
) -> PiggyBank:
    if payday is not None:
        check_day(payday, "payday")
    if decimal_places is not None:
        check_decimal_places(decimal_places)

    config = bank.config
    config.payday = config.payday if payday is None else payday
    config.currency = config.currency if currency is None else currency
    config.decimal_places = config.decimal_places if decimal_places is None else decimal_places
    bank.sort_transactions()
    logger.info(
        "config updated payday=%s currency=%s decimal_places=%s",
        config.payday,
        config.currency,
        config.decimal_places,
    )
    return bank

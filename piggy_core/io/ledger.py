from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from piggy_core.domain.errors import LedgerFileError
from piggy_core.domain.models import (
    BankConfig,
    MonthlyTransaction,
    PiggyBank,
    Transaction,
    check_day,
    check_decimal_places,
)
from piggy_core.logging_setup import get_logger


logger = get_logger(__name__)


def load_ledger(path: str | Path) -> PiggyBank:
    """Read the ledger file, writing a default one first when it does not exist."""
    path = Path(path)
    if not path.exists():
        logger.info("ledger %s not found, creating an empty one", path)
        save_ledger(path, PiggyBank())

    data = _read_yaml(path)
    try:
        bank = _bank_from_dict(data)
    except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
        raise LedgerFileError(f"Failed to parse file {path}: {exc}") from exc
    logger.debug(
        "loaded ledger %s transactions=%d monthly=%d",
        path,
        len(bank.transactions),
        len(bank.monthly_transactions),
    )
    return bank


def save_ledger(path: str | Path, bank: PiggyBank) -> None:
    path = Path(path)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with temp_path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(_bank_to_dict(bank), f, sort_keys=False)
        temp_path.replace(path)
    except OSError as exc:
        raise LedgerFileError(f"Failed to write file {path}") from exc
    logger.debug("saved ledger %s", path)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise LedgerFileError(f"Failed to open {path}") from exc
    except (yaml.YAMLError, ValueError) as exc:
        raise LedgerFileError(f"Failed to parse file {path}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LedgerFileError(f"Expected a mapping at the top of {path}")
    return data


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _to_date(value: Any) -> dt.date:
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value))


def _optional_date(value: Any) -> Optional[dt.date]:
    return None if value is None else _to_date(value)


def _bank_from_dict(data: Dict[str, Any]) -> PiggyBank:
    transactions: List[Transaction] = [
        Transaction(
            amount=_to_decimal(item["amount"]),
            cause=str(item["cause"]),
            date=_to_date(item["date"]),
        )
        for item in data.get("transactions") or []
    ]
    monthly: List[MonthlyTransaction] = [
        MonthlyTransaction(
            amount=_to_decimal(item["amount"]),
            cause=str(item["cause"]),
            day=check_day(int(item["day"])),
            start_date=_to_date(item["start_date"]),
            end_date=_optional_date(item.get("end_date")),
        )
        for item in data.get("monthly_transactions") or []
    ]
    cfg = data.get("config") or {}
    defaults = BankConfig()
    config = BankConfig(
        payday=check_day(int(cfg.get("payday", defaults.payday)), "payday"),
        currency=str(cfg.get("currency", defaults.currency)),
        decimal_places=check_decimal_places(int(cfg.get("decimal_places", defaults.decimal_places))),
    )
    return PiggyBank(transactions=transactions, monthly_transactions=monthly, config=config)


def _bank_to_dict(bank: PiggyBank) -> Dict[str, Any]:
    return {
        "transactions": [
            {"amount": float(t.amount), "cause": t.cause, "date": t.date.isoformat()}
            for t in bank.transactions
        ],
        "monthly_transactions": [
            {
                "amount": float(m.amount),
                "cause": m.cause,
                "day": m.day,
                "start_date": m.start_date.isoformat(),
                "end_date": m.end_date.isoformat() if m.end_date else None,
            }
            for m in bank.monthly_transactions
        ],
        "config": {
            "payday": bank.config.payday,
            "currency": bank.config.currency,
            "decimal_places": bank.config.decimal_places,
        },
    }

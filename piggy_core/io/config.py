from __future__ import annotations

import datetime as dt
import os
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import Optional

from piggy_core.domain.errors import InvalidInputError, MalformedDateError


TODAY = "today"
LEDGER_FILENAME = ".piggy"


class Settings:
    def __init__(self, ledger_file: Optional[Path], log_level: str) -> None:
        self.ledger_file = ledger_file
        self.log_level = log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    ledger_file = os.getenv("PIGGY_FILE")
    return Settings(
        ledger_file=Path(ledger_file).expanduser() if ledger_file else None,
        log_level=os.getenv("PIGGY_LOG_LEVEL", "WARNING"),
    )


def resolve_ledger_path(explicit: str | Path | None = None, *, cwd: Optional[Path] = None) -> Path:
    """
    Ledger file lookup order: explicit path, ``PIGGY_FILE``, ``./.piggy`` when
    it exists, then ``~/.piggy``.
    """
    if explicit:
        return Path(explicit).expanduser()
    settings = get_settings()
    if settings.ledger_file is not None:
        return settings.ledger_file
    here = (cwd or Path.cwd()) / LEDGER_FILENAME
    if here.exists():
        return here
    return Path.home() / LEDGER_FILENAME


def parse_date(raw: str, *, today: Optional[dt.date] = None) -> dt.date:
    """Accepts ISO ``YYYY-MM-DD`` or the ``today`` keyword."""
    txt = raw.strip()
    if txt.lower() == TODAY:
        return today or dt.date.today()
    try:
        return dt.date.fromisoformat(txt)
    except ValueError as exc:
        raise MalformedDateError(f"Invalid date '{raw}'. Expected YYYY-MM-DD or '{TODAY}'.") from exc


def parse_amount(raw: str) -> Decimal:
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise InvalidInputError(f"Amount must be a number, got '{raw}'") from exc
    if not amount.is_finite():
        raise InvalidInputError(f"Amount must be a finite number, got '{raw}'")
    return amount

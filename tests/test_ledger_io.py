import datetime as dt
from decimal import Decimal
from pathlib import Path

import pytest

from piggy_core.domain.errors import InvalidInputError, LedgerFileError, MalformedDateError
from piggy_core.domain.models import (
    BankConfig,
    MonthlyTransaction,
    PiggyBank,
    Transaction,
    check_day,
    check_decimal_places,
)
from piggy_core.io.config import parse_amount, parse_date, resolve_ledger_path
from piggy_core.io.ledger import load_ledger, save_ledger


def test_load_creates_default_ledger(tmp_path: Path):
    path = tmp_path / ".piggy"
    bank = load_ledger(path)
    assert path.exists()
    assert bank == PiggyBank()


def test_save_then_load_preserves_ledger(tmp_path: Path):
    path = tmp_path / "ledger.yaml"
    bank = PiggyBank(
        transactions=[Transaction(amount=Decimal("12.5"), cause="gift", date=dt.date(2020, 1, 5))],
        monthly_transactions=[
            MonthlyTransaction(
                amount=Decimal("-20"),
                cause="coffee",
                day=31,
                start_date=dt.date(2020, 1, 1),
                end_date=dt.date(2020, 6, 30),
            )
        ],
        config=BankConfig(payday=25, currency="£", decimal_places=1),
    )
    save_ledger(path, bank)
    assert load_ledger(path) == bank
    assert not (tmp_path / "ledger.yaml.tmp").exists()


def test_load_accepts_unquoted_yaml_dates(tmp_path: Path):
    path = tmp_path / ".piggy"
    path.write_text(
        "transactions:\n"
        "- amount: 100.0\n"
        "  cause: gift\n"
        "  date: 2020-01-05\n"
        "monthly_transactions: []\n"
        "config:\n"
        "  payday: 15\n"
        "  currency: $\n"
        "  decimal_places: 2\n"
    )
    bank = load_ledger(path)
    assert bank.transactions[0].date == dt.date(2020, 1, 5)
    assert bank.transactions[0].amount == Decimal("100.0")
    assert bank.config.payday == 15


def test_load_rejects_malformed_file(tmp_path: Path):
    path = tmp_path / ".piggy"
    path.write_text("transactions: [ {amount: 1\n")
    with pytest.raises(LedgerFileError):
        load_ledger(path)

    path.write_text("transactions:\n- cause: missing amount\n")
    with pytest.raises(LedgerFileError):
        load_ledger(path)


@pytest.mark.parametrize(
    "config_yaml, monthly_yaml",
    [
        ("{payday: 0}", "[]"),
        ("{payday: 45}", "[]"),
        ("{decimal_places: -1}", "[]"),
        ("{}", "[{amount: -5, cause: gym, day: 0, start_date: '2020-01-01'}]"),
    ],
)
def test_load_rejects_out_of_range_days_and_decimals(tmp_path: Path, config_yaml: str, monthly_yaml: str):
    path = tmp_path / ".piggy"
    path.write_text(f"transactions: []\nmonthly_transactions: {monthly_yaml}\nconfig: {config_yaml}\n")
    with pytest.raises(LedgerFileError):
        load_ledger(path)


def test_load_rejects_impossible_unquoted_date(tmp_path: Path):
    path = tmp_path / ".piggy"
    path.write_text("transactions:\n- {amount: 1, cause: x, date: 2020-02-30}\n")
    with pytest.raises(LedgerFileError):
        load_ledger(path)


def test_saved_amounts_keep_cents(tmp_path: Path):
    path = tmp_path / ".piggy"
    amounts = [Decimal("1234567.89"), Decimal("-0.01"), Decimal("19.99")]
    bank = PiggyBank(
        transactions=[Transaction(amount=a, cause="x", date=dt.date(2020, 1, 1)) for a in amounts]
    )
    save_ledger(path, bank)
    assert [t.amount for t in load_ledger(path).transactions] == amounts


def test_parse_date_resolves_today_keyword():
    assert parse_date("today", today=dt.date(2021, 3, 4)) == dt.date(2021, 3, 4)
    assert parse_date(" 2020-02-29 ") == dt.date(2020, 2, 29)
    with pytest.raises(MalformedDateError):
        parse_date("2021-02-30")
    with pytest.raises(MalformedDateError):
        parse_date("yesterday")


def test_parse_amount_and_range_checks():
    assert parse_amount("12.30") == Decimal("12.30")
    with pytest.raises(InvalidInputError):
        parse_amount("twelve")
    with pytest.raises(InvalidInputError):
        parse_amount("NaN")
    assert check_day(31) == 31
    with pytest.raises(InvalidInputError):
        check_day(0)
    assert check_decimal_places(0) == 0
    with pytest.raises(InvalidInputError):
        check_decimal_places(-1)


def test_resolve_ledger_path_order(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    from piggy_core.io.config import get_settings

    explicit = tmp_path / "explicit.piggy"
    assert resolve_ledger_path(explicit) == explicit

    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    assert resolve_ledger_path(cwd=tmp_path) == tmp_path / "home" / ".piggy"

    (tmp_path / ".piggy").write_text("")
    assert resolve_ledger_path(cwd=tmp_path) == tmp_path / ".piggy"

    monkeypatch.setenv("PIGGY_FILE", str(tmp_path / "env.piggy"))
    get_settings.cache_clear()
    assert resolve_ledger_path(cwd=tmp_path) == tmp_path / "env.piggy"

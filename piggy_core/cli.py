from __future__ import annotations

import dataclasses
import datetime as dt
from decimal import Decimal
from pathlib import Path
from typing import Callable, NoReturn, Optional

import typer
from rich.console import Console
from rich.text import Text

from piggy_core.domain.errors import (
    ConflictError,
    InvalidInputError,
    LedgerFileError,
    MalformedDateError,
    NotFoundError,
)
from piggy_core.domain.models import ActivityEntry, BankConfig, PiggyBank
from piggy_core.io import config as config_io
from piggy_core.io import ledger as ledger_io
from piggy_core.logging_setup import configure_logging, get_logger
from piggy_core.services import actions, aggregator

app = typer.Typer(help="Piggy bank CLI for tracking a running balance.")
logger = get_logger(__name__)

WHITE = "bright_white"
GREY = "bright_black"
RED = "bright_red"
GREEN = "bright_green"
BLUE = "bright_blue"


@dataclasses.dataclass
class _Session:
    path: Path
    bank: PiggyBank


def _console() -> Console:
    return Console(highlight=False)


def _err_console() -> Console:
    return Console(stderr=True, highlight=False)


def _today() -> dt.date:
    return dt.date.today()


def _date(raw: str) -> dt.date:
    try:
        return config_io.parse_date(raw, today=_today())
    except MalformedDateError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _amount(raw: str) -> Decimal:
    try:
        return config_io.parse_amount(raw)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _fail(message: str) -> NoReturn:
    _err_console().print(Text(message, style=RED), soft_wrap=True)
    raise typer.Exit(code=1)


def _apply(ctx: typer.Context, action: Callable[..., PiggyBank], *args, **kwargs) -> None:
    session: _Session = ctx.obj
    try:
        session.bank = action(session.bank, *args, **kwargs)
    except (ConflictError, NotFoundError, InvalidInputError) as exc:
        logger.info("action %s rejected: %s", action.__name__, exc)
        _fail(str(exc))
    try:
        ledger_io.save_ledger(session.path, session.bank)
    except LedgerFileError as exc:
        _fail(str(exc))


# -------------------------------
# Rendering
# -------------------------------


def _format_money(amount: Decimal, config: BankConfig, pos_sign: str) -> Text:
    if amount < 0:
        style, sign, value = RED, "-", -amount
    else:
        style, sign, value = GREEN, pos_sign, amount
    text = f"{sign}{config.currency}{value:.{config.decimal_places}f}"
    return Text(f"{text:>10}", style=style)


def _date_style(when: dt.date, today: dt.date) -> str:
    if when < today:
        return WHITE
    if when > today:
        return GREY
    return BLUE


def _activity_line(entry: ActivityEntry, config: BankConfig, today: dt.date) -> Text:
    if entry.is_marker:
        return Text.assemble(
            (entry.date.isoformat(), BLUE),
            ":" + " " * 15,
            _format_money(entry.balance, config, " "),
        )
    return Text.assemble(
        (entry.date.isoformat(), _date_style(entry.date, today)),
        ": ",
        _format_money(entry.amount, config, "+"),
        " -> ",
        _format_money(entry.balance, config, " "),
        " - ",
        entry.cause or "",
    )


def _report(bank: PiggyBank, date: dt.date) -> None:
    console = _console()
    config = bank.config
    for entry in aggregator.period_activity(bank, date):
        console.print(_activity_line(entry, config, date), soft_wrap=True)

    balance = aggregator.balance_as_of(bank, date)
    value_style = RED if balance < 0 else GREEN
    console.print(
        Text.assemble(
            ("Balance: ", WHITE),
            (f"{config.currency}{balance:.{config.decimal_places}f}", value_style),
        ),
        soft_wrap=True,
    )


# -------------------------------
# Commands
# -------------------------------


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="The .piggy file to use. Defaults to ./.piggy then ~/.piggy."
    ),
):
    """Show the current pay period and balance, or run a command first."""
    configure_logging()
    path = config_io.resolve_ledger_path(file)
    try:
        bank = ledger_io.load_ledger(path)
    except LedgerFileError as exc:
        _fail(str(exc))
    ctx.obj = _Session(path=path, bank=bank)
    if ctx.invoked_subcommand is None:
        _report(bank, _today())


@app.command()
def add(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="The amount of money to add."),
    cause: str = typer.Argument(..., help="The source of the money."),
    on: str = typer.Option("today", "--on", help="The date the money was added."),
    monthly: Optional[int] = typer.Option(
        None, "--monthly", "-m", min=1, max=31, help="Add this amount of money this day every month."
    ),
):
    """Add some money to the piggy bank."""
    _apply(ctx, actions.add_transaction, _amount(amount), cause, _date(on), monthly)
    _report(ctx.obj.bank, _today())


@app.command()
def spend(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="The amount of money to spend."),
    cause: str = typer.Argument(..., help="The reason for spending the money."),
    on: str = typer.Option("today", "--on", help="The date the money was spent."),
    monthly: Optional[int] = typer.Option(
        None, "--monthly", "-m", min=1, max=31, help="Spend this amount of money this day every month."
    ),
):
    """Spend some money from the piggy bank."""
    _apply(ctx, actions.add_transaction, -_amount(amount), cause, _date(on), monthly)
    _report(ctx.obj.bank, _today())


@app.command()
def end(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The name of the monthly transaction to end."),
    on: str = typer.Argument("today", help="The date to end it on."),
):
    """End a monthly transaction."""
    _apply(ctx, actions.end_monthly, name, _date(on))
    _report(ctx.obj.bank, _today())


@app.command()
def balance(
    ctx: typer.Context,
    on: str = typer.Option("today", "--on", help="The date to check the balance for."),
):
    """Display the balance on a certain date."""
    _report(ctx.obj.bank, _date(on))


@app.command("set-balance")
def set_balance(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="The new balance."),
    cause: str = typer.Argument("Set balance", help="The reason for adjusting the balance."),
    on: str = typer.Option("today", "--on", help="The date to set the balance on."),
):
    """Add or spend enough to set the balance to the given value."""
    _apply(ctx, actions.set_balance, _amount(amount), cause, _date(on))
    _report(ctx.obj.bank, _today())


@app.command()
def config(
    ctx: typer.Context,
    payday: Optional[int] = typer.Option(
        None, "--payday", min=1, max=31, help="Change the day of the month to display transactions between."
    ),
    currency: Optional[str] = typer.Option(None, "--currency", help="Change the currency prefix."),
    decimal: Optional[int] = typer.Option(
        None, "--decimal", min=0, help="The number of decimal places to use for currency."
    ),
):
    """Change various configuration options."""
    _apply(ctx, actions.update_config, payday=payday, currency=currency, decimal_places=decimal)
    _report(ctx.obj.bank, _today())


if __name__ == "__main__":
    app()

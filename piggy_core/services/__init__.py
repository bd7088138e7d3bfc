from piggy_core.services.actions import add_transaction, end_monthly, set_balance, update_config  # noqa: F401
from piggy_core.services.aggregator import balance_as_of, period_activity, transactions_up_to  # noqa: F401
from piggy_core.services.calendar import next_occurrence, previous_occurrence  # noqa: F401
from piggy_core.services.conflicts import conflicts, find_conflict  # noqa: F401
from piggy_core.services.recurrence import expand  # noqa: F401

__all__ = [
    "add_transaction",
    "end_monthly",
    "set_balance",
    "update_config",
    "balance_as_of",
    "period_activity",
    "transactions_up_to",
    "next_occurrence",
    "previous_occurrence",
    "conflicts",
    "find_conflict",
    "expand",
]

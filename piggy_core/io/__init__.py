from piggy_core.io.ledger import load_ledger, save_ledger  # noqa: F401
from piggy_core.io.config import (  # noqa: F401
    get_settings,
    parse_amount,
    parse_date,
    resolve_ledger_path,
)

__all__ = [
    "load_ledger",
    "save_ledger",
    "get_settings",
    "parse_amount",
    "parse_date",
    "resolve_ledger_path",
]

from piggy_core.domain.errors import (  # noqa: F401
    ConflictError,
    InvalidInputError,
    LedgerFileError,
    MalformedDateError,
    NotFoundError,
    PiggyError,
)
from piggy_core.domain.models import (  # noqa: F401
    ActivityEntry,
    BankConfig,
    EntryKind,
    MarkerState,
    MonthlyTransaction,
    PiggyBank,
    Transaction,
)

__all__ = [
    "ActivityEntry",
    "BankConfig",
    "ConflictError",
    "EntryKind",
    "InvalidInputError",
    "LedgerFileError",
    "MalformedDateError",
    "MarkerState",
    "MonthlyTransaction",
    "NotFoundError",
    "PiggyBank",
    "PiggyError",
    "Transaction",
]

"""Exceptions raised by the ledger core and its input/persistence layers."""


class PiggyError(Exception):
    """Base class for every error the piggy bank reports to its caller."""


class ConflictError(PiggyError, ValueError):
    """Raised when a new monthly transaction overlaps one with the same cause."""


class NotFoundError(PiggyError, LookupError):
    """Raised when no active monthly transaction has the requested cause."""


class MalformedDateError(PiggyError, ValueError):
    """Raised when a date input cannot be resolved to a calendar date."""


class InvalidInputError(PiggyError, ValueError):
    """Raised for amounts, days or settings outside their accepted range."""


class LedgerFileError(PiggyError, IOError):
    """Raised when the ledger file cannot be read, parsed or written."""

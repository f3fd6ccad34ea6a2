"""Mini README: Exception hierarchy shared across Fltcli components.

Structure:
    * LedgerError - base class caught by the command loop.
    * StorageDecodeError - storage file is not valid JSON.
    * StorageReadError - storage file exists but cannot be read.
    * RecordDecodeError - a stored record lacks or mistypes a field.
    * TransactionNotFoundError - no record carries the requested id.
    * UnknownFieldError - the record exists but the field cannot be edited.

Decode errors abort the command that triggered the load. Lookup errors are
reported and leave the record set untouched. None of them end the process.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for every error the command loop reports and survives."""


class StorageDecodeError(LedgerError, ValueError):
    """Raised when the storage file cannot be parsed as JSON."""


class StorageReadError(LedgerError, OSError):
    """Raised when an existing storage file cannot be opened for reading."""


class RecordDecodeError(LedgerError, ValueError):
    """Raised when a stored record is missing a field or has the wrong type."""


class TransactionNotFoundError(LedgerError, KeyError):
    """Raised when no transaction matches the requested identifier."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(transaction_id)
        self.transaction_id = transaction_id

    def __str__(self) -> str:
        return f"Transaction {self.transaction_id} not found"


class UnknownFieldError(TransactionNotFoundError):
    """Raised when a modification targets ``id`` or an unrecognised field."""

    def __init__(self, transaction_id: int, field: str, matches: int = 1) -> None:
        super().__init__(transaction_id)
        self.field = field
        self.matches = matches

    def __str__(self) -> str:
        return f"Transaction {self.transaction_id} has no editable field '{self.field}'"

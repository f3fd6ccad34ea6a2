"""Mini README: Ledger operations package for Fltcli.

The ``operations`` module exposes plain functions that add, delete, search
and edit transactions held in a list loaded by the storage layer.
"""

from .operations import (
    add_transaction,
    delete_transaction,
    find_transactions,
    modify_transaction,
    next_transaction_id,
)

__all__ = [
    "add_transaction",
    "delete_transaction",
    "find_transactions",
    "modify_transaction",
    "next_transaction_id",
]

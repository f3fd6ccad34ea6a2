"""Mini README: Record model package for Fltcli.

The ``transaction`` module defines the only entity the ledger stores along
with the field groupings used by searches and edits.
"""

from .transaction import EDITABLE_FIELDS, SEARCHABLE_FIELDS, Transaction

__all__ = ["EDITABLE_FIELDS", "SEARCHABLE_FIELDS", "Transaction"]

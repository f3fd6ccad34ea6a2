"""Mini README: Persistence package for Fltcli.

``json_store`` holds the whole-file JSON store. The storage path is always
passed in by the caller so tests can point it at temporary files.
"""

from .json_store import PLACEHOLDER_CONTENT, JsonLedgerStore, load_transactions, save_transactions

__all__ = ["PLACEHOLDER_CONTENT", "JsonLedgerStore", "load_transactions", "save_transactions"]

"""Mini README: Shared fixtures for the Fltcli test-suite.

Structure:
    * make_transaction - factory building transactions with readable defaults.
    * sheet_path - per-test storage location inside ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from fltcli.records import Transaction


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Return a factory producing transactions with overridable fields."""

    def _factory(transaction_id: int, **overrides: str) -> Transaction:
        values = {
            "date": f"2024-06-{transaction_id:02d}",
            "reason": f"reason-{transaction_id}",
            "amount": f"{transaction_id}.00",
            "path": f"receipts/{transaction_id}.png",
            "counterparty": f"shop-{transaction_id}",
            "note": f"note-{transaction_id}",
        }
        values.update(overrides)
        return Transaction(id=transaction_id, **values)

    return _factory


@pytest.fixture
def sheet_path(tmp_path: Path) -> Path:
    """Storage file that does not exist until a test creates it."""

    return tmp_path / "sheet.json"

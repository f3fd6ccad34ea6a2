"""Mini README: Transaction record model and its JSON encoding.

Structure:
    * EDITABLE_FIELDS - text fields a user may overwrite with ``modify``.
    * SEARCHABLE_FIELDS - text fields inspected by keyword searches.
    * Transaction - dataclass storing one ledger entry.

Every field except ``id`` is opaque text: dates are not parsed and amounts
are never treated as numbers. Decoding is strict about presence and type so a
hand-edited file with a broken record is rejected instead of half loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..errors import RecordDecodeError

EDITABLE_FIELDS = ("date", "reason", "amount", "path", "counterparty", "note")
SEARCHABLE_FIELDS = ("date", "reason", "path", "counterparty", "note")


@dataclass(slots=True)
class Transaction:
    """Represent a single ledger entry."""

    id: int
    date: str
    reason: str
    amount: str
    path: str
    counterparty: str
    note: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a decoded JSON object, rejecting bad shapes."""

        if not isinstance(payload, Mapping):
            raise RecordDecodeError(f"Record must be a JSON object, got {type(payload).__name__}")
        if "id" not in payload:
            raise RecordDecodeError("Record is missing required field 'id'")
        identifier = payload["id"]
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            raise RecordDecodeError(f"Field 'id' must be an integer, got {identifier!r}")

        values: Dict[str, str] = {}
        for name in EDITABLE_FIELDS:
            if name not in payload:
                raise RecordDecodeError(f"Record {identifier} is missing required field '{name}'")
            value = payload[name]
            if not isinstance(value, str):
                raise RecordDecodeError(
                    f"Field '{name}' of record {identifier} must be a string, got {value!r}"
                )
            values[name] = value
        return cls(id=identifier, **values)

    def as_dict(self) -> Dict[str, Any]:
        """Export the transaction with the on-disk key order."""

        return {
            "id": self.id,
            "date": self.date,
            "reason": self.reason,
            "amount": self.amount,
            "path": self.path,
            "counterparty": self.counterparty,
            "note": self.note,
        }

    def contains(self, keyword: str) -> bool:
        """Return True when ``keyword`` occurs in any searchable field."""

        return any(keyword in getattr(self, name) for name in SEARCHABLE_FIELDS)

    def describe(self) -> str:
        """Render the multi-line block printed by keyword searches."""

        return (
            f"Transaction {self.id}:\n"
            f"date: {self.date}\n"
            f"amount: {self.amount}\n"
            f"reason: {self.reason}\n"
            f"path: {self.path}\n"
            f"counterparty: {self.counterparty}\n"
            f"note: {self.note}\n"
        )

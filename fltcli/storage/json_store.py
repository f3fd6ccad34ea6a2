"""Mini README: JSON file persistence for the ledger.

Structure:
    * PLACEHOLDER_CONTENT - text written when the storage file is absent.
    * JsonLedgerStore - loads and saves the whole record set at a given path.
    * load_transactions / save_transactions - one-shot helpers.

The store always works on the full file: a load reads every record and a
save rewrites every record. A missing file is bootstrapped with an empty JSON
object, which later loads report as malformed because only an array is a
valid ledger; the first successful save replaces it with an array.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from ..errors import RecordDecodeError, StorageDecodeError, StorageReadError
from ..logging_utils import get_logger
from ..records import Transaction

LOGGER = get_logger(__name__)

PLACEHOLDER_CONTENT = "{}"


class JsonLedgerStore:
    """Read and write the ledger as a pretty-printed JSON array."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> List[Transaction]:
        """Return every stored transaction in file order."""

        if not self.path.exists():
            self._write_placeholder()
            return []

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            raise StorageDecodeError(f"{self.path} is not valid JSON: {error}") from error
        except OSError as error:
            raise StorageReadError(f"Cannot read {self.path}: {error}") from error

        if not isinstance(payload, list):
            LOGGER.error("File does not contain a JSON array: %s", self.path)
            return []

        transactions = []
        for position, element in enumerate(payload):
            try:
                transactions.append(Transaction.from_dict(element))
            except RecordDecodeError as error:
                raise RecordDecodeError(f"{self.path} entry {position}: {error}") from error
        LOGGER.debug("Loaded %s transactions from %s", len(transactions), self.path)
        return transactions

    def save(self, transactions: Sequence[Transaction]) -> bool:
        """Overwrite the file with ``transactions``; return False when it cannot be opened."""

        document = json.dumps(
            [transaction.as_dict() for transaction in transactions], indent=4, ensure_ascii=False
        )
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                handle.write(document + "\n")
        except OSError as error:
            LOGGER.error("File-opening Failure: %s (%s)", self.path, error)
            return False
        LOGGER.debug("Saved %s transactions to %s", len(transactions), self.path)
        return True

    def _write_placeholder(self) -> None:
        """Create the empty store used on first run."""

        try:
            self.path.write_text(PLACEHOLDER_CONTENT, encoding="utf-8")
        except OSError as error:
            LOGGER.error("Could not create storage file %s (%s)", self.path, error)
            return
        LOGGER.info("Created empty storage file %s", self.path)


def load_transactions(path: Union[str, Path]) -> List[Transaction]:
    """Load all transactions stored at ``path``."""

    return JsonLedgerStore(path).load()


def save_transactions(transactions: Sequence[Transaction], path: Union[str, Path]) -> bool:
    """Persist ``transactions`` to ``path``."""

    return JsonLedgerStore(path).save(transactions)

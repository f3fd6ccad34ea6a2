"""Mini README: In-memory operations over a loaded record set.

Structure:
    * next_transaction_id - identifier for the next appended record.
    * add_transaction - append a new record.
    * delete_transaction - remove by id and renumber the remainder.
    * find_transactions - case-sensitive keyword search.
    * modify_transaction - overwrite one text field of matching records.

Every function works only on the list it is given, so the same inputs always
produce the same result. Deleting renumbers the surviving records to
``1..N`` in their current order, which means ids are positions rather than
durable references.
"""

from __future__ import annotations

from typing import List

from ..errors import TransactionNotFoundError, UnknownFieldError
from ..logging_utils import get_logger
from ..records import EDITABLE_FIELDS, Transaction

LOGGER = get_logger(__name__)


def next_transaction_id(transactions: List[Transaction]) -> int:
    """Return one more than the largest id, or 1 for an empty ledger."""

    return max((transaction.id for transaction in transactions), default=0) + 1


def add_transaction(
    transactions: List[Transaction],
    date: str,
    reason: str,
    amount: str,
    path: str,
    counterparty: str,
    note: str,
) -> Transaction:
    """Append a transaction with the next free id and return it."""

    transaction = Transaction(
        id=next_transaction_id(transactions),
        date=date,
        reason=reason,
        amount=amount,
        path=path,
        counterparty=counterparty,
        note=note,
    )
    transactions.append(transaction)
    LOGGER.debug("Added transaction %s", transaction.id)
    return transaction


def delete_transaction(transactions: List[Transaction], target_id: int) -> int:
    """Remove every record with ``target_id`` and renumber the rest.

    Returns the number of removed records. Raises ``TransactionNotFoundError``
    without touching the list when nothing matches.
    """

    survivors = [transaction for transaction in transactions if transaction.id != target_id]
    removed = len(transactions) - len(survivors)
    if not removed:
        raise TransactionNotFoundError(target_id)

    for position, transaction in enumerate(survivors, start=1):
        transaction.id = position
    transactions[:] = survivors
    LOGGER.debug("Deleted %s record(s) with id %s, %s remain", removed, target_id, len(survivors))
    return removed


def find_transactions(transactions: List[Transaction], keyword: str) -> List[Transaction]:
    """Return records whose searchable text contains ``keyword``, in order.

    The id and amount are not searched. An empty result means nothing matched.
    """

    return [transaction for transaction in transactions if transaction.contains(keyword)]


def modify_transaction(
    transactions: List[Transaction], transaction_id: int, field: str, new_value: str
) -> List[Transaction]:
    """Overwrite ``field`` on every record carrying ``transaction_id``.

    Ids are expected to be unique, but a hand-edited file may repeat one; all
    matches are then updated. Returns the modified records.
    """

    matches = [transaction for transaction in transactions if transaction.id == transaction_id]
    if not matches:
        raise TransactionNotFoundError(transaction_id)
    if field not in EDITABLE_FIELDS:
        raise UnknownFieldError(transaction_id, field, matches=len(matches))

    for transaction in matches:
        setattr(transaction, field, new_value)
    LOGGER.debug("Set %s on %s record(s) with id %s", field, len(matches), transaction_id)
    return matches

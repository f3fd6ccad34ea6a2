"""Mini README: Tests for the in-memory ledger operations.

These tests cover id assignment, renumbering after deletes, keyword search
rules and field-level edits, including ledgers whose ids were hand-edited
into duplicates or gaps.
"""

from __future__ import annotations

import copy

import pytest

from fltcli.errors import TransactionNotFoundError, UnknownFieldError
from fltcli.ledger import (
    add_transaction,
    delete_transaction,
    find_transactions,
    modify_transaction,
    next_transaction_id,
)


def _add(transactions, label: str) -> None:
    add_transaction(transactions, "2024-06-01", label, "1.00", "-", "shop", label)


def test_next_id_follows_maximum_not_count(make_transaction) -> None:
    """The next id is one past the largest id, or 1 when empty."""

    assert next_transaction_id([]) == 1
    assert next_transaction_id([make_transaction(1), make_transaction(2)]) == 3
    assert next_transaction_id([make_transaction(7), make_transaction(2)]) == 8


def test_add_appends_with_next_id(make_transaction) -> None:
    """New records land at the end of the list."""

    transactions = [make_transaction(4)]
    added = add_transaction(transactions, "today", "lunch", "abc", "p", "cafe", "n")
    assert added.id == 5
    assert transactions[-1] is added
    assert added.amount == "abc"


def test_delete_renumbers_survivors_in_order(make_transaction) -> None:
    """Deleting keeps relative order and makes ids dense again."""

    transactions = [make_transaction(index) for index in range(1, 6)]
    assert delete_transaction(transactions, 3) == 1
    assert [transaction.id for transaction in transactions] == [1, 2, 3, 4]
    assert [transaction.reason for transaction in transactions] == [
        "reason-1",
        "reason-2",
        "reason-4",
        "reason-5",
    ]


def test_delete_missing_id_leaves_list_untouched(make_transaction) -> None:
    """A miss raises and does not renumber a sparse ledger."""

    transactions = [make_transaction(2), make_transaction(9)]
    snapshot = copy.deepcopy(transactions)
    with pytest.raises(TransactionNotFoundError):
        delete_transaction(transactions, 4)
    assert transactions == snapshot


def test_delete_removes_every_duplicate(make_transaction) -> None:
    """Duplicated ids from a hand-edited file are all removed."""

    transactions = [make_transaction(1), make_transaction(2), make_transaction(2, note="dup")]
    assert delete_transaction(transactions, 2) == 2
    assert [transaction.id for transaction in transactions] == [1]


def test_add_delete_add_reuses_freed_id() -> None:
    """Three adds, one delete and another add end with ids 1, 2 and 3."""

    transactions = []
    for label in ("a", "b", "c"):
        _add(transactions, label)
    delete_transaction(transactions, 2)
    _add(transactions, "d")
    assert {transaction.id for transaction in transactions} == {1, 2, 3}
    assert [transaction.reason for transaction in transactions] == ["a", "c", "d"]


def test_find_matches_text_fields_but_not_amount_or_id(make_transaction) -> None:
    """Substring search covers date, reason, path, counterparty and note only."""

    transactions = [
        make_transaction(1, amount="abc"),
        make_transaction(2, path="scan-abc.pdf"),
        make_transaction(3, note="xxabcxx"),
        make_transaction(4, counterparty="ABC"),
    ]
    found = find_transactions(transactions, "abc")
    assert [transaction.id for transaction in found] == [2, 3]
    assert find_transactions(transactions, "AB") == [transactions[3]]

    numbered = [make_transaction(7, date="today", path="-", reason="r", counterparty="c", note="n")]
    assert find_transactions(numbered, "7") == []
    assert find_transactions(transactions, "nothing-here") == []


def test_modify_changes_only_target_field(make_transaction) -> None:
    """Editing one field leaves other fields and records as they were."""

    transactions = [make_transaction(index) for index in range(1, 4)]
    expected = copy.deepcopy(transactions)
    expected[1].amount = "99.00"

    modified = modify_transaction(transactions, 2, "amount", "99.00")
    assert modified == [transactions[1]]
    assert transactions == expected


def test_modify_updates_all_duplicates(make_transaction) -> None:
    """When ids repeat, every matching record is edited."""

    transactions = [make_transaction(5), make_transaction(5, note="other")]
    modified = modify_transaction(transactions, 5, "note", "fixed")
    assert len(modified) == 2
    assert {transaction.note for transaction in transactions} == {"fixed"}


def test_modify_rejects_id_and_unknown_fields(make_transaction) -> None:
    """The id and unrecognised names cannot be edited."""

    transactions = [make_transaction(1)]
    snapshot = copy.deepcopy(transactions)
    for field in ("id", "category"):
        with pytest.raises(UnknownFieldError) as excinfo:
            modify_transaction(transactions, 1, field, "x")
        assert excinfo.value.matches == 1
    assert transactions == snapshot


def test_modify_missing_id_is_reported(make_transaction) -> None:
    """A miss is reported explicitly rather than ignored."""

    with pytest.raises(TransactionNotFoundError) as excinfo:
        modify_transaction([make_transaction(1)], 3, "note", "x")
    assert not isinstance(excinfo.value, UnknownFieldError)

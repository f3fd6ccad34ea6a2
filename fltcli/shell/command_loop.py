"""Mini README: Interactive command loop driving the ledger.

Structure:
    * TokenReader - whitespace-delimited token stream over a text input.
    * CommandLoop - prompt, dispatch and report for each command.

Each data command reads all of its arguments, then loads the ledger fresh,
runs one operation and, when the operation changed something, writes the
whole ledger back before printing the outcome. A failed load therefore never
leaves argument tokens behind to be read as commands. Arguments are read
token by token, so they may be typed on the prompt line or on following
lines, and no value may contain whitespace.
Errors are written to stderr and the loop always returns to the prompt;
only ``quit``, ``exit`` or the end of input stop it.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Iterator, List, Optional, TextIO

import typer

from ..errors import LedgerError, TransactionNotFoundError, UnknownFieldError
from ..ledger import add_transaction, delete_transaction, find_transactions, modify_transaction
from ..logging_utils import get_logger
from ..records import EDITABLE_FIELDS, Transaction
from ..storage import JsonLedgerStore

LOGGER = get_logger(__name__)

BANNER = (
    "This is FINANCIAL LOG TOOL CLI 2024.6, authored by Bgc and Chen X.\n"
    "Input the word [help] to get our guidelines."
)
PROMPT = "Fltcli> "
HELP_TEXT = (
    "[Usage] Fltcli> command\n"
    "command ranges from [add, delete, find, modify]\n"
    "Input [quit] or [exit] to leave."
)
NOT_FOUND_MESSAGE = "Error: Transaction Not Found."
SYNTAX_ERROR_MESSAGE = "Error: Syntax Error: Check your inputs"
EXIT_COMMANDS = frozenset({"quit", "exit"})


class TokenReader:
    """Yield whitespace-separated tokens from a stream, reading lines lazily."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Iterator[str] = iter(())

    def next_token(self) -> Optional[str]:
        """Return the next token or None once the stream is exhausted."""

        while True:
            token = next(self._pending, None)
            if token is not None:
                return token
            line = self._stream.readline()
            if not line:
                return None
            self._pending = iter(line.split())

    def take(self, count: int) -> Optional[List[str]]:
        """Return ``count`` tokens, or None when input ends first."""

        tokens = []
        for _ in range(count):
            token = self.next_token()
            if token is None:
                return None
            tokens.append(token)
        return tokens


class CommandLoop:
    """Read commands from ``stdin`` and apply them to the ledger at ``store``."""

    def __init__(self, store: JsonLedgerStore, stdin: Optional[TextIO] = None) -> None:
        self._store = store
        self._reader = TokenReader(stdin if stdin is not None else sys.stdin)
        self._handlers: Dict[str, Callable[[], None]] = {
            "help": self._help,
            "add": self._add,
            "delete": self._delete,
            "find": self._find,
            "modify": self._modify,
        }

    def run(self) -> int:
        """Process commands until the user quits or input ends; return the exit code."""

        typer.echo(BANNER)
        while True:
            typer.echo()
            typer.echo(PROMPT, nl=False)
            command = self._reader.next_token()
            if command is None:
                typer.echo()
                return 0
            if command in EXIT_COMMANDS:
                return 0
            self.dispatch(command)

    def dispatch(self, command: str) -> None:
        """Run one command, reporting any ledger error instead of raising it."""

        handler = self._handlers.get(command)
        if handler is None:
            LOGGER.debug("Rejected unknown command %r", command)
            typer.echo(SYNTAX_ERROR_MESSAGE, err=True)
            return
        try:
            handler()
        except UnknownFieldError as error:
            for _ in range(error.matches):
                typer.echo(f"{NOT_FOUND_MESSAGE} (no editable field '{error.field}')", err=True)
        except TransactionNotFoundError:
            typer.echo(NOT_FOUND_MESSAGE, err=True)
        except LedgerError as error:
            LOGGER.debug("Command %s aborted: %s", command, error)
            typer.echo(f"Error: {error}", err=True)

    def _help(self) -> None:
        typer.echo(HELP_TEXT)

    def _add(self) -> None:
        typer.echo(
            "Input the date, the reason, the amount, the path, the counterparty, "
            "the note of transaction in turns."
        )
        typer.echo("Fltcli add> ", nl=False)
        values = self._reader.take(len(EDITABLE_FIELDS))
        if values is None:
            return
        date, reason, amount, path, counterparty, note = values
        transactions = self._store.load()
        add_transaction(transactions, date, reason, amount, path, counterparty, note)
        self._save(transactions, "Add transaction success!")

    def _delete(self) -> None:
        typer.echo("Input the id of the target transaction.")
        typer.echo("Fltcli delete> ", nl=False)
        token = self._reader.next_token()
        if token is None:
            return
        transaction_id = self._parse_id(token)
        if transaction_id is None:
            return
        transactions = self._store.load()
        delete_transaction(transactions, transaction_id)
        self._save(transactions, "Delete transaction success!")

    def _find(self) -> None:
        typer.echo("Input the keyword of the target transactions.")
        typer.echo("Fltcli find> ", nl=False)
        keyword = self._reader.next_token()
        if keyword is None:
            return
        found = find_transactions(self._store.load(), keyword)
        if not found:
            typer.echo(NOT_FOUND_MESSAGE, err=True)
            return
        for transaction in found:
            typer.echo(transaction.describe())

    def _modify(self) -> None:
        typer.echo("Input the id, the item, the newdata of the target transaction in order.")
        typer.echo("Fltcli modify> ", nl=False)
        arguments = self._reader.take(3)
        if arguments is None:
            return
        token, field, new_value = arguments
        transaction_id = self._parse_id(token)
        if transaction_id is None:
            return
        transactions = self._store.load()
        modified = modify_transaction(transactions, transaction_id, field, new_value)
        self._save(transactions, "Modify transaction success!", times=len(modified))

    @staticmethod
    def _parse_id(token: str) -> Optional[int]:
        """Convert an id token; report a syntax error for anything else."""

        try:
            return int(token)
        except ValueError:
            typer.echo(f"{SYNTAX_ERROR_MESSAGE} (expected an integer id, got {token!r})", err=True)
            return None

    def _save(self, transactions: List[Transaction], message: str, times: int = 1) -> None:
        """Persist the ledger and print ``message`` only if the write succeeded."""

        if not self._store.save(transactions):
            typer.echo(f"Error: Changes were not saved to {self._store.path}", err=True)
            return
        for _ in range(times):
            typer.echo(message)

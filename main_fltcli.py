"""Mini README: Entry point CLI for the Fltcli financial log tool.

This script exposes a Typer CLI that opens the interactive ledger prompt
against a JSON storage file. The storage path and log level come from
``FLTCLI_*`` environment variables when set and can be overridden per run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from fltcli.configuration import get_settings
from fltcli.logging_utils import configure_root_logger, resolve_level
from fltcli.shell import CommandLoop
from fltcli.storage import JsonLedgerStore

cli = typer.Typer(help="Record, search and edit personal transactions in a JSON ledger.")


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    """Reject unknown level names as a usage error."""

    if value is None:
        return None
    try:
        resolve_level(value)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    return value.upper()


@cli.command()
def run(
    storage: Optional[Path] = typer.Option(None, help="JSON file holding the ledger."),
    log_level: Optional[str] = typer.Option(
        None, help="Logging level, e.g. DEBUG or WARNING.", callback=_validate_log_level
    ),
) -> None:
    """Start the interactive ledger prompt."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    store = JsonLedgerStore(storage or settings.storage_path)
    raise typer.Exit(code=CommandLoop(store).run())


if __name__ == "__main__":
    cli()

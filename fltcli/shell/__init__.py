"""Mini README: Interactive shell package for Fltcli.

``command_loop`` reads commands from a text stream and maps them onto the
storage and ledger layers.
"""

from .command_loop import CommandLoop, TokenReader

__all__ = ["CommandLoop", "TokenReader"]

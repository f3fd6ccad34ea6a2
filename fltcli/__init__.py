"""Mini README: Core package initializer for Fltcli, the financial log tool.

Fltcli keeps personal transactions in a JSON file and edits them through an
interactive command loop. Subpackages are layered leaves first: ``records``
defines the transaction, ``storage`` reads and writes the file, ``ledger``
holds the in-memory operations and ``shell`` drives them from user input.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

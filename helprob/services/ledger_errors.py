# helprob/services/ledger_errors.py
"""
Fouten van de ledger-flush.

Geen van deze fouten mag het request-pad raken: de flush-cyclus vangt ze af,
logt ze en probeert het bij de volgende tick opnieuw (delta blijft bewaard).
"""
from __future__ import annotations

from typing import Optional


class LedgerError(RuntimeError):
    """Base class for everything that can go wrong while flushing the ledger."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DirectoryCreationError(LedgerError):
    pass


class FileOpenError(LedgerError):
    pass


class WriteError(LedgerError):
    pass


class RecordParseError(LedgerError, ValueError):
    """Raised for a partition line that is not of the form "<signature>",<count>."""

    def __init__(self, message: str, *, line: str, line_no: int, path: Optional[str] = None):
        super().__init__(message, path=path)
        self.line = line
        self.line_no = line_no

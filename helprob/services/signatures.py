# helprob/services/signatures.py
from __future__ import annotations

from typing import Optional

# Veldscheider in het ledger-formaat ("<signature>",<count>), geen escaping.
RECORD_DELIMITER = ","
# Regelscheiders zouden een record over twee regels splitsen.
_STRIPPED = (RECORD_DELIMITER, "\n", "\r")


def sanitize_signature(raw: Optional[str]) -> str:
    """Strip the record delimiter and line breaks so a client string is safe to store as a ledger key."""
    if not raw:
        return ""
    for char in _STRIPPED:
        raw = raw.replace(char, "")
    return raw

# helprob/services/ledger.py
"""
Dag-partitie van het telemetry-ledger.

Formaat: een record per regel, `"<signature>",<count>`, gescheiden door `\n`,
geen header en geen afsluitende newline. Signatures bevatten nooit een komma
(zie signatures.sanitize_signature), dus de laatste komma scheidt de velden.

Merge-regel: per signature exact een record met prior + delta. Matching op
exacte gelijkheid; records die niet in de delta zitten blijven ongemoeid.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from helprob.core.logging_config import get_logger
from helprob.observability.metrics import malformed_lines_counter
from helprob.services.ledger_errors import FileOpenError, RecordParseError, WriteError
from helprob.services.signatures import RECORD_DELIMITER

logger = get_logger(__name__)

LINE_SEPARATOR = "\n"
FILE_MODE = 0o700
REJECTED_SUFFIX = ".rejected"
_ENCODING = "utf-8"
# ruwe bytes die geen geldige utf-8 zijn ongewijzigd laten rondreizen
_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class LedgerRecord:
    signature: str
    count: int

    def serialize(self) -> str:
        return f'"{self.signature}"{RECORD_DELIMITER}{self.count}'


def parse_record(line: str, *, line_no: int = 0) -> LedgerRecord:
    """
    Parse one `"<signature>",<count>` line.
    Raises RecordParseError when the line does not match.
    """
    quoted, sep, raw_count = line.rpartition(RECORD_DELIMITER)
    if not sep:
        raise RecordParseError("missing delimiter", line=line, line_no=line_no)
    if len(quoted) < 2 or not (quoted.startswith('"') and quoted.endswith('"')):
        raise RecordParseError("signature is not quoted", line=line, line_no=line_no)
    raw_count = raw_count.strip()
    if not (raw_count.isascii() and raw_count.isdigit()):
        raise RecordParseError(f"invalid count {raw_count!r}", line=line, line_no=line_no)
    return LedgerRecord(signature=quoted[1:-1], count=int(raw_count))


@dataclass
class MergeResult:
    content: str
    records: int = 0
    updated: int = 0
    added: int = 0
    malformed: List[RecordParseError] = field(default_factory=list)


def merge_content(existing: str, delta: Mapping[str, int]) -> MergeResult:
    """
    Reconcile the prior partition content with an in-memory delta.

    Onparseerbare regels vallen uit de nieuwe content en komen in
    result.malformed terecht; een kapotte regel kost nooit andere records.
    Dubbele signatures in bestaande content worden samengevoegd in het eerste
    voorkomen.
    """
    lines: List[LedgerRecord] = []
    index: Dict[str, int] = {}
    result = MergeResult(content="")

    for line_no, raw in enumerate(existing.split(LINE_SEPARATOR), start=1):
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        try:
            record = parse_record(line, line_no=line_no)
        except RecordParseError as e:
            result.malformed.append(e)
            continue

        pos = index.get(record.signature)
        if pos is None:
            index[record.signature] = len(lines)
            lines.append(record)
        else:
            prior = lines[pos]
            lines[pos] = LedgerRecord(record.signature, prior.count + record.count)

    for signature, count in delta.items():
        if count <= 0:
            continue
        pos = index.get(signature)
        if pos is None:
            index[signature] = len(lines)
            lines.append(LedgerRecord(signature, count))
            result.added += 1
        else:
            prior = lines[pos]
            lines[pos] = LedgerRecord(signature, prior.count + count)
            result.updated += 1

    result.records = len(index)
    result.content = LINE_SEPARATOR.join(record.serialize() for record in lines)
    return result


class LedgerMerger:
    """
    Read-merge-write van een dag-partitie.

    Het schrijven gaat via een tijdelijk bestand + os.replace, zodat een
    mislukte write de vorige inhoud intact laat en lezers nooit een half
    bestand zien.
    """

    def merge(self, path: str, delta: Mapping[str, int]) -> MergeResult:
        existing = self._read_existing(path)
        result = merge_content(existing, delta)

        for err in result.malformed:
            malformed_lines_counter.inc()
            logger.warning(
                "record_parse_failed",
                path=path,
                line_no=err.line_no,
                line=err.line,
                reason=str(err),
            )
        if result.malformed:
            self._reject(path, [err.line for err in result.malformed])

        self._write(path, result.content)
        logger.debug(
            "partition_merged",
            path=path,
            records=result.records,
            updated=result.updated,
            added=result.added,
        )
        return result

    def _read_existing(self, path: str) -> str:
        try:
            fd = os.open(path, os.O_CREAT | os.O_RDWR, FILE_MODE)
        except OSError as e:
            raise FileOpenError(f"cannot open partition {path}: {e}", path=path) from e

        try:
            with os.fdopen(fd, "r", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
                return f.read()
        except OSError as e:
            raise FileOpenError(f"cannot read partition {path}: {e}", path=path) from e

    def _reject(self, path: str, lines: List[str]) -> None:
        """Bewaar onparseerbare regels in `<partitie>.rejected`, buiten het ledger."""
        rejected_path = f"{path}{REJECTED_SUFFIX}"
        try:
            fd = os.open(rejected_path, os.O_CREAT | os.O_WRONLY | os.O_APPEND, FILE_MODE)
            with os.fdopen(fd, "a", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
                for line in lines:
                    f.write(line + LINE_SEPARATOR)
        except OSError as e:
            raise WriteError(f"cannot write rejected lines for {path}: {e}", path=rejected_path) from e

    def _write(self, path: str, content: str) -> None:
        tmp_path = f"{path}.tmp"
        try:
            fd = os.open(tmp_path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            self._discard(tmp_path)
            raise WriteError(f"cannot write partition {path}: {e}", path=path) from e

    @staticmethod
    def _discard(tmp_path: str) -> None:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("tmp_cleanup_failed", path=tmp_path, error=str(e))

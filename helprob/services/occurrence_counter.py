# helprob/services/occurrence_counter.py
from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Dict, Mapping


class OccurrenceCounter:
    """
    Thread-safe tally van signature -> aantal.

    - record(): +1 per observatie (request-workers, geen I/O)
    - drain(): atomisch uitlezen + leegmaken (alleen de flush-cyclus)
    - restore(): een gedraineerde delta terugzetten als de flush faalt
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._counts: defaultdict[str, int] = defaultdict(int)

    def record(self, signature: str) -> None:
        with self._lock:
            self._counts[signature] += 1

    def drain(self) -> Dict[str, int]:
        with self._lock:
            delta = dict(self._counts)
            self._counts = defaultdict(int)
        return delta

    def restore(self, delta: Mapping[str, int]) -> None:
        """Merge a drained delta back in, adding to anything recorded since."""
        with self._lock:
            for signature, count in delta.items():
                if count > 0:
                    self._counts[signature] += int(count)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

# helprob/services/partition.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from helprob.services.ledger_errors import DirectoryCreationError

# Maandnaam i.p.v. nummer (bewuste keuze: leesbare mappen, ook al sorteert
# dat niet chronologisch). Vaste lijst zodat de locale er niet toe doet.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

PARTITION_EXTENSION = ".csv"
DIRECTORY_MODE = 0o777


@dataclass(frozen=True)
class Partition:
    year: int
    month: int
    day: int
    directory: str
    filename: str

    @property
    def path(self) -> str:
        return os.path.join(self.directory, self.filename)


class PartitionResolver:
    """Maps a local timestamp to root/<year>/<MonthName>/<day>.csv."""

    def __init__(self, root: str):
        self.root = root

    def resolve(self, when: Optional[datetime] = None) -> Partition:
        when = when or datetime.now()
        directory = os.path.join(self.root, str(when.year), MONTH_NAMES[when.month - 1])
        return Partition(
            year=when.year,
            month=when.month,
            day=when.day,
            directory=directory,
            filename=f"{when.day}{PARTITION_EXTENSION}",
        )

    def ensure(self, partition: Partition) -> Partition:
        """
        Maak de map (en alle tussenliggende mappen) aan.
        Raises DirectoryCreationError bij alles behalve "bestaat al".
        """
        try:
            os.makedirs(partition.directory, mode=DIRECTORY_MODE, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"cannot create partition directory {partition.directory}: {e}",
                path=partition.directory,
            ) from e
        return partition

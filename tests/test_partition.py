import os
from datetime import datetime

import pytest

from helprob.services.ledger_errors import DirectoryCreationError
from helprob.services.partition import MONTH_NAMES, PartitionResolver


def test_resolve_layout(ledger_root, fixed_now):
    p = PartitionResolver(ledger_root).resolve(fixed_now)

    assert p.directory == os.path.join(ledger_root, "2024", "March")
    assert p.filename == "7.csv"
    assert p.path == os.path.join(ledger_root, "2024", "March", "7.csv")


def test_month_is_full_name_and_day_unpadded(ledger_root):
    p = PartitionResolver(ledger_root).resolve(datetime(2023, 9, 1, 0, 0))
    assert p.directory.endswith(os.path.join("2023", "September"))
    assert p.filename == "1.csv"
    assert len(MONTH_NAMES) == 12


def test_same_day_resolves_to_same_path(ledger_root):
    r = PartitionResolver(ledger_root)
    morning = r.resolve(datetime(2024, 3, 7, 0, 0, 1))
    evening = r.resolve(datetime(2024, 3, 7, 23, 59, 59))
    assert morning.path == evening.path


def test_midnight_boundary_gives_distinct_partitions(ledger_root):
    r = PartitionResolver(ledger_root)
    before = r.resolve(datetime(2024, 12, 31, 23, 59))
    after = r.resolve(datetime(2025, 1, 1, 0, 1))
    assert before.path != after.path
    assert after.path == os.path.join(ledger_root, "2025", "January", "1.csv")


def test_ensure_creates_nested_dirs_and_is_idempotent(ledger_root, fixed_now):
    r = PartitionResolver(ledger_root)
    p = r.resolve(fixed_now)

    r.ensure(p)
    r.ensure(p)

    assert os.path.isdir(p.directory)
    assert not os.path.exists(p.path)


def test_ensure_raises_directory_creation_error(tmp_path, fixed_now):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    r = PartitionResolver(str(blocker))

    with pytest.raises(DirectoryCreationError) as exc:
        r.ensure(r.resolve(fixed_now))

    assert exc.value.path.startswith(str(blocker))

import os
import time
from datetime import datetime

from helprob.jobs.flusher import BUSY, FAILED, FLUSHED, SKIPPED, FlushScheduler
from helprob.services.ledger import LedgerMerger
from helprob.services.ledger_errors import WriteError
from helprob.services.partition import PartitionResolver


def _lines(read_partition, path):
    return sorted(read_partition(path).split("\n"))


def test_repeated_batches_accumulate(counter, scheduler, read_partition):
    for _ in range(3):
        counter.record("ua-x")
    first = scheduler.flush_once()
    assert first.status == FLUSHED
    assert read_partition(first.path) == '"ua-x",3'

    for _ in range(3):
        counter.record("ua-x")
    second = scheduler.flush_once()

    assert second.path == first.path
    assert read_partition(second.path) == '"ua-x",6'


def test_signatures_are_isolated(counter, scheduler, read_partition):
    counter.record("ua-x")
    counter.record("ua-y")

    result = scheduler.flush_once()

    assert result.signatures == 2
    assert _lines(read_partition, result.path) == ['"ua-x",1', '"ua-y",1']
    assert counter.is_empty()


def test_unrelated_prior_record_survives(counter, scheduler, ledger_root, fixed_now, read_partition):
    partition = PartitionResolver(ledger_root).resolve(fixed_now)
    os.makedirs(partition.directory)
    with open(partition.path, "w") as f:
        f.write('"ua-z",5')

    counter.record("ua-x")
    scheduler.flush_once()

    assert _lines(read_partition, partition.path) == ['"ua-x",1', '"ua-z",5']


def test_empty_counter_is_a_noop(scheduler, ledger_root):
    result = scheduler.flush_once()

    assert result.status == SKIPPED
    assert not os.path.exists(ledger_root)


def test_midnight_splits_partitions(counter, ledger_root, read_partition):
    now = {"t": datetime(2024, 3, 7, 23, 59, 30)}
    s = FlushScheduler(counter, PartitionResolver(ledger_root), clock=lambda: now["t"])

    counter.record("ua-x")
    before = s.flush_once()
    now["t"] = datetime(2024, 3, 8, 0, 0, 30)
    counter.record("ua-x")
    after = s.flush_once()

    assert before.path != after.path
    assert read_partition(before.path) == '"ua-x",1'
    assert read_partition(after.path) == '"ua-x",1'


def test_write_failure_retains_delta(counter, scheduler, monkeypatch, read_partition):
    counter.record("ua-x")
    counter.record("ua-x")

    def reject(self, path, content):
        raise WriteError("disk full", path=path)

    monkeypatch.setattr(LedgerMerger, "_write", reject)
    failed = scheduler.flush_once()

    assert failed.status == FAILED
    assert isinstance(failed.error, WriteError)
    assert counter.snapshot() == {"ua-x": 2}

    # volgende tick lukt wel en bevat de volledige opgebouwde telling
    monkeypatch.undo()
    counter.record("ua-x")
    ok = scheduler.flush_once()

    assert ok.status == FLUSHED
    assert read_partition(ok.path) == '"ua-x",3'


def test_directory_failure_does_not_drain(counter, tmp_path, fixed_now):
    blocker = tmp_path / "file"
    blocker.write_text("")
    s = FlushScheduler(counter, PartitionResolver(str(blocker)), clock=lambda: fixed_now)
    counter.record("ua-x")

    result = s.flush_once()

    assert result.status == FAILED
    assert counter.snapshot() == {"ua-x": 1}


def test_unexpected_error_restores_delta(counter, scheduler, monkeypatch):
    counter.record("ua-x")

    def crash(self, path, delta):
        raise KeyError("boom")

    monkeypatch.setattr(LedgerMerger, "merge", crash)

    assert scheduler.flush_once().status == FAILED
    assert counter.snapshot() == {"ua-x": 1}


def test_busy_cycle_is_coalesced(counter, scheduler):
    counter.record("ua-x")
    scheduler._cycle_lock.acquire()
    try:
        assert scheduler.state == "flushing"
        assert scheduler.flush_once().status == BUSY
    finally:
        scheduler._cycle_lock.release()

    assert scheduler.state == "idle"
    assert counter.snapshot() == {"ua-x": 1}


def test_background_thread_flushes_and_stop_flushes_rest(counter, ledger_root, fixed_now, read_partition):
    s = FlushScheduler(counter, PartitionResolver(ledger_root), interval=0.05, clock=lambda: fixed_now)
    path = PartitionResolver(ledger_root).resolve(fixed_now).path

    s.start()
    s.start()  # idempotent
    counter.record("ua-x")

    deadline = time.time() + 5
    while not os.path.exists(path) and time.time() < deadline:
        time.sleep(0.01)

    counter.record("ua-y")
    s.stop(timeout=5)

    assert not s.running
    assert counter.is_empty()
    assert _lines(read_partition, path) == ['"ua-x",1', '"ua-y",1']

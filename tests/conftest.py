import os
os.environ.setdefault("LOG_FILE_DIR", "")  # geen echte ledger tijdens tests
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from helprob.core.settings import Settings
from helprob.jobs.flusher import FlushScheduler
from helprob.main import create_app
from helprob.services.occurrence_counter import OccurrenceCounter
from helprob.services.partition import PartitionResolver


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 7, 12, 0, 0)


@pytest.fixture
def ledger_root(tmp_path):
    return str(tmp_path / "ledger")


@pytest.fixture
def counter():
    return OccurrenceCounter()


@pytest.fixture
def scheduler(counter, ledger_root, fixed_now):
    return FlushScheduler(
        counter,
        PartitionResolver(ledger_root),
        interval=3600,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def app_settings(ledger_root):
    return Settings(log_file_dir=ledger_root, domain="worm.test", flush_interval_seconds=3600)


@pytest.fixture
def client(app_settings):
    app = create_app(app_settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def read_partition():
    def _read(path) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    return _read

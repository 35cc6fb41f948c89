import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from helprob.core.logging_config import get_logger
from helprob.observability.metrics import (
    flush_counter,
    pending_signatures_gauge,
    records_written_counter,
)
from helprob.services.ledger import LedgerMerger
from helprob.services.ledger_errors import LedgerError
from helprob.services.occurrence_counter import OccurrenceCounter
from helprob.services.partition import PartitionResolver

logger = get_logger(__name__)

FLUSH_INTERVAL = 10.0  # seconden

SKIPPED = "skipped"
BUSY = "busy"
FLUSHED = "flushed"
FAILED = "failed"


@dataclass(frozen=True)
class FlushResult:
    status: str
    path: Optional[str] = None
    signatures: int = 0
    error: Optional[Exception] = None


class FlushScheduler:
    """
    Achtergrond-thread die elke `interval` seconden de teller naar de
    dag-partitie flusht.

    idle -> flushing -> idle. Een tick tijdens een lopende flush doet niets;
    de volgende cyclus ziet gewoon een grotere delta.
    """

    def __init__(
        self,
        counter: OccurrenceCounter,
        resolver: PartitionResolver,
        merger: Optional[LedgerMerger] = None,
        *,
        interval: float = FLUSH_INTERVAL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.counter = counter
        self.resolver = resolver
        self.merger = merger or LedgerMerger()
        self.interval = interval
        self.clock = clock

        self._cycle_lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> str:
        return "flushing" if self._cycle_lock.locked() else "idle"

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def flush_once(self, now: Optional[datetime] = None) -> FlushResult:
        if self.counter.is_empty():
            logger.debug("flush_skipped", reason="no_stats")
            return FlushResult(SKIPPED)

        if not self._cycle_lock.acquire(blocking=False):
            flush_counter.labels(result=BUSY).inc()
            return FlushResult(BUSY)

        try:
            return self._flush(now or self.clock())
        finally:
            self._cycle_lock.release()

    def _flush(self, now: datetime) -> FlushResult:
        partition = self.resolver.resolve(now)
        try:
            self.resolver.ensure(partition)
        except LedgerError as e:
            # delta is nog niet gedraineerd -> volgende tick opnieuw
            flush_counter.labels(result=FAILED).inc()
            logger.error("flush_failed", stage="mkdir", path=e.path, error=str(e))
            return FlushResult(FAILED, path=partition.path, error=e)

        delta = self.counter.drain()
        if not delta:
            return FlushResult(SKIPPED, path=partition.path)

        try:
            result = self.merger.merge(partition.path, delta)
        except LedgerError as e:
            self.counter.restore(delta)
            flush_counter.labels(result=FAILED).inc()
            logger.error(
                "flush_failed",
                stage=type(e).__name__,
                path=partition.path,
                pending=len(self.counter),
                error=str(e),
            )
            return FlushResult(FAILED, path=partition.path, error=e)
        except Exception as e:
            self.counter.restore(delta)
            flush_counter.labels(result=FAILED).inc()
            logger.exception("flush_crashed", path=partition.path)
            return FlushResult(FAILED, path=partition.path, error=e)
        finally:
            pending_signatures_gauge.set(len(self.counter))

        flush_counter.labels(result=FLUSHED).inc()
        records_written_counter.inc(len(delta))
        logger.info(
            "flush_completed",
            path=partition.path,
            signatures=len(delta),
            records=result.records,
            malformed=len(result.malformed),
        )
        return FlushResult(FLUSHED, path=partition.path, signatures=len(delta))

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.flush_once()
            except Exception:
                # thread mag nooit sterven; delta is in flush_once al teruggezet
                logger.exception("flush_loop_error")

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="helprob-flusher", daemon=True)
        self._thread.start()
        logger.info("flusher_started", root=self.resolver.root, interval=self.interval)

    def stop(self, timeout: Optional[float] = None) -> FlushResult:
        """Stop de thread en doe een laatste flush zodat er niets verloren gaat."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

        # wacht op een eventuele lopende cyclus voordat we zelf flushen
        with self._cycle_lock:
            pass
        result = self.flush_once()
        logger.info("flusher_stopped", final_flush=result.status)
        return result

# helprob/services/telemetry.py
from __future__ import annotations

from typing import Optional

from helprob.core.logging_config import get_logger
from helprob.core.settings import Settings
from helprob.jobs.flusher import FAILED, FLUSH_INTERVAL, FlushResult, FlushScheduler
from helprob.observability.metrics import observations_counter, pending_signatures_gauge
from helprob.services.occurrence_counter import OccurrenceCounter
from helprob.services.partition import PartitionResolver
from helprob.services.signatures import sanitize_signature

logger = get_logger(__name__)


class Telemetry:
    """
    Proces-brede telemetry: eigenaar van de teller en de flush-scheduler.

    Zonder root-directory is telemetry inert: record_observation telt nog
    steeds, maar er draait geen thread en er wordt niets weggeschreven.
    """

    def __init__(self, root: Optional[str], *, interval: float = FLUSH_INTERVAL):
        self.root = (root or "").strip()
        self.counter = OccurrenceCounter()
        self.scheduler: Optional[FlushScheduler] = None
        if self.root:
            self.scheduler = FlushScheduler(
                self.counter,
                PartitionResolver(self.root),
                interval=interval,
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Telemetry":
        return cls(settings.log_file_dir, interval=settings.flush_interval_seconds)

    @property
    def enabled(self) -> bool:
        return self.scheduler is not None

    def record_observation(self, raw_signature: str) -> str:
        signature = sanitize_signature(raw_signature)
        self.counter.record(signature)
        observations_counter.inc()
        pending_signatures_gauge.set(len(self.counter))
        return signature

    def flush(self) -> Optional[FlushResult]:
        if self.scheduler is None:
            return None
        return self.scheduler.flush_once()

    def start(self) -> None:
        if self.scheduler is None:
            logger.info("telemetry_inert", reason="no LOG_FILE_DIR configured")
            return
        logger.info("telemetry_configured", destination=self.root)
        self.scheduler.start()

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        if self.scheduler is None:
            return
        result = self.scheduler.stop(timeout)
        if result.status == FAILED:
            logger.warning(
                "telemetry_pending_on_shutdown",
                pending=len(self.counter),
                counts=self.counter.snapshot(),
                error=str(result.error),
            )

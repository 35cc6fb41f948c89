# helprob/observability/metrics.py
from fastapi import APIRouter
from starlette.responses import Response

from prometheus_client import Counter, Gauge, generate_latest, CONTENT_TYPE_LATEST

router = APIRouter(tags=["observability"])

observations_counter = Counter(
    "helprob_observations_total",
    "Aantal getelde client-signatures",
)

flush_counter = Counter(
    "helprob_flush_total",
    "Aantal flush-cycli",
    ["result"],  # flushed|failed|busy
)

records_written_counter = Counter(
    "helprob_ledger_records_written_total",
    "Aantal records weggeschreven naar de dag-partitie",
)

malformed_lines_counter = Counter(
    "helprob_ledger_malformed_lines_total",
    "Regels in een partitie die niet als record te parsen waren",
)

pending_signatures_gauge = Gauge(
    "helprob_pending_signatures",
    "Signatures in het geheugen die nog niet zijn weggeschreven",
)


@router.get("/metrics", include_in_schema=True)
def metrics() -> Response:
    # Prometheus expects text/plain; version=0.0.4
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

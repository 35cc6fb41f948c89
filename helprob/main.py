# helprob/main.py
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool

from helprob.core.logging_config import setup_logging, logger
from helprob.core.settings import Settings, get_settings
from helprob.observability.metrics import router as metrics_router
from helprob.routers import decoy
from helprob.services.telemetry import Telemetry


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    # ----------------------------------------------------
    # App init
    # ----------------------------------------------------
    telemetry = Telemetry.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        telemetry.start()
        yield
        # laatste flush (thread-join + file I/O) buiten de event loop;
        # een mislukte flush wordt gelogd, niet gegooid
        await run_in_threadpool(telemetry.stop)

    app = FastAPI(title="helprob", version="0.1.0", docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.telemetry = telemetry
    app.dependency_overrides[get_settings] = lambda: settings

    # ----------------------------------------------------
    # Health
    # ----------------------------------------------------
    @app.get("/health", include_in_schema=True)
    def health() -> dict:
        return {"status": "ok"}

    # ----------------------------------------------------
    # Logging middleware
    # ----------------------------------------------------
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        start = time.time()

        bound_logger = logger.bind(
            ip=request.client.host if request.client else "unknown",
            endpoint=str(request.url.path),
            method=request.method,
        )

        bound_logger.debug("request_started")
        response = await call_next(request)
        latency_ms = round((time.time() - start) * 1000, 2)

        bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
            "request_finished"
        )
        return response

    # ----------------------------------------------------
    # Routers (decoy als laatste: die vangt alle paden)
    # ----------------------------------------------------
    app.include_router(metrics_router)  # /metrics
    app.include_router(decoy.router)

    return app


setup_logging(get_settings().log_level)
logger.info("startup", service="helprob")

app = create_app()


if __name__ == "__main__":
    s = get_settings()
    uvicorn.run(app, host=s.host, port=s.port, server_header=False)

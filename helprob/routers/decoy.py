# helprob/routers/decoy.py
import crawleruseragents
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from helprob.core.logging_config import get_logger
from helprob.core.settings import Settings, get_settings
from helprob.services.telemetry import Telemetry
from helprob.web.decoy import build_links, current_name, pick_server
from helprob.web.templates import render_template

router = APIRouter(tags=["decoy"])
logger = get_logger(__name__)

ROBOTS_TXT = "\n        "


def get_telemetry(request: Request) -> Telemetry:
    return request.app.state.telemetry


def is_counted(user_agent: str) -> bool:
    """Alleen clients die zich niet als bekende crawler melden worden geteld."""
    return not crawleruseragents.is_crawler(user_agent)


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots_txt() -> PlainTextResponse:
    return PlainTextResponse(ROBOTS_TXT)


@router.get("/favicon.ico")
def favicon() -> Response:
    return Response(content=b"", media_type="image/x-icon")


@router.get("/{path:path}", response_class=HTMLResponse)
def decoy_page(
    request: Request,
    path: str,
    telemetry: Telemetry = Depends(get_telemetry),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    user_agent = request.headers.get("user-agent", "")
    host = request.headers.get("host", "")

    logger.debug(
        "request_received",
        host=host,
        user_agent=user_agent,
        remote_addr=request.client.host if request.client else None,
        x_forwarded_for=request.headers.get("x-forwarded-for"),
    )

    if is_counted(user_agent):
        logger.info("unlisted_client_detected", user_agent=user_agent)
        telemetry.record_observation(user_agent)

    html = render_template(
        "decoy.html",
        {
            "current_name": current_name(host),
            "links": build_links(settings.domain),
        },
    )

    return HTMLResponse(
        content=html,
        headers={
            "Keep-Alive": "timeout=5, max=1000",
            "Connection": "Keep-Alive",
            "Cache-Control": "no-cache, no-store, must-revalidate",
            "Server": pick_server(),
        },
    )

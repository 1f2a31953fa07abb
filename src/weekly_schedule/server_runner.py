"""Helpers to launch the schedule API server."""

from __future__ import annotations

import logging
import threading
import webbrowser
from typing import Optional

import uvicorn

from .config import ServerSettings
from .webapp import create_app

logger = logging.getLogger(__name__)

BROWSER_DELAY_SECONDS = 1.0


def run_server(
    *,
    settings: Optional[ServerSettings] = None,
    open_browser: bool = False,
    log_level: str = "info",
) -> None:
    """Start the FastAPI app under uvicorn and optionally open a browser tab."""
    resolved = settings or ServerSettings.from_env()
    app = create_app(settings=resolved)

    if open_browser:
        timer = threading.Timer(
            BROWSER_DELAY_SECONDS, _open_schedule_page, args=(schedule_url(resolved),)
        )
        timer.daemon = True
        timer.start()

    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    uvicorn.run(app, host=resolved.host, port=resolved.port, log_level=log_level)


def schedule_url(settings: ServerSettings) -> str:
    """URL a local browser can reach; a wildcard bind maps to loopback."""
    host = "127.0.0.1" if settings.host in ("0.0.0.0", "::") else settings.host
    return f"http://{host}:{settings.port}/"


def _open_schedule_page(url: str) -> None:
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error:
        logger.exception("Browser launch failed for %s", url)
        return
    if not opened:
        logger.warning("No browser available to open %s", url)

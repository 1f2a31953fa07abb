"""FastAPI application that exposes the weekly schedule API."""

from __future__ import annotations

import logging
import os
import re
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import __version__
from .config import ServerSettings, configure_logging
from .errors import NotFoundError, ScheduleError, ValidationError
from .models import WEEKDAYS
from .store import ActivityStore

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Занятие удалено"
MAX_NAME_LENGTH = 50

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class ActivityPayload(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    day: str
    time: str
    duration: int = Field(gt=0, strict=True)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    @field_validator("day")
    @classmethod
    def _known_day(cls, value: str) -> str:
        if value not in WEEKDAYS:
            raise ValueError(f"day must be one of: {', '.join(WEEKDAYS)}")
        return value

    @field_validator("time")
    @classmethod
    def _clock_time(cls, value: str) -> str:
        if not _TIME_PATTERN.match(value):
            raise ValueError("time must be in HH:MM format")
        return value


def create_app(
    *,
    store: Optional[ActivityStore] = None,
    settings: Optional[ServerSettings] = None,
) -> FastAPI:
    """Instantiate the FastAPI application around an activity store."""
    resolved_store = store if store is not None else ActivityStore()
    resolved_settings = settings or ServerSettings()
    started_at = time.monotonic()

    app = FastAPI(title="Weekly Schedule", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = resolved_store
    app.state.settings = resolved_settings

    static_dir = Path(resolved_settings.static_dir or Path(__file__).parent / "static")
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    _register_error_handlers(app)

    @app.on_event("startup")
    async def _startup() -> None:
        configure_logging()
        logger.info(
            "Schedule API ready on http://%s:%s (pid %s).",
            resolved_settings.host,
            resolved_settings.port,
            os.getpid(),
        )

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        client = request.client.host if request.client else "-"
        logger.info("%s %s from %s", request.method, request.url.path, client)
        return await call_next(request)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.monotonic() - started_at,
        }

    @app.get("/api/activities")
    def list_activities(request: Request) -> List[Dict[str, Any]]:
        return [activity.to_dict() for activity in request.app.state.store.list()]

    @app.post("/api/activities", status_code=status.HTTP_201_CREATED)
    def create_activity(payload: ActivityPayload, request: Request) -> Dict[str, Any]:
        activity = request.app.state.store.create(
            name=payload.name,
            day=payload.day,
            time=payload.time,
            duration=payload.duration,
        )
        return activity.to_dict()

    @app.delete("/api/activities/{activity_id}")
    def delete_activity(activity_id: str, request: Request) -> Dict[str, Any]:
        request.app.state.store.delete(activity_id)
        return {"message": DELETED_MESSAGE}

    @app.get("/{full_path:path}")
    def index(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise NotFoundError(full_path, message="Not found")
        index_path = (static_dir / "index.html").resolve()
        if not index_path.exists():
            raise NotFoundError(full_path, message="UI not found")
        return FileResponse(index_path)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ScheduleError)
    async def _schedule_error_handler(request: Request, exc: ScheduleError):
        logger.warning(
            "%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(_validation_details(exc))
        logger.warning("Invalid payload on %s: %s", request.url.path, error.details)
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def _validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

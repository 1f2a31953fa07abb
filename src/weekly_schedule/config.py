"""Configuration models and helpers for the weekly scheduler."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_API_URL = "http://127.0.0.1:3000"


@dataclass(slots=True)
class ServerSettings:
    """Runtime configuration for the API server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    static_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        env = os.environ if environ is None else environ
        port_value = env.get("PORT")
        try:
            port = int(port_value) if port_value else DEFAULT_PORT
        except ValueError as exc:
            raise ValueError(f"PORT must be an integer, got {port_value!r}") from exc
        return cls(host=env.get("HOST") or DEFAULT_HOST, port=port)


@dataclass(slots=True)
class GridSettings:
    """Shape of the weekly time-slot grid."""

    start_hour: int = 9
    end_hour: int = 20
    interval_minutes: int = 30


@dataclass(slots=True)
class ClientSettings:
    """Where the schedule client finds the API."""

    base_url: str = DEFAULT_API_URL
    timeout: float = 5.0

    @classmethod
    def from_env(
        cls,
        base_url: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ClientSettings":
        env = os.environ if environ is None else environ
        url = base_url or env.get("SCHEDULE_API_URL") or DEFAULT_API_URL
        return cls(base_url=url.rstrip("/"))


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Install the root log handler shared by the CLI and the server."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)

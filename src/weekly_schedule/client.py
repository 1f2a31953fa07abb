"""HTTP client for the schedule API with a local snapshot fallback.

Reads go to the server first; when it cannot be reached (or answers with an
error) the last snapshot written to disk is returned instead. Every
successful fetch or mutation overwrites the snapshot.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import requests
from requests.utils import quote

from .config import ClientSettings
from .models import Activity
from .paths import get_snapshot_path

logger = logging.getLogger(__name__)


class ScheduleAPIError(Exception):
    """The schedule API rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(slots=True)
class FetchResult:
    activities: list[Activity]
    from_cache: bool = False
    error: Optional[str] = None


class SnapshotCache:
    """JSON file holding the last known activities and form values."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else get_snapshot_path()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read snapshot %s; ignoring it.", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def load_activities(self) -> list[Activity]:
        activities: list[Activity] = []
        for item in self._read().get("activities", []):
            try:
                activities.append(Activity.from_dict(item))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed cached activity: %r", item)
        return activities

    def save_activities(self, activities: list[Activity]) -> None:
        data = self._read()
        data["activities"] = [activity.to_dict() for activity in activities]
        self._write(data)

    def load_form(self) -> dict[str, Any]:
        form = self._read().get("form", {})
        return form if isinstance(form, dict) else {}

    def save_form(self, values: dict[str, Any]) -> None:
        data = self._read()
        data["form"] = dict(values)
        self._write(data)


class ScheduleClient:
    """Talk to the schedule API and keep the local snapshot current."""

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        cache: Optional[SnapshotCache] = None,
    ) -> None:
        self.settings = settings or ClientSettings.from_env()
        self.cache = cache or SnapshotCache()

    @property
    def activities_url(self) -> str:
        return f"{self.settings.base_url}/api/activities"

    def list_activities(self) -> FetchResult:
        try:
            resp = requests.get(self.activities_url, timeout=self.settings.timeout)
            if resp.status_code != 200:
                raise ScheduleAPIError(_response_message(resp), resp.status_code)
            body = resp.json()
            if not isinstance(body, list):
                raise ScheduleAPIError("Unexpected response body: expected a list", resp.status_code)
            activities = [Activity.from_dict(item) for item in body]
        except (
            requests.RequestException, ScheduleAPIError, ValueError, KeyError, TypeError
        ) as exc:
            logger.warning("Falling back to cached activities: %s", exc)
            return FetchResult(
                activities=self.cache.load_activities(),
                from_cache=True,
                error=str(exc),
            )
        self.cache.save_activities(activities)
        return FetchResult(activities=activities)

    def add_activity(self, name: str, day: str, time: str, duration: int) -> Activity:
        payload = {"name": name, "day": day, "time": time, "duration": duration}
        self.cache.save_form(payload)
        resp = self._send("post", self.activities_url, json=payload)
        if resp.status_code != 201:
            raise ScheduleAPIError(_response_message(resp), resp.status_code)
        activity = Activity.from_dict(resp.json())
        cached = self.cache.load_activities()
        cached.append(activity)
        self.cache.save_activities(cached)
        return activity

    def delete_activity(self, activity_id: str) -> str:
        resp = self._send("delete", f"{self.activities_url}/{quote(activity_id, safe='')}")
        if resp.status_code != 200:
            raise ScheduleAPIError(_response_message(resp), resp.status_code)
        remaining = [a for a in self.cache.load_activities() if a.id != activity_id]
        self.cache.save_activities(remaining)
        return _response_message(resp)

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            return requests.request(method, url, timeout=self.settings.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("Request %s %s failed: %s", method.upper(), url, exc)
            raise ScheduleAPIError(f"Server unreachable: {exc}") from exc


def _response_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {resp.status_code}"

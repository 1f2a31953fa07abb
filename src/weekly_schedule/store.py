"""In-memory activity store enforcing one activity per (day, time) slot."""

from __future__ import annotations

import logging
import threading
import time as _time
from typing import Callable, Optional

from .errors import ConflictError, NotFoundError
from .models import Activity

logger = logging.getLogger(__name__)


class ActivityStore:
    """Own the process-wide collection of activities.

    The store starts empty and is discarded with the process. Mutations run
    under a single lock so the slot check and the append cannot interleave
    with another request served from the thread pool.
    """

    def __init__(self, clock: Callable[[], float] = _time.time) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._activities: list[Activity] = []
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._activities)

    def list(self) -> list[Activity]:
        with self._lock:
            return list(self._activities)

    def get(self, activity_id: str) -> Activity:
        with self._lock:
            index = self._index_of(activity_id)
            if index is None:
                raise NotFoundError(activity_id)
            return self._activities[index]

    def find_slot(self, day: str, time: str) -> Optional[Activity]:
        with self._lock:
            return self._find_slot(day, time)

    def create(self, name: str, day: str, time: str, duration: int) -> Activity:
        with self._lock:
            if self._find_slot(day, time) is not None:
                logger.info("Slot %s %s is already taken.", day, time)
                raise ConflictError(day, time)
            activity = Activity(
                id=self._next_id(),
                name=name,
                day=day,
                time=time,
                duration=duration,
            )
            self._activities.append(activity)
        logger.info("Created activity %s at %s %s.", activity.id, day, time)
        return activity

    def delete(self, activity_id: str) -> Activity:
        with self._lock:
            index = self._index_of(activity_id)
            if index is None:
                raise NotFoundError(activity_id)
            removed = self._activities.pop(index)
        logger.info("Deleted activity %s.", activity_id)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._activities.clear()

    def _find_slot(self, day: str, time: str) -> Optional[Activity]:
        for activity in self._activities:
            if activity.day == day and activity.time == time:
                return activity
        return None

    def _index_of(self, activity_id: str) -> Optional[int]:
        for index, activity in enumerate(self._activities):
            if activity.id == activity_id:
                return index
        return None

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped so ids stay strictly increasing.
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

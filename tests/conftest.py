"""Shared fixtures for the schedule tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weekly_schedule.store import ActivityStore
from weekly_schedule.webapp import create_app


@pytest.fixture
def store() -> ActivityStore:
    return ActivityStore()


@pytest.fixture
def api(store: ActivityStore) -> TestClient:
    return TestClient(create_app(store=store))


@pytest.fixture
def yoga() -> dict[str, object]:
    return {"name": "Yoga", "day": "понедельник", "time": "09:00", "duration": 60}

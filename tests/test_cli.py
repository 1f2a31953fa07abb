"""Tests for CLI entrypoints."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest
from typer.testing import CliRunner

from weekly_schedule import cli
from weekly_schedule.client import FetchResult, ScheduleAPIError, SnapshotCache
from weekly_schedule.config import ServerSettings
from weekly_schedule.models import Activity

runner = CliRunner()


class _FakeClient:
    def __init__(self, cache: SnapshotCache, from_cache: bool = False) -> None:
        self.cache = cache
        self.from_cache = from_cache
        self.added: list[tuple[Any, ...]] = []
        self.deleted: list[str] = []
        self.activities = [
            Activity(id="1", name="Yoga", day="понедельник", time="09:00", duration=60)
        ]

    def list_activities(self) -> FetchResult:
        return FetchResult(
            activities=self.activities,
            from_cache=self.from_cache,
            error="offline" if self.from_cache else None,
        )

    def add_activity(self, name: str, day: str, time: str, duration: int) -> Activity:
        self.added.append((name, day, time, duration))
        if (day, time) == ("понедельник", "09:00"):
            raise ScheduleAPIError("Занятие пересекается с существующим.", 400)
        return Activity(id="2", name=name, day=day, time=time, duration=duration)

    def delete_activity(self, activity_id: str) -> str:
        if activity_id != "1":
            raise ScheduleAPIError("Занятие не найдено", 404)
        self.deleted.append(activity_id)
        return "Занятие удалено"


@pytest.fixture
def fake(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> _FakeClient:
    client = _FakeClient(SnapshotCache(tmp_path / "snapshot.json"))

    def _factory(url: Optional[str]) -> _FakeClient:
        return client

    monkeypatch.setattr(cli, "_client", _factory)
    return client


def test_list_prints_activities(fake: _FakeClient) -> None:
    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 0
    assert "Yoga" in result.stdout


def test_grid_warns_when_using_cache(fake: _FakeClient) -> None:
    fake.from_cache = True
    result = runner.invoke(cli.app, ["grid"])
    assert result.exit_code == 0
    assert "Время" in result.stdout
    assert "Yoga" in result.stdout


def test_add_uses_remembered_form_values(fake: _FakeClient) -> None:
    fake.cache.save_form({"day": "среда", "time": "18:00", "duration": 45})

    result = runner.invoke(cli.app, ["add", "Swim"])

    assert result.exit_code == 0
    assert fake.added == [("Swim", "среда", "18:00", 45)]
    assert "id 2" in result.stdout


def test_add_requires_slot_without_history(fake: _FakeClient) -> None:
    result = runner.invoke(cli.app, ["add", "Swim"])
    assert result.exit_code == 2
    assert fake.added == []


def test_add_conflict_exits_nonzero(fake: _FakeClient) -> None:
    result = runner.invoke(
        cli.app,
        ["add", "Pilates", "--day", "понедельник", "--time", "09:00", "--duration", "45"],
    )
    assert result.exit_code == 1


def test_delete_success_and_missing(fake: _FakeClient) -> None:
    ok = runner.invoke(cli.app, ["delete", "1"])
    assert ok.exit_code == 0
    assert "Занятие удалено" in ok.stdout

    missing = runner.invoke(cli.app, ["delete", "404"])
    assert missing.exit_code == 1
    assert fake.deleted == ["1"]


def test_serve_passes_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def _run_server(*, settings: ServerSettings, open_browser: bool) -> None:
        captured["settings"] = settings
        captured["open_browser"] = open_browser

    monkeypatch.setattr(cli, "run_server", _run_server)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("PORT", "4000")

    result = runner.invoke(cli.app, ["serve", "--host", "127.0.0.1"])

    assert result.exit_code == 0
    assert captured["settings"].host == "127.0.0.1"
    assert captured["settings"].port == 4000
    assert captured["open_browser"] is False

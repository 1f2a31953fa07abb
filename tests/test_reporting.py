"""Tests for the time-slot grid and console rendering."""

from __future__ import annotations

import pytest

from weekly_schedule.config import GridSettings, ServerSettings
from weekly_schedule.models import WEEKDAYS, Activity, generate_time_slots
from weekly_schedule.reporting import (
    GridPrinter,
    format_duration,
    print_activity_list,
    sort_activities,
)


def test_default_slots_cover_morning_to_evening() -> None:
    slots = generate_time_slots()
    assert len(slots) == 24
    assert slots[0] == "09:00"
    assert slots[-1] == "20:30"


def test_slots_stop_after_half_past_last_hour() -> None:
    assert generate_time_slots(9, 10, 15) == [
        "09:00", "09:15", "09:30", "09:45", "10:00", "10:15", "10:30",
    ]


def test_slots_reject_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        generate_time_slots(interval_minutes=0)


def test_grid_places_activity_in_its_cell() -> None:
    activity = Activity(id="1", name="Yoga", day="среда", time="10:00", duration=60)

    lines = GridPrinter(GridSettings(start_hour=9, end_hour=10)).render([activity])

    assert len(WEEKDAYS) == 7
    assert lines[0].startswith("Время")
    row = next(line for line in lines if line.startswith("10:00"))
    cells = [cell.strip() for cell in row.split("|")]
    assert cells[WEEKDAYS.index("среда") + 1] == "Yoga"
    assert all(cell == "" for i, cell in enumerate(cells[1:]) if i != 2)


def test_grid_truncates_long_names() -> None:
    activity = Activity(id="1", name="A" * 40, day="понедельник", time="09:00", duration=30)
    row = GridPrinter().render([activity])[2]
    assert "…" in row


def test_sort_orders_by_weekday_then_time() -> None:
    items = [
        Activity(id="1", name="b", day="вторник", time="09:00", duration=30),
        Activity(id="2", name="a", day="понедельник", time="11:00", duration=30),
        Activity(id="3", name="c", day="понедельник", time="09:30", duration=30),
    ]
    assert [a.id for a in sort_activities(items)] == ["3", "2", "1"]


def test_activity_list_output(capsys: pytest.CaptureFixture[str]) -> None:
    print_activity_list([])
    assert "No activities scheduled." in capsys.readouterr().out

    print_activity_list([Activity(id="7", name="Yoga", day="среда", time="10:00", duration=90)])
    out = capsys.readouterr().out
    assert "Yoga" in out
    assert "1:30" in out


def test_format_duration() -> None:
    assert format_duration(45) == "0:45"
    assert format_duration(125) == "2:05"


def test_server_settings_from_env() -> None:
    settings = ServerSettings.from_env({"HOST": "127.0.0.1", "PORT": "8080"})
    assert (settings.host, settings.port) == ("127.0.0.1", 8080)
    assert ServerSettings.from_env({}).port == 3000
    with pytest.raises(ValueError):
        ServerSettings.from_env({"PORT": "abc"})

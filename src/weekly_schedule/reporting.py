"""Console rendering of the weekly schedule grid."""

from __future__ import annotations

from typing import Iterable, Optional

from .config import GridSettings
from .models import WEEKDAYS, Activity, generate_time_slots

TIME_HEADER = "Время"
CELL_WIDTH = 14


class GridPrinter:
    """Render the 7-day x time-slot grid in the console."""

    def __init__(self, settings: Optional[GridSettings] = None) -> None:
        self.settings = settings or GridSettings()

    def print_grid(self, activities: Iterable[Activity]) -> None:
        for line in self.render(activities):
            print(line)

    def render(self, activities: Iterable[Activity]) -> list[str]:
        lookup = index_by_slot(activities)
        slots = generate_time_slots(
            self.settings.start_hour,
            self.settings.end_hour,
            self.settings.interval_minutes,
        )
        header = [f"{TIME_HEADER:<6}"] + [_cell(day.capitalize()) for day in WEEKDAYS]
        lines = [" | ".join(header), "-" * (9 + (CELL_WIDTH + 3) * len(WEEKDAYS) - 3)]
        for time in slots:
            row = [f"{time:<6}"]
            for day in WEEKDAYS:
                activity = lookup.get((day, time))
                row.append(_cell(activity.name if activity else ""))
            lines.append(" | ".join(row))
        return lines


def print_activity_list(activities: Iterable[Activity]) -> None:
    ordered = sort_activities(activities)
    if not ordered:
        print("No activities scheduled.")
        return
    for activity in ordered:
        print(
            f"  {activity.id:<15} {activity.day:<12} {activity.time:<6} "
            f"{format_duration(activity.duration):>6}  {activity.name}"
        )


def index_by_slot(activities: Iterable[Activity]) -> dict[tuple[str, str], Activity]:
    lookup: dict[tuple[str, str], Activity] = {}
    for activity in activities:
        lookup.setdefault(activity.slot, activity)
    return lookup


def sort_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Order activities by weekday, then start time; unknown days go last."""
    day_order = {day: position for position, day in enumerate(WEEKDAYS)}
    return sorted(
        activities,
        key=lambda item: (day_order.get(item.day, len(WEEKDAYS)), item.time),
    )


def format_duration(minutes: int) -> str:
    hours, remainder = divmod(int(minutes), 60)
    return f"{hours:d}:{remainder:02d}"


def _cell(text: str) -> str:
    if len(text) > CELL_WIDTH:
        text = text[: CELL_WIDTH - 1] + "…"
    return f"{text:<{CELL_WIDTH}}"

"""Domain models for scheduled activities and the weekly grid."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

WEEKDAYS: tuple[str, ...] = (
    "понедельник",
    "вторник",
    "среда",
    "четверг",
    "пятница",
    "суббота",
    "воскресенье",
)


@dataclass(slots=True)
class Activity:
    """A single activity occupying one (day, time) slot of the week."""

    id: str
    name: str
    day: str
    time: str
    duration: int

    @property
    def slot(self) -> tuple[str, str]:
        return (self.day, self.time)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Activity":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            day=data["day"],
            time=data["time"],
            duration=int(data["duration"]),
        )


def generate_time_slots(
    start_hour: int = 9, end_hour: int = 20, interval_minutes: int = 30
) -> list[str]:
    """Return ``HH:MM`` labels from ``start_hour:00`` through ``end_hour:30``."""
    if interval_minutes <= 0:
        raise ValueError("interval_minutes must be positive")
    slots: list[str] = []
    for hour in range(start_hour, end_hour + 1):
        for minute in range(0, 60, interval_minutes):
            if hour == end_hour and minute > 30:
                break
            slots.append(f"{hour:02d}:{minute:02d}")
    return slots

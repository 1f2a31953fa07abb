"""Error hierarchy for scheduling failures.

Every error carries a machine-readable code, the HTTP status it maps to, and
a message that can be shown to the user as is.
"""

from __future__ import annotations

from typing import Any, Optional

CONFLICT_MESSAGE = "Занятие пересекается с существующим."
NOT_FOUND_MESSAGE = "Занятие не найдено"
INVALID_PAYLOAD_MESSAGE = "Пожалуйста, заполните все поля корректно."


class ScheduleError(Exception):
    """Base exception for all scheduling errors."""

    def __init__(self, message: str, code: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class ConflictError(ScheduleError):
    """An activity already occupies the requested (day, time) slot."""

    def __init__(self, day: str, time: str, message: str = CONFLICT_MESSAGE) -> None:
        super().__init__(message, "ACTIVITY_CONFLICT", 400)
        self.day = day
        self.time = time


class NotFoundError(ScheduleError):
    """No activity with the given identifier exists."""

    def __init__(self, activity_id: str, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(message, "ACTIVITY_NOT_FOUND", 404)
        self.activity_id = activity_id


class ValidationError(ScheduleError):
    """A create payload is missing fields or holds out-of-range values."""

    def __init__(
        self,
        details: Optional[list[dict[str, Any]]] = None,
        message: str = INVALID_PAYLOAD_MESSAGE,
    ) -> None:
        super().__init__(message, "VALIDATION_ERROR", 400)
        self.details = details or []

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message, "details": self.details}

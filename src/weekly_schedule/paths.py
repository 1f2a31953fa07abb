"""Helpers for locating application directories."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "WeeklySchedule"
APP_AUTHOR = "WeeklySchedule"


def get_cache_dir() -> Path:
    """Return the directory holding the client's offline snapshot."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_cache_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_snapshot_path() -> Path:
    return get_cache_dir() / "activities.json"

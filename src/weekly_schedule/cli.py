"""Command-line interface for the weekly scheduler."""

from __future__ import annotations

from typing import Optional

import typer

from .client import ScheduleAPIError, ScheduleClient
from .config import ClientSettings, ServerSettings, configure_logging
from .server_runner import run_server

app = typer.Typer(help="Weekly activity scheduler.")

URL_HELP = "Base URL of the schedule API (defaults to $SCHEDULE_API_URL)."


@app.callback(no_args_is_help=True)
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    configure_logging(verbose)


def _client(url: Optional[str]) -> ScheduleClient:
    return ScheduleClient(settings=ClientSettings.from_env(base_url=url))


@app.command()
def serve(
    host: Optional[str] = typer.Option(
        None, "--host", help="Interface to bind (defaults to $HOST or 0.0.0.0)."
    ),
    port: Optional[int] = typer.Option(
        None, "--port", min=1, max=65535, help="TCP port (defaults to $PORT or 3000)."
    ),
    open_browser: bool = typer.Option(
        False,
        "--open-browser/--no-open-browser",
        help="Open the schedule page in your default browser.",
    ),
) -> None:
    """Run the schedule API server."""
    settings = ServerSettings.from_env()
    if host:
        settings.host = host
    if port:
        settings.port = port
    run_server(settings=settings, open_browser=open_browser)


@app.command("list")
def list_command(
    url: Optional[str] = typer.Option(None, "--url", help=URL_HELP),
) -> None:
    """Print all scheduled activities."""
    from .reporting import print_activity_list

    result = _client(url).list_activities()
    if result.from_cache:
        typer.echo(f"Server unavailable ({result.error}); showing cached activities.", err=True)
    print_activity_list(result.activities)


@app.command()
def grid(
    url: Optional[str] = typer.Option(None, "--url", help=URL_HELP),
) -> None:
    """Print the weekly grid of activities."""
    from .reporting import GridPrinter

    result = _client(url).list_activities()
    if result.from_cache:
        typer.echo(f"Server unavailable ({result.error}); showing cached activities.", err=True)
    GridPrinter().print_grid(result.activities)


@app.command()
def add(
    name: str = typer.Argument(..., help="Activity name."),
    day: Optional[str] = typer.Option(None, "--day", help="Weekday, e.g. понедельник."),
    time: Optional[str] = typer.Option(None, "--time", help="Start time as HH:MM."),
    duration: Optional[int] = typer.Option(None, "--duration", help="Duration in minutes."),
    url: Optional[str] = typer.Option(None, "--url", help=URL_HELP),
) -> None:
    """Schedule a new activity; missing options reuse the last entered values."""
    client = _client(url)
    remembered = client.cache.load_form()
    day = day or remembered.get("day")
    time = time or remembered.get("time")
    duration = duration if duration is not None else remembered.get("duration")
    if not day or not time or duration is None:
        typer.echo("--day, --time and --duration are required.", err=True)
        raise typer.Exit(code=2)
    try:
        activity = client.add_activity(name.strip(), day, time, int(duration))
    except ScheduleAPIError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Added {activity.name} on {activity.day} at {activity.time} (id {activity.id}).")


@app.command()
def delete(
    activity_id: str = typer.Argument(..., help="Identifier of the activity to remove."),
    url: Optional[str] = typer.Option(None, "--url", help=URL_HELP),
) -> None:
    """Remove an activity by identifier."""
    try:
        message = _client(url).delete_activity(activity_id)
    except ScheduleAPIError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(message)

# src/kantai/cli.py
"""
Kantai Command Line Interface (CLI).

Terminal front end over the position engine, built with `typer` and `rich`.
Every command loads the dataset once, then issues pure queries against it.

Usage
-----
    $ kantai bounds --data data.yml
    $ kantai positions --at 1942-06-04
    $ kantai track yamato --at 1944-10-25
    $ kantai check
    $ kantai play --step-days 7

The dataset path defaults to `KANTAI_DATA` (see `kantai.core.settings`).
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kantai.core.contracts.dataset import Dataset
from kantai.core.engine import snapshot, time_bounds, track_up_to
from kantai.core.errors import KantaiError
from kantai.core.playback import PlaybackClock
from kantai.core.settings import load_settings
from kantai.core.timeutil import MS_PER_DAY, format_millis, to_millis
from kantai.io.loader import check_references, load_dataset

load_dotenv()

app = typer.Typer(
    help="Kantai Explorer: vessel positions over a historical timeline.",
    rich_markup_mode="markdown",
)
console = Console()

T = TypeVar("T")

DataOption = Annotated[
    Path | None,
    typer.Option("--data", "-d", help="Dataset document (.yml/.yaml/.json). Defaults to KANTAI_DATA."),
]
AtOption = Annotated[
    str | None,
    typer.Option("--at", "-t", help="Query date (ISO-8601). Defaults to the dataset's first date."),
]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _guard(fn: Callable[[], T]) -> T:
    """Run ``fn``, turning load/engine failures into a red message and exit code 1."""
    try:
        return fn()
    except (KantaiError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e


def _load(data: Path | None) -> Dataset:
    path = data if data is not None else Path(load_settings().data_path)
    return _guard(lambda: load_dataset(path))


def _query_time(dataset: Dataset, at: str | None) -> int:
    if at is not None:
        return _guard(lambda: to_millis(at))
    begin, _ = _guard(time_bounds(dataset).require)
    return begin


def _fmt(coord: tuple[float, float] | None) -> str:
    if coord is None:
        return "[dim]-[/dim]"
    return f"{coord[0]:.4f}, {coord[1]:.4f}"


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def bounds(data: DataOption = None) -> None:
    """Print the first and last date found anywhere in the dataset."""
    dataset = _load(data)
    begin, end = _guard(time_bounds(dataset).require)
    console.print(
        Panel.fit(
            f"Begin: [bold]{format_millis(begin)}[/bold]\nEnd:   [bold]{format_millis(end)}[/bold]",
            title="Time bounds",
            border_style="cyan",
        )
    )


@app.command()  # type: ignore[misc]
def positions(data: DataOption = None, at: AtOption = None) -> None:
    """Show every vessel's interpolated position at a date."""
    dataset = _load(data)
    t = _query_time(dataset, at)
    snap = snapshot(dataset, t)

    table = Table(title=f"Positions on {format_millis(t)}")
    table.add_column("Vessel", style="bold")
    table.add_column("Affiliation")
    table.add_column("Position (lat, lng)")
    table.add_column("Track points", justify="right")
    for frame in snap.frames:
        table.add_row(frame.name, frame.affiliation, _fmt(frame.position), str(len(frame.track)))
    console.print(table)
    console.print(f"[dim]{len(snap.positioned)}/{len(snap.frames)} vessels positioned[/dim]")


@app.command()  # type: ignore[misc]
def track(
    vessel_id: Annotated[str, typer.Argument(help="Vessel identifier in the dataset.")],
    data: DataOption = None,
    at: AtOption = None,
) -> None:
    """List the known positions of one vessel up to a date."""
    dataset = _load(data)
    vessel = dataset.vessels.get(vessel_id)
    if vessel is None:
        console.print(f"[bold red]Error:[/bold red] unknown vessel {vessel_id!r}")
        raise typer.Exit(code=1)

    t = _query_time(dataset, at)
    points = track_up_to(vessel, t, dataset.places)

    console.rule(f"[bold]{vessel.name}[/bold] up to {format_millis(t)}")
    for i, coord in enumerate(points, start=1):
        console.print(f" {i:02d}. {_fmt(coord)}")
    if len(points) < 2:
        console.print("[dim]Not enough points to draw a track yet.[/dim]")


@app.command()  # type: ignore[misc]
def check(data: DataOption = None) -> None:
    """Report place references that do not exist in the place registry."""
    dataset = _load(data)
    problems = check_references(dataset)
    if not problems:
        console.print("[bold green]All place references resolve.[/bold green]")
        return
    for problem in problems:
        console.print(f" [yellow]•[/yellow] {problem}")
    console.print(f"[bold red]{len(problems)} dangling reference(s)[/bold red]")
    raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def play(
    data: DataOption = None,
    step_days: Annotated[
        int | None,
        typer.Option("--step-days", "-s", min=1, help="Days per frame. Defaults to KANTAI_PLAYBACK_STEP_DAYS."),
    ] = None,
) -> None:
    """Step through the whole timeline, one row per frame."""
    dataset = _load(data)
    days = step_days if step_days is not None else load_settings().playback_step_days
    clock = _guard(lambda: PlaybackClock.over(time_bounds(dataset), days * MS_PER_DAY))

    table = Table(title="Playback")
    table.add_column("Date")
    table.add_column("Positioned", justify="right")
    table.add_column("Vessels")
    for t in clock:
        snap = snapshot(dataset, t)
        names = ", ".join(f.name for f in snap.positioned)
        table.add_row(format_millis(t), str(len(snap.positioned)), names or "[dim]-[/dim]")
    console.print(table)
    console.print(f"[dim]{len(clock)} frames, {days} day step[/dim]")


if __name__ == "__main__":
    app()

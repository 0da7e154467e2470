"""SwimTracker CLI application.

Usage:
    swimtracker swimmer add "Jane Doe" --location "Otters SC"
    swimtracker swimmer list
    swimtracker time add "Jane Doe" 1:05.30 -d 100m -s Freestyle -c "Club Champs"
    swimtracker profile "Jane Doe"
    swimtracker leaderboard
    swimtracker records --distance 100m
    swimtracker compare "Jane Doe" "John Roe"
    swimtracker score 58.20 -d 100m -s Freestyle
"""

from datetime import datetime
from pathlib import Path

import pydantic
import typer
from dotenv import load_dotenv

# Load .env file before settings are read
load_dotenv()
from rich.console import Console
from rich.table import Table

from swimtracker.config import get_settings
from swimtracker.logging import bind_context, clear_context, configure_logging
from swimtracker.models import Distance, PoolSize, Style, Swimmer, TimeRecord
from swimtracker.services import (
    TimeEntry,
    ValidationError,
    build_profile,
    build_time_record,
    compare_head_to_head,
    compute_placement_points,
    compute_standardized_points,
    group_records,
    index_best_times,
    is_personal_best,
    parse_time_string,
    rank_leaderboard,
    split_time_string,
    swimmer_times,
)
from swimtracker.snapshot import Snapshot, load_snapshot, save_snapshot

console = Console()
app = typer.Typer(
    name="swimtracker",
    help="Swim race results, personal bests and rankings",
    no_args_is_help=True,
)


class State:
    """Options shared by every command."""

    data_file: Path = Path("swimtracker.json")


state = State()


@app.callback()
def main_callback(
    data_file: Path | None = typer.Option(
        None, "--data-file", "-f", help="Snapshot file (default: DATA_FILE setting)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Swim race results, personal bests and rankings."""
    configure_logging(level=log_level)
    clear_context()
    state.data_file = data_file or get_settings().data_file
    bind_context(data_file=str(state.data_file))


# =============================================================================
# HELPERS
# =============================================================================


def _load() -> Snapshot:
    try:
        return load_snapshot(state.data_file)
    except pydantic.ValidationError as e:
        console.print(f"[red]❌ Invalid data file {state.data_file}:[/red]")
        for err in e.errors()[:5]:
            loc = ".".join(str(p) for p in err["loc"])
            console.print(f"   [yellow]⚠️  {loc}:[/yellow] {err['msg']}")
        raise typer.Exit(1) from None


def _require_swimmer(snapshot: Snapshot, ref: str) -> Swimmer:
    swimmer = snapshot.find_swimmer(ref)
    if swimmer is None:
        console.print(f"[red]Swimmer not found: {ref}[/red]")
        console.print("Run: swimtracker swimmer list")
        raise typer.Exit(1)
    return swimmer


def _print_validation_error(error: ValidationError) -> None:
    console.print()
    console.print("[bold red]❌ Validation Error[/bold red]")
    for e in error.errors:
        console.print(f"   [yellow]⚠️  {e.field}:[/yellow] {e.message}")
    console.print()


def _swimmer_names(snapshot: Snapshot) -> dict[str, str]:
    return {s.id: s.name for s in snapshot.swimmers}


def _make_times_table(
    title: str,
    records: list[TimeRecord],
    names: dict[str, str] | None = None,
    bests: dict | None = None,
) -> Table:
    """Create a table of time records, optionally with swimmer names and PB flags."""
    table = Table(title=title)
    table.add_column("Date")
    if names is not None:
        table.add_column("Swimmer", style="cyan")
    table.add_column("Event", style="magenta")
    table.add_column("Time", style="green")
    table.add_column("Place", justify="right")
    table.add_column("Pts", justify="right")
    table.add_column("FINA", justify="right")
    table.add_column("Competition")
    table.add_column("ID", style="dim")

    for record in records:
        time_str = record.time
        if bests is not None and is_personal_best(record, bests):
            time_str = f"{time_str} [bold yellow]PB[/bold yellow]"
        row = [record.date.isoformat()]
        if names is not None:
            row.append(names.get(record.swimmer_id, "Unknown"))
        row += [
            record.event_key.label,
            time_str,
            str(record.placement or "-"),
            str(record.points),
            str(record.fina_points or "-"),
            record.competition,
            record.id[:8],
        ]
        table.add_row(*row)

    return table


# =============================================================================
# SWIMMER COMMANDS
# =============================================================================

swimmer_app = typer.Typer(help="Swimmer profiles", no_args_is_help=True)
app.add_typer(swimmer_app, name="swimmer")


@swimmer_app.command("add")
def swimmer_add(
    name: str = typer.Argument(..., help="Swimmer name"),
    location: str = typer.Option("", "--location", "-l", help="Team or region"),
):
    """Add a swimmer."""
    snapshot = _load()
    try:
        swimmer = Swimmer(name=name, location=location)
    except pydantic.ValidationError as e:
        console.print(f"[red]Error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(1) from None

    save_snapshot(snapshot.add_swimmer(swimmer), state.data_file)
    console.print(f"[green]Added {swimmer.name}[/green] ({swimmer.id})")


@swimmer_app.command("list")
def swimmer_list():
    """List swimmers with their race count and points."""
    snapshot = _load()
    if not snapshot.swimmers:
        console.print("[yellow]No swimmers yet[/yellow]")
        console.print('Run: swimtracker swimmer add "Name"')
        return

    table = Table(title=f"Swimmers ({len(snapshot.swimmers)})")
    table.add_column("Name", style="cyan")
    table.add_column("Location")
    table.add_column("Races", justify="right")
    table.add_column("Points", justify="right", style="green")
    table.add_column("ID", style="dim")

    for swimmer in snapshot.swimmers:
        own = swimmer_times(swimmer.id, snapshot.times)
        table.add_row(
            swimmer.name,
            swimmer.location or "-",
            str(len(own)),
            str(sum(r.points for r in own)),
            swimmer.id,
        )

    console.print(table)


@swimmer_app.command("delete")
def swimmer_delete(
    swimmer_ref: str = typer.Argument(..., help="Swimmer name or ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a swimmer. Their times are kept."""
    snapshot = _load()
    swimmer = _require_swimmer(snapshot, swimmer_ref)

    if not yes and not typer.confirm(f"Delete {swimmer.name}?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    save_snapshot(snapshot.delete_swimmer(swimmer.id), state.data_file)
    console.print(f"[green]Deleted {swimmer.name}[/green]")


# =============================================================================
# TIME COMMANDS
# =============================================================================

time_app = typer.Typer(help="Race results", no_args_is_help=True)
app.add_typer(time_app, name="time")


@time_app.command("add")
def time_add(
    swimmer_ref: str = typer.Argument(..., help="Swimmer name or ID"),
    time: str = typer.Argument(..., help="Race time, e.g. 59.45 or 1:05.30"),
    distance: Distance = typer.Option(Distance.M100, "--distance", "-d", help="Race distance"),
    style: Style = typer.Option(Style.FREESTYLE, "--style", "-s", help="Swimming style"),
    pool_size: PoolSize = typer.Option(PoolSize.LONG_COURSE, "--pool", "-p", help="Pool size"),
    placement: int = typer.Option(1, "--placement", "-P", help="Finishing position"),
    competition: str = typer.Option("", "--competition", "-c", help="Competition name"),
    location: str = typer.Option("", "--location", "-l", help="Competition location"),
    race_date: datetime | None = typer.Option(
        None, "--date", formats=["%Y-%m-%d"], help="Race date (default: today)"
    ),
):
    """Log a race result."""
    snapshot = _load()
    swimmer = _require_swimmer(snapshot, swimmer_ref)

    try:
        minutes, seconds, centiseconds = split_time_string(time)
        entry = TimeEntry(
            swimmer_id=swimmer.id,
            distance=distance,
            style=style,
            pool_size=pool_size,
            minutes=minutes,
            seconds=seconds,
            centiseconds=centiseconds,
            placement=placement,
            competition=competition,
            competition_location=location,
        )
        if race_date is not None:
            entry = entry.model_copy(update={"date": race_date.date()})
        record = build_time_record(entry, snapshot.swimmers)
    except ValidationError as e:
        _print_validation_error(e)
        raise typer.Exit(1) from None

    bests_before = index_best_times(swimmer_times(swimmer.id, snapshot.times))
    save_snapshot(snapshot.add_time(record), state.data_file)

    console.print(
        f"[green]Recorded {record.event_key.label} {record.time} for {swimmer.name}[/green]"
    )
    console.print(f"Points: {record.points}  FINA: {record.fina_points}")
    previous = bests_before.get(record.event_key)
    if previous is None or record.total_seconds < previous.total_seconds:
        console.print("[bold yellow]New personal best![/bold yellow]")


@time_app.command("list")
def time_list(
    swimmer_ref: str = typer.Argument(None, help="Swimmer name or ID (default: all)"),
):
    """List race results, most recent first."""
    snapshot = _load()
    records = snapshot.times
    title = "All Times"
    if swimmer_ref:
        swimmer = _require_swimmer(snapshot, swimmer_ref)
        records = swimmer_times(swimmer.id, records)
        title = f"Times for {swimmer.name}"

    records = sorted(records, key=lambda r: r.date, reverse=True)
    console.print(
        _make_times_table(f"{title} ({len(records)})", records, names=_swimmer_names(snapshot))
    )


@time_app.command("delete")
def time_delete(
    record_id: str = typer.Argument(..., help="Record ID (or unique prefix)"),
):
    """Delete a race result."""
    snapshot = _load()
    matches = [t for t in snapshot.times if t.id.startswith(record_id)]
    if len(matches) != 1:
        reason = "No record" if not matches else f"{len(matches)} records"
        console.print(f"[red]{reason} matching '{record_id}'[/red]")
        raise typer.Exit(1)

    record = matches[0]
    save_snapshot(snapshot.delete_time(record.id), state.data_file)
    console.print(f"[green]Deleted {record}[/green]")


# =============================================================================
# VIEWS
# =============================================================================


@app.command("profile")
def profile(
    swimmer_ref: str = typer.Argument(..., help="Swimmer name or ID"),
):
    """Show a swimmer's personal bests, recent races and competitions."""
    snapshot = _load()
    swimmer = _require_swimmer(snapshot, swimmer_ref)
    settings = get_settings()
    view = build_profile(swimmer, snapshot.times, recent_limit=settings.recent_times_limit)

    location = f" ({swimmer.location})" if swimmer.location else ""
    console.print(f"[bold cyan]{swimmer.name}[/bold cyan]{location}")
    console.print(f"Races: {view.race_count}  Total points: [green]{view.total_points}[/green]")
    console.print()

    if not view.race_count:
        console.print("[yellow]No times recorded yet[/yellow]")
        return

    pb_table = Table(title="Personal Bests")
    pb_table.add_column("Event", style="magenta")
    pb_table.add_column("Time", style="green")
    pb_table.add_column("FINA", justify="right")
    pb_table.add_column("Date")
    pb_table.add_column("Competition")
    for record in view.personal_bests:
        pb_table.add_row(
            record.event_key.label,
            record.time,
            str(record.fina_points or "-"),
            record.date.isoformat(),
            record.competition,
        )
    console.print(pb_table)

    bests = index_best_times(swimmer_times(swimmer.id, snapshot.times))
    console.print(_make_times_table("Recent Races", view.recent, bests=bests))

    comp_table = Table(title="Competitions")
    comp_table.add_column("Competition", style="cyan")
    comp_table.add_column("Location")
    comp_table.add_column("Date")
    comp_table.add_column("Events", justify="right")
    comp_table.add_column("Points", justify="right", style="green")
    for comp in view.competitions:
        comp_table.add_row(
            comp.name,
            comp.location or "-",
            comp.date.isoformat(),
            str(comp.events),
            str(comp.points),
        )
    console.print(comp_table)


@app.command("leaderboard")
def leaderboard():
    """Rank swimmers by total placement points."""
    snapshot = _load()
    entries = rank_leaderboard(snapshot.swimmers, snapshot.times)
    if not entries:
        console.print("[yellow]No swimmers yet[/yellow]")
        return

    table = Table(title="Leaderboard")
    table.add_column("#", justify="right")
    table.add_column("Swimmer", style="cyan")
    table.add_column("Location")
    table.add_column("Races", justify="right")
    table.add_column("Points", justify="right", style="green")

    for rank, entry in enumerate(entries, start=1):
        table.add_row(
            str(rank),
            entry.name,
            entry.location or "-",
            str(entry.race_count),
            str(entry.total_points),
        )

    console.print(table)


@app.command("records")
def records(
    distance: Distance | None = typer.Option(None, "--distance", "-d", help="Filter by distance"),
    style: Style | None = typer.Option(None, "--style", "-s", help="Filter by style"),
    pool_size: PoolSize | None = typer.Option(None, "--pool", "-p", help="Filter by pool size"),
):
    """Show per-event rankings across all swimmers."""
    snapshot = _load()
    grouped = group_records(snapshot.times, distance=distance, style=style, pool_size=pool_size)
    if not grouped:
        console.print("[yellow]No records found for the selected filters[/yellow]")
        return

    names = _swimmer_names(snapshot)
    for event in grouped.values():
        table = Table(title=event.key.label)
        table.add_column("#", justify="right")
        table.add_column("Swimmer", style="cyan")
        table.add_column("Time", style="green")
        table.add_column("Date")
        table.add_column("Competition")
        for rank, record in event.ranked():
            marker = " [bold yellow]★[/bold yellow]" if rank == 1 else ""
            table.add_row(
                str(rank),
                names.get(record.swimmer_id, "Unknown"),
                f"{record.time}{marker}",
                record.date.isoformat(),
                record.competition,
            )
        console.print(table)


@app.command("compare")
def compare(
    swimmer1_ref: str = typer.Argument(..., help="First swimmer name or ID"),
    swimmer2_ref: str = typer.Argument(..., help="Second swimmer name or ID"),
):
    """Compare two swimmers' personal bests event by event."""
    snapshot = _load()
    swimmer1 = _require_swimmer(snapshot, swimmer1_ref)
    swimmer2 = _require_swimmer(snapshot, swimmer2_ref)

    entries = compare_head_to_head(swimmer1.id, swimmer2.id, snapshot.times)
    if not entries:
        console.print("[yellow]Neither swimmer has any times recorded[/yellow]")
        return

    table = Table(title=f"{swimmer1.name} vs {swimmer2.name}")
    table.add_column("Event", style="magenta")
    table.add_column(swimmer1.name, justify="right")
    table.add_column(swimmer2.name, justify="right")
    table.add_column("Winner", style="green")

    wins = {1: 0, 2: 0}
    for entry in entries:
        wins[entry.winner] += 1
        table.add_row(
            entry.event,
            entry.swimmer1_time.time if entry.swimmer1_time else "-",
            entry.swimmer2_time.time if entry.swimmer2_time else "-",
            swimmer1.name if entry.winner == 1 else swimmer2.name,
        )

    console.print(table)
    console.print(f"{swimmer1.name} {wins[1]} - {wins[2]} {swimmer2.name}")


@app.command("score")
def score(
    time: str = typer.Argument(..., help="Race time, e.g. 59.45 or 1:05.30"),
    distance: Distance = typer.Option(Distance.M100, "--distance", "-d", help="Race distance"),
    style: Style = typer.Option(Style.FREESTYLE, "--style", "-s", help="Swimming style"),
    pool_size: PoolSize = typer.Option(PoolSize.LONG_COURSE, "--pool", "-p", help="Pool size"),
    placement: int | None = typer.Option(None, "--placement", "-P", help="Finishing position"),
):
    """Show the points a time would score, without saving it."""
    try:
        race_time = parse_time_string(time)
    except ValidationError as e:
        _print_validation_error(e)
        raise typer.Exit(1) from None

    fina = compute_standardized_points(race_time.total_seconds, style, distance, pool_size)
    console.print(f"{distance.value} {style.value} ({pool_size.value}) {race_time.display}")
    console.print(f"FINA points: [green]{fina}[/green]")
    if placement is not None:
        console.print(f"Placement points: [green]{compute_placement_points(placement)}[/green]")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

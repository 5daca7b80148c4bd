"""WeekWise CLI — grid, editing, statistics and the local server."""

import dataclasses
import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Annotated

import click
import typer

from weekwise.application.config import resolve_config
from weekwise.application.planner_service import DayColumn, PlannerService
from weekwise.domain.constants import EMPTY_SLOT_PLACEHOLDER, UNTITLED_SLOT_PLACEHOLDER
from weekwise.domain.errors import InvalidSlotError
from weekwise.domain.schedule.geometry import parse_hour
from weekwise.domain.schedule.models import Day, SlotType
from weekwise.domain.schedule.ports import SystemClock
from weekwise.interface._common import _planner, _resolve_with_overrides, fail

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="weekwise: Your week. One page. Zero excuses.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

config_app = typer.Typer(help="Manage weekwise configuration.")
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

TYPE_COLORS = {
    SlotType.STUDY: "green",
    SlotType.ESSENTIAL: "cyan",
    SlotType.NONESSENTIAL: "yellow",
    SlotType.EMPTY: "bright_black",
}

BAR_WIDTH = 40


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 1,
    data_dir: Annotated[
        Path | None, typer.Option(help="Directory holding the planner data.")
    ] = None,
):
    """Global settings for weekwise."""
    ctx.ensure_object(dict)
    ctx.obj["verbose_bonus"] = verbose
    ctx.obj["data_dir"] = data_dir
    if verbose > 1:
        logging.getLogger().setLevel(logging.DEBUG)


def _parse_day(value: str) -> Day:
    try:
        return Day.parse(value)
    except InvalidSlotError as e:
        raise typer.BadParameter(str(e)) from None


def _parse_hour(value: str) -> int:
    try:
        return parse_hour(value)
    except InvalidSlotError as e:
        raise typer.BadParameter(str(e)) from None


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _render_column(column: DayColumn) -> None:
    header = f"{column.day.value}  ({column.subtitle})"
    typer.secho(header, bold=True, fg="magenta" if column.is_today else None)
    for cell in column.cells:
        slot = cell.slot
        if slot.title:
            title = slot.title
        else:
            title = (
                EMPTY_SLOT_PLACEHOLDER if slot.type is SlotType.EMPTY else UNTITLED_SLOT_PLACEHOLDER
            )
        marker = "*" if cell.is_now else " "
        kind = typer.style(f"{slot.type.value:<12}", fg=TYPE_COLORS[slot.type])
        line = f" {marker} {cell.label:>8}  {kind} {title}"
        if slot.notes:
            line += f"  ({slot.notes})"
        typer.echo(line)
    typer.echo("")


def _render_grid(planner: PlannerService, day: Day | None) -> None:
    columns = planner.grid(now=SystemClock().now())
    for column in columns:
        if day is None or column.day is day:
            _render_column(column)


def _bar(fraction: float) -> str:
    return "█" * round(fraction * BAR_WIDTH)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def show(
    ctx: typer.Context,
    day: Annotated[
        str | None, typer.Option("--day", "-d", help="Only show this day.")
    ] = None,
    watch: Annotated[
        bool, typer.Option("--watch", help="Redraw periodically to follow the current hour.")
    ] = False,
):
    """Show the weekly grid. The current hour is marked with [bold]*[/bold]."""
    selected = _parse_day(day) if day else None
    config = _resolve_with_overrides(ctx)
    planner = _planner(ctx)

    if not watch:
        _render_grid(planner, selected)
        return

    try:
        while True:
            click.clear()
            _render_grid(planner, selected)
            time.sleep(config.refresh_interval_seconds)
    except KeyboardInterrupt:
        raise typer.Exit() from None


@app.command("set")
def set_cmd(
    ctx: typer.Context,
    day: Annotated[str, typer.Argument(help="Day name, e.g. Monday or mon.")],
    hour: Annotated[str, typer.Argument(help="Hour: 20, 8PM or '8:00 PM'.")],
    slot_type: Annotated[
        SlotType, typer.Option("--type", "-t", help="What the hour is for.")
    ] = SlotType.STUDY,
    title: Annotated[str, typer.Option(help="Short label.")] = "",
    notes: Annotated[str, typer.Option(help="Free-text detail.")] = "",
):
    """[bold green]Plan[/bold green] an hour."""
    parsed_day = _parse_day(day)
    parsed_hour = _parse_hour(hour)
    planner = _planner(ctx)
    try:
        slot = planner.set_slot(parsed_day, parsed_hour, slot_type, title=title, notes=notes)
    except InvalidSlotError as e:
        raise fail(e) from None

    if slot.is_default:
        typer.echo(f"Cleared {parsed_day.value} {hour}.")
    else:
        typer.secho(f"Saved {parsed_day.value} {hour}: {slot.type.value}", fg="green")


@app.command()
def delete(
    ctx: typer.Context,
    day: Annotated[str, typer.Argument(help="Day name, e.g. Monday or mon.")],
    hour: Annotated[str, typer.Argument(help="Hour: 20, 8PM or '8:00 PM'.")],
):
    """Remove whatever is planned for an hour."""
    parsed_day = _parse_day(day)
    parsed_hour = _parse_hour(hour)
    planner = _planner(ctx)
    try:
        planner.delete_slot(parsed_day, parsed_hour)
    except InvalidSlotError as e:
        raise fail(e) from None
    typer.echo(f"Deleted {parsed_day.value} {hour}.")


@app.command()
def clear(
    ctx: typer.Context,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Bypass confirmation.")
    ] = False,
):
    """Wipe the whole week."""
    if not force and not typer.confirm("Clear every slot in the week?"):
        raise typer.Exit(1)
    _planner(ctx).clear()
    typer.secho("Week cleared.", fg="yellow")


@app.command()
def stats(
    ctx: typer.Context,
    day: Annotated[
        str | None, typer.Option("--day", "-d", help="Statistics for a single day.")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Focus scores and the weekly slot mix."""
    selected = _parse_day(day) if day else None
    planner = _planner(ctx)

    if selected is not None:
        day_stats = planner.day_statistics(selected)
        if json_output:
            typer.echo(json.dumps(dataclasses.asdict(day_stats), indent=2))
            return
        counts = day_stats.counts
        typer.secho(f"{selected.value}: {day_stats.score}/100", bold=True)
        typer.echo(
            f"Filled {day_stats.filled_count}/{day_stats.total_slots}  "
            f"Points {day_stats.raw_score}/{day_stats.max_possible}"
        )
        typer.echo(
            f"Study {counts.study}  Essential {counts.essential}  "
            f"Non-essential {counts.nonessential}  Empty {counts.empty}"
        )
        return

    week = planner.week_statistics()
    if json_output:
        payload = dataclasses.asdict(week)
        payload.pop("days")
        typer.echo(json.dumps(payload, indent=2))
        return

    charts = planner.charts()
    for name, value in charts.summary_cards:
        typer.echo(f"{name:<22}{value}")

    typer.secho("\n0 — 100 score per day", bold=True)
    for bar in charts.score_bars:
        typer.echo(f"{bar.label}  {_bar(bar.fraction):<{BAR_WIDTH}} {bar.value}")

    typer.secho("\nWeekly slot distribution", bold=True)
    for segment in charts.mix_segments:
        typer.echo(
            f"{segment.label:<13}"
            + typer.style(
                f"{_bar(segment.fraction):<{BAR_WIDTH}}", fg=TYPE_COLORS[segment.slot_type]
            )
            + f" {segment.value}"
        )


@app.command()
def serve(
    ctx: typer.Context,
    port: Annotated[int | None, typer.Option(help="Port to bind the server to.")] = None,
    host: Annotated[str | None, typer.Option(help="Host to bind the server to.")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload.")] = False,
    ephemeral: Annotated[
        bool, typer.Option("--ephemeral", help="Keep the week in memory only.")
    ] = False,
):
    """Run the local JSON API for the single-page front end."""
    import uvicorn

    config = _resolve_with_overrides(ctx, host=host, port=port)

    # The app resolves its own config, possibly in a reloader subprocess.
    os.environ["WEEKWISE_DATA_DIR"] = str(config.data_dir)
    if ephemeral:
        os.environ["WEEKWISE_BACKEND"] = "memory"

    logger.info(f"Serving weekwise on http://{config.host}:{config.port}")
    uvicorn.run("weekwise.server:app", host=config.host, port=config.port, reload=reload)


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = resolve_config()
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))

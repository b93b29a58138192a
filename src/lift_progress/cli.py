#!/usr/bin/env python3
"""
Lift Progress CLI.

Strength training progress from your workout history.

Usage:
    lift-progress exercises                 # Tracked exercises, most recent first
    lift-progress progress "Bench Press|Barbell" --range 3M
    lift-progress distribution --range 3M   # Volume share by body part
    lift-progress heatmap                   # Last 12 weeks of training
    lift-progress prs --limit 10            # Significant PR timeline
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .analysis.distribution import PALETTE
from .config import get_settings
from .db.json_store import JsonRecordStore
from .integrations.record_store import HttpRecordStore
from .models import TimeRange
from .services.pr_tracker import PersonalRecordTracker
from .services.progress_service import ExerciseProgressService

console = Console()


INTENSITY_STYLES = ["grey30", "green4", "green3", "green1", "bold bright_green"]
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def build_service(args) -> Tuple[ExerciseProgressService, Union[JsonRecordStore, HttpRecordStore]]:
    """Wire the progress service and its record store from CLI options and settings."""
    settings = get_settings()
    user_id = args.user or settings.user_id

    if args.data_dir is None and settings.record_store_url:
        store = HttpRecordStore(settings.record_store_url, timeout=settings.record_store_timeout)
    else:
        store = JsonRecordStore(args.data_dir or settings.data_dir)

    pr_tracker = PersonalRecordTracker(
        record_source=store,
        catalog=store,
        user_provider=lambda: user_id,
        cutoff_date=settings.pr_cutoff_date,
    )
    service = ExerciseProgressService(
        record_source=store,
        catalog=store,
        pr_tracker=pr_tracker,
        user_provider=lambda: user_id,
        settings=settings,
    )
    return service, store


def format_weight(weight: float) -> str:
    return f"{weight:g}"


async def cmd_exercises(args, service: ExerciseProgressService) -> int:
    """List tracked exercise + equipment series."""
    items = await service.get_exercise_list()

    if not items:
        console.print("No exercise history found.")
        return 0

    table = Table(title="Tracked Exercises", box=box.ROUNDED)
    table.add_column("Key", style="cyan")
    table.add_column("Body Part")
    table.add_column("Category", style="bold")
    table.add_column("Sessions", justify="right")
    table.add_column("Latest", justify="right")

    for item in items:
        table.add_row(
            item.key,
            item.body_part,
            item.category.value,
            str(item.session_count),
            item.latest_date or "-",
        )

    console.print(table)
    return 0


async def cmd_progress(args, service: ExerciseProgressService) -> int:
    """Show sessions and stats for one exercise."""
    data = await service.get_exercise_progress_data(args.key, args.range)

    if data is None or not data.sessions:
        console.print(f"[red]No data for {args.key!r} in range {args.range}.[/red]")
        return 1

    stats = data.stats
    improvement_color = "green" if stats.improvement >= 0 else "red"
    summary = Text()
    summary.append(f"{data.exercise} ({data.equipment})\n", style="bold")
    summary.append(f"Body part: {data.body_part}\n")
    summary.append(f"Sessions: {stats.session_count}   ")
    summary.append(f"Max: {format_weight(stats.max_weight)}   ")
    summary.append(f"PR: {stats.pr_date} x{stats.pr_reps}\n")
    summary.append(f"Start {format_weight(stats.start_weight)} -> Current {format_weight(stats.current_weight)}   ")
    summary.append(
        f"{stats.improvement:+g} ({stats.improvement_percent:+g}%)",
        style=improvement_color,
    )
    console.print(Panel(summary, title=f"Progress ({args.range})"))

    table = Table(box=box.SIMPLE)
    table.add_column("Date", style="cyan")
    table.add_column("Max Weight", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Location")

    for session in data.sessions:
        table.add_row(
            session.date,
            format_weight(session.max_weight),
            str(session.max_reps),
            format_weight(session.total_volume),
            session.location,
        )

    console.print(table)
    return 0


async def cmd_distribution(args, service: ExerciseProgressService) -> int:
    """Show training volume share by body part."""
    distribution = await service.get_body_part_distribution(args.range)

    if not distribution.slices:
        console.print("No training volume in this range.")
        return 0

    table = Table(title="Volume by Body Part", box=box.ROUNDED)
    table.add_column("Body Part")
    table.add_column("Volume", justify="right")
    table.add_column("Share", justify="right")

    for item in distribution.slices:
        color = PALETTE[item.color_index]
        table.add_row(
            Text(item.body_part, style=color),
            format_weight(item.total_volume),
            f"{item.percentage}%",
        )

    console.print(table)
    console.print(f"Total volume: {format_weight(distribution.total)}")
    return 0


async def cmd_heatmap(args, service: ExerciseProgressService) -> int:
    """Show the training consistency heat map."""
    heat_map = await service.get_heat_map_data()

    if not heat_map.weeks:
        console.print("No training data.")
        return 0

    table = Table(title="Training Heat Map (12 weeks)", box=box.SIMPLE, show_header=True)
    table.add_column("Week of", style="dim")
    for label in WEEKDAY_LABELS:
        table.add_column(label, justify="center")

    for week in heat_map.weeks:
        cells = [""] * 7
        for day in week:
            style = INTENSITY_STYLES[day.intensity]
            if day.is_today:
                style += " underline"
            cells[day.weekday] = Text("■", style=style)
        table.add_row(week[0].date, *cells)

    console.print(table)
    console.print(f"Busiest day: {heat_map.max_sets} sets")
    return 0


async def cmd_prs(args, service: ExerciseProgressService) -> int:
    """Show the significant PR timeline."""
    timeline = await service.get_pr_timeline(args.limit)

    if not timeline:
        console.print("No personal records yet.")
        return 0

    table = Table(title="PR Timeline", box=box.ROUNDED)
    table.add_column("Date", style="cyan")
    table.add_column("Exercise", style="bold")
    table.add_column("Equipment")
    table.add_column("Weight", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Location")

    for pr in timeline:
        table.add_row(
            pr.date,
            pr.exercise,
            pr.equipment,
            format_weight(pr.weight),
            str(pr.reps),
            pr.location or "-",
        )

    console.print(table)
    return 0


async def run_command(command, args) -> int:
    service, store = build_service(args)
    try:
        return await command(args, service)
    finally:
        if isinstance(store, HttpRecordStore):
            await store.close()


COMMANDS = {
    "exercises": cmd_exercises,
    "progress": cmd_progress,
    "distribution": cmd_distribution,
    "heatmap": cmd_heatmap,
    "prs": cmd_prs,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lift-progress",
        description="Lift Progress - strength training progress analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lift-progress --user me exercises
  lift-progress --user me progress "Bench Press|Barbell" --range 6M
  lift-progress --user me distribution --range 1M
  lift-progress --user me heatmap
  lift-progress --user me prs --limit 5
        """,
    )
    parser.add_argument("--data-dir", type=Path, help="JSON record store directory")
    parser.add_argument("--user", type=str, help="User id (defaults to LIFT_PROGRESS_USER_ID)")

    range_choices = [r.value for r in TimeRange]
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("exercises", help="List tracked exercises")

    progress_p = subparsers.add_parser("progress", help="Show progress for one exercise")
    progress_p.add_argument("key", help="Exercise key, e.g. 'Bench Press|Barbell'")
    progress_p.add_argument("--range", choices=range_choices, default=TimeRange.ALL.value)

    distribution_p = subparsers.add_parser("distribution", help="Show volume by body part")
    distribution_p.add_argument("--range", choices=range_choices, default=None)

    subparsers.add_parser("heatmap", help="Show the 12-week training heat map")

    prs_p = subparsers.add_parser("prs", help="Show the PR timeline")
    prs_p.add_argument("--limit", type=int, default=None, help="Maximum PRs to show")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    logging.basicConfig(level=get_settings().log_level)
    return asyncio.run(run_command(command, args))


if __name__ == "__main__":
    sys.exit(main())

"""pmboard CLI - task and meeting status dashboard."""

import json
import logging
import sys
from datetime import date, datetime

import click

from .config import load_config
from .core.calendar_grid import GridMode, grid_weeks
from .core.catalog import is_pseudo_option
from .core.dates import local_instant
from .core.dominant import NO_STATUS
from .core.progress import fraction, percentage
from .core.resolver import label_display
from .core.status import canonicalize
from .ports.document_store import DocumentStoreError
from .workflows import (
    day_agenda,
    format_meeting_line,
    format_task_line,
    get_repository,
    load_catalog,
    month_view,
    project_summary,
)

WEEKDAY_ABBR = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="pmboard")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """pmboard - task and meeting status dashboard."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("labels", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def status(labels: tuple[str, ...], as_json: bool):
    """Show how status labels canonicalize and display."""
    config = load_config()
    try:
        catalog = load_catalog(get_repository(config))
    except DocumentStoreError as e:
        _fail(e)

    rows = []
    for label in labels:
        canonical = canonicalize(label)
        rows.append(
            {
                "label": label,
                "canonical": canonical.name,
                "display": label_display(label, catalog),
                "color": catalog.color_for(label),
            }
        )

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return
    for row in rows:
        click.echo(f"{row['label']!r:24} -> {row['canonical']:20} shown as {row['display']!r}")


@main.command()
@click.argument("values", nargs=-1, required=True, type=float)
def progress(values: tuple[float, ...]):
    """Normalize stored progress values."""
    for value in values:
        click.echo(f"{value:g} -> {percentage(value)}% (fraction {fraction(value):.4g})")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def statuses(as_json: bool):
    """List the configured status menu."""
    config = load_config()
    try:
        catalog = load_catalog(get_repository(config))
    except DocumentStoreError as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "label": label,
                        "pseudo": is_pseudo_option(label),
                        "canonical": None if is_pseudo_option(label) else canonicalize(label).name,
                        "color": None if is_pseudo_option(label) else catalog.color_for(label),
                    }
                    for label in catalog.labels
                ],
                indent=2,
            )
        )
        return
    for label in catalog.labels:
        if is_pseudo_option(label):
            click.echo(f"  {label}")
        else:
            click.echo(f"  {label:24} {canonicalize(label).name:20} {catalog.color_for(label)}")


def _parse_month(value: str | None) -> date:
    if not value:
        return date.today().replace(day=1)
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM, got {value!r}")


@main.command()
@click.option("--month", "month_str", help="Month as YYYY-MM (default: this month)")
@click.option("--mode", type=click.Choice(["blank", "week"]), help="Grid layout")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def grid(month_str: str | None, mode: str | None, as_json: bool):
    """Show a month grid with the dominant status of each day."""
    config = load_config()
    month = _parse_month(month_str)
    grid_mode = GridMode.parse(mode or config.grid_mode)

    try:
        days = month_view(
            get_repository(config),
            month,
            grid_mode,
            config.week_start_index,
            config.tzinfo,
        )
    except DocumentStoreError as e:
        _fail(e)

    if as_json:
        cells = []
        for day in days:
            if day is None:
                cells.append(None)
                continue
            meeting = day.meeting_status()
            task = day.task_status()
            cells.append(
                {
                    "date": day.date.isoformat(),
                    "in_month": day.in_month,
                    "tasks": len(day.tasks),
                    "meetings": len(day.meetings),
                    "task_status": None if task is NO_STATUS else task.name,
                    "meeting_status": None if meeting is NO_STATUS else meeting.name,
                    "color": day.color(),
                }
            )
        click.echo(json.dumps(cells, indent=2))
        return

    click.echo(month.strftime("%B %Y").center(7 * 5))
    start = config.week_start_index
    click.echo(" ".join(f"{WEEKDAY_ABBR[(start + i) % 7]:>4}" for i in range(7)))
    for week in grid_weeks(days):
        row = []
        for day in week:
            if day is None:
                row.append("    ")
                continue
            color = day.color()
            mark = " " if color == "clear" else color[0].upper()
            text = f"{day.date.day:>2}{mark}"
            row.append(f"{text:>4}" if day.in_month else f"{'(' + str(day.date.day) + ')':>4}")
        click.echo(" ".join(row))


@main.command()
@click.argument("target", required=False)
@click.option("--status", "status_label", default="All", help="Status menu selection")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def day(target: str | None, status_label: str, as_json: bool):
    """Show tasks and meetings for a day (default: today)."""
    config = load_config()
    try:
        when = date.fromisoformat(target) if target else date.today()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {target!r}")

    try:
        repo = get_repository(config)
        catalog = load_catalog(repo)
        agenda = day_agenda(repo, catalog, when, status_label, config.tzinfo)
    except DocumentStoreError as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "date": when.isoformat(),
                    "tasks": [vars(line) for line in agenda.tasks],
                    "meetings": [
                        {
                            "title": m.title,
                            "date": local_instant(m.date, config.tzinfo).isoformat(),
                            "status": m.status.name,
                            "participants": m.participants,
                        }
                        for m in agenda.meetings
                    ],
                },
                indent=2,
            )
        )
        return

    click.echo(f"### {when.strftime('%A, %B %d')}")
    click.echo("\nTasks:")
    if agenda.tasks:
        for line in agenda.tasks:
            click.echo(format_task_line(line))
    else:
        click.echo("None")
    click.echo("\nMeetings:")
    if agenda.meetings:
        for meeting in agenda.meetings:
            click.echo(format_meeting_line(meeting, config.tzinfo))
    else:
        click.echo("None")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def projects(as_json: bool):
    """Summarize project completion."""
    config = load_config()
    try:
        summary = project_summary(get_repository(config))
    except DocumentStoreError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(vars(summary) | {"total": summary.total}, indent=2))
        return
    click.echo(f"Completed:   {summary.completed}")
    click.echo(f"In progress: {summary.in_progress}")
    click.echo(f"Not started: {summary.not_started}")
    click.echo(f"Total:       {summary.total}")

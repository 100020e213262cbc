"""Shared workflow layer between the CLI and the record store.

Each function loads what it needs through a RecordRepository and hands plain
records to the functional core.
"""

from dataclasses import dataclass
from datetime import date, tzinfo

from .adapters.document_records import DocumentRecordRepository
from .adapters.firestore_rest import FirestoreRestStore
from .adapters.json_store import JsonDocumentStore
from .catalog_sync import CatalogStore
from .config import Config
from .core.calendar_grid import SUNDAY, CalendarDay, GridMode, build_grid, populate_grid
from .core.catalog import StatusCatalog
from .core.dates import local_instant
from .core.progress import ProgressSummary, percentage, summarize_progress
from .core.records import MeetingRecord, TaskRecord
from .core.recurrence import is_active_on, is_due_today, is_overdue, meetings_on
from .core.resolver import RawStatusIndex, display_label
from .core.filters import filter_tasks
from .ports.record_repo import RecordRepository


def get_repository(config: Config) -> DocumentRecordRepository:
    """Resolve the configured document store."""
    if config.store == "firestore":
        return DocumentRecordRepository(FirestoreRestStore(config), config)
    return DocumentRecordRepository(JsonDocumentStore(config.data_path), config)


@dataclass
class TaskLine:
    """One task ready for display."""

    title: str
    label: str
    status: str
    percent: int
    recurring: bool
    overdue: bool
    due_today: bool


def describe_task(
    task: TaskRecord,
    catalog: StatusCatalog,
    today: date,
    raw_labels: RawStatusIndex | None = None,
    tz: tzinfo | None = None,
) -> TaskLine:
    return TaskLine(
        title=task.title,
        label=display_label(task, catalog, raw_labels),
        status=task.canonical_status.name,
        percent=percentage(task.progress),
        recurring=task.is_recurring,
        overdue=is_overdue(task, today, tz),
        due_today=is_due_today(task, today, tz),
    )


def format_task_line(line: TaskLine) -> str:
    """
    Format a single task for display.

    Pure function - no I/O.
    """
    flags = []
    if line.overdue:
        flags.append("OVERDUE")
    elif line.due_today:
        flags.append("due TODAY")
    if line.recurring:
        flags.append("recurring")
    suffix = f" ({', '.join(flags)})" if flags else ""
    return f"- [{line.label}] {line.title} {line.percent}%{suffix}"


def format_meeting_line(meeting: MeetingRecord, tz: tzinfo | None = None) -> str:
    time_str = local_instant(meeting.date, tz).strftime("%H:%M")
    who = f" with {', '.join(meeting.participants)}" if meeting.participants else ""
    return f"- {time_str} {meeting.title or 'Meeting'} [{meeting.status.value}]{who}"


def load_catalog(repo: RecordRepository, store: CatalogStore | None = None) -> StatusCatalog:
    """Refresh a catalog store (a fresh one by default) and return its snapshot."""
    store = store or CatalogStore()
    return store.refresh(repo)


def month_view(
    repo: RecordRepository,
    month: date,
    mode: GridMode = GridMode.BLANK_PADDED,
    week_start: int = SUNDAY,
    tz: tzinfo | None = None,
) -> list[CalendarDay | None]:
    """Grid for a month with active tasks and meetings attached."""
    cells = build_grid(month, mode, week_start)
    return populate_grid(cells, repo.fetch_tasks(), repo.fetch_meetings(), month, tz)


@dataclass
class DayAgenda:
    day: date
    tasks: list[TaskLine]
    meetings: list[MeetingRecord]


def day_agenda(
    repo: RecordRepository,
    catalog: StatusCatalog,
    day: date,
    status_label: str = "All",
    tz: tzinfo | None = None,
) -> DayAgenda:
    """Tasks active on `day` under a status selection, plus that day's meetings."""
    tasks = repo.fetch_tasks()
    raw_labels = RawStatusIndex.from_tasks(tasks, tz)
    visible = filter_tasks(tasks, status_label, day, raw_labels, tz)
    active = [t for t in visible if is_active_on(t, day, tz)]
    meetings = sorted(
        meetings_on(repo.fetch_meetings(), day, tz),
        key=lambda m: local_instant(m.date, tz),
    )
    return DayAgenda(
        day=day,
        tasks=[describe_task(t, catalog, day, raw_labels, tz) for t in active],
        meetings=meetings,
    )


def project_summary(repo: RecordRepository) -> ProgressSummary:
    return summarize_progress(p.progress for p in repo.fetch_projects())

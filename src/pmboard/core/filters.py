"""Task list filtering behind the status menu - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, tzinfo

from .catalog import ALL_OPTION, RECURRING_OPTION, TODAY_OPTION
from .records import TaskRecord
from .recurrence import is_active_on, is_window_expired
from .resolver import RawStatusIndex, matches_raw_label, raw_status_key
from .status import CanonicalStatus, canonicalize, is_known_label, normalize_label

_TODAY_ALIASES = {normalize_label(a) for a in (TODAY_OPTION, "Todays Task", "Today")}


@dataclass(frozen=True)
class StatusFilter:
    """What a status menu selection means."""

    label: str
    status: CanonicalStatus | None = None
    raw_label: str | None = None
    due_today: bool = False
    recurring_only: bool = False

    @property
    def is_all(self) -> bool:
        return (
            self.status is None
            and self.raw_label is None
            and not self.due_today
            and not self.recurring_only
        )


def parse_status_filter(label: str) -> StatusFilter:
    """
    Interpret a menu label.

    "All" and blanks select everything, "Today's Task" selects tasks active
    today, "Recurring Task" selects recurring tasks, a known status synonym
    selects by canonical status, and anything else is matched against the
    remembered raw labels.
    """
    key = normalize_label(label)
    if not key or key == normalize_label(ALL_OPTION):
        return StatusFilter(label=label)
    if key in _TODAY_ALIASES:
        return StatusFilter(label=label, due_today=True)
    if key == normalize_label(RECURRING_OPTION):
        return StatusFilter(label=label, recurring_only=True)
    if is_known_label(label):
        return StatusFilter(label=label, status=canonicalize(label))
    return StatusFilter(label=label, raw_label=label.strip())


def dedupe_tasks(tasks: list[TaskRecord], tz: tzinfo | None = None) -> list[TaskRecord]:
    """Drop repeated (title, due day) occurrences, keeping the first."""
    seen: set[str] = set()
    unique = []
    for task in tasks:
        key = raw_status_key(task.title, task.due_date, tz)
        if key in seen:
            continue
        seen.add(key)
        unique.append(task)
    return unique


def filter_tasks(
    tasks: list[TaskRecord],
    label: str,
    today: date,
    raw_labels: RawStatusIndex | None = None,
    tz: tzinfo | None = None,
) -> list[TaskRecord]:
    """
    Tasks visible under a status menu selection.

    Duplicates are removed and recurring tasks whose window has ended are
    hidden before the selection is applied.

    Pure function - no I/O.
    """
    selection = parse_status_filter(label)
    visible = [t for t in dedupe_tasks(tasks, tz) if not is_window_expired(t, today, tz)]

    if selection.status is not None:
        visible = [t for t in visible if t.canonical_status is selection.status]
    elif selection.raw_label is not None:
        visible = [t for t in visible if matches_raw_label(t, selection.raw_label, raw_labels)]

    if selection.recurring_only:
        visible = [t for t in visible if t.is_recurring]
    if selection.due_today:
        visible = [t for t in visible if is_active_on(t, today, tz)]
    return visible


def count_by_status(tasks: list[TaskRecord]) -> dict[CanonicalStatus, int]:
    """Number of tasks per canonical status, every status present."""
    counts = {status: 0 for status in CanonicalStatus}
    for task in tasks:
        counts[task.canonical_status] += 1
    return counts

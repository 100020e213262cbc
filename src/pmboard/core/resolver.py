"""Status resolution between canonical statuses and free-text labels - no I/O.

Administrators may pick a custom label for a single task occurrence. The
record store keeps only the canonical status plus, separately, the raw label
string, and has no stable occurrence ids. Raw labels are therefore remembered
under a (normalized title, due day) key. Everything that knows about that key
lives in this module.
"""

import re
from collections.abc import Mapping
from datetime import date, datetime, tzinfo
from typing import Iterable, Iterator

from .catalog import StatusCatalog
from .dates import day_of, start_of_day
from .records import TaskRecord
from .status import canonicalize

_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    return _WHITESPACE.sub(" ", title.strip().lower())


def raw_status_key(title: str, due_date: date | datetime, tz: tzinfo | None = None) -> str:
    """
    Lookup key for an occurrence: normalized title plus start-of-day epoch.

    >>> raw_status_key("Fix Bug ", date(2025, 1, 15))
    'fix bug|1736899200'
    """
    day = day_of(due_date, tz)
    return f"{normalize_title(title)}|{int(start_of_day(day, tz).timestamp())}"


class RawStatusIndex(Mapping):
    """
    Read-only memory of raw labels keyed by raw_status_key.

    Build a new index when records change; later tasks with the same key
    overwrite earlier ones.
    """

    def __init__(self, entries: Mapping[str, str] | None = None, tz: tzinfo | None = None):
        self._entries = dict(entries or {})
        self.tz = tz

    @classmethod
    def from_tasks(cls, tasks: Iterable[TaskRecord], tz: tzinfo | None = None) -> "RawStatusIndex":
        entries = {}
        for task in tasks:
            if task.raw_status_label and task.raw_status_label.strip():
                entries[raw_status_key(task.title, task.due_date, tz)] = task.raw_status_label
        return cls(entries, tz)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def label_for(self, task: TaskRecord) -> str | None:
        return self._entries.get(raw_status_key(task.title, task.due_date, self.tz))


def resolve_raw_label(task: TaskRecord, raw_labels: RawStatusIndex | None = None) -> str | None:
    """The raw label stored on the task, else the remembered one, trimmed."""
    raw = task.raw_status_label
    if (not raw or not raw.strip()) and raw_labels is not None:
        raw = raw_labels.label_for(task)
    if raw and raw.strip():
        return raw.strip()
    return None


def display_label(
    task: TaskRecord,
    catalog: StatusCatalog,
    raw_labels: RawStatusIndex | None = None,
) -> str:
    """
    Label to show for a task.

    Prefers the configured catalog entry matching the raw label after
    normalization, then the raw label itself, then the catalog's label for
    the task's canonical status.
    """
    raw = resolve_raw_label(task, raw_labels)
    if raw is not None:
        return label_display(raw, catalog)
    return catalog.default_label(task.canonical_status)


def label_display(label: str, catalog: StatusCatalog) -> str:
    """
    Label to show for a bare status label with no task behind it.

    Same precedence as display_label: the matching catalog entry, then the
    trimmed label, then the catalog's label for its canonical status when
    the label is blank.
    """
    raw = label.strip()
    if raw:
        return catalog.find(raw) or raw
    return catalog.default_label(canonicalize(label))


def matches_raw_label(
    task: TaskRecord, label: str, raw_labels: RawStatusIndex | None = None
) -> bool:
    """True if the task's raw label equals `label`, ignoring case and padding."""
    raw = resolve_raw_label(task, raw_labels)
    if raw is None:
        return False
    return raw.lower() == label.strip().lower()

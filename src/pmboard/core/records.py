"""Task, meeting and project records - no I/O dependencies."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any

from .status import CanonicalStatus, MeetingStatus, canonicalize

logger = logging.getLogger(__name__)

DUE_DATE_KEYS = ("dueDate", "deadline", "endDate", "due", "due_date", "dueDateTime", "due_date_string")
START_DATE_KEYS = ("startDate", "assignedDate", "start", "createdAt", "assigned_on")
RECURRING_END_KEYS = ("recurringEndDate", "recurrenceEndDate", "recurring_until", "recursUntil")


class RecurringPattern(Enum):
    """Recurrence cadence. Stored on tasks but not used to expand occurrences."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    BIWEEKLY = "Bi-weekly"
    MONTHLY = "Monthly"
    CUSTOM = "Custom"

    @classmethod
    def parse(cls, raw: object) -> "RecurringPattern | None":
        if not isinstance(raw, str):
            return None
        wanted = raw.strip().lower().replace("-", "")
        for pattern in cls:
            if pattern.value.lower().replace("-", "") == wanted:
                return pattern
        return None


def parse_instant(value: Any) -> datetime | None:
    """
    Parse the date shapes found in stored documents.

    Handles datetimes, dates, ISO-8601 strings (including a trailing "Z"),
    epoch seconds, and {"seconds": ...} / {"_seconds": ...} timestamp maps.
    Returns None for anything else.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
            return parse_instant(seconds)
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unparseable date value: {value!r}")
            return None
    return None


def _first_instant(data: dict[str, Any], keys: tuple[str, ...]) -> datetime | None:
    for key in keys:
        parsed = parse_instant(data.get(key))
        if parsed is not None:
            return parsed
    return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass
class TaskRecord:
    """A task occurrence as supplied by the record store."""

    title: str
    due_date: datetime
    start_date: datetime | None = None
    progress: float = 0.0
    canonical_status: CanonicalStatus = CanonicalStatus.NOT_STARTED
    raw_status_label: str | None = None
    is_recurring: bool = False
    recurring_end_date: datetime | None = None
    recurring_pattern: RecurringPattern | None = None
    id: str = ""
    project_name: str = ""
    task_type: str = ""

    @classmethod
    def from_document(cls, data: dict[str, Any], doc_id: str = "") -> "TaskRecord | None":
        """
        Create a TaskRecord from a stored document.

        Returns None when the document has no title or no usable due date.
        """
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            return None
        due = _first_instant(data, DUE_DATE_KEYS)
        if due is None:
            logger.warning(f"Skipping task {title!r}: no due date")
            return None

        raw_status = data.get("status")
        raw_label = raw_status.strip() if isinstance(raw_status, str) else ""
        stored_canonical = data.get("canonicalStatus")

        project = data.get("projectName") or data.get("project") or data.get("project_title") or ""
        return cls(
            title=title,
            due_date=due,
            start_date=_first_instant(data, START_DATE_KEYS),
            progress=_as_float(data.get("progress", 0)),
            canonical_status=canonicalize(stored_canonical or raw_label),
            raw_status_label=raw_label or None,
            is_recurring=_as_bool(data.get("isRecurring", False)),
            recurring_end_date=_first_instant(data, RECURRING_END_KEYS),
            recurring_pattern=RecurringPattern.parse(data.get("recurringPattern")),
            id=doc_id or str(data.get("id", "")),
            project_name=project if isinstance(project, str) else "",
            task_type=str(data.get("taskType") or data.get("type") or ""),
        )


@dataclass
class MeetingRecord:
    """A meeting as supplied by the record store."""

    date: datetime
    status: MeetingStatus = MeetingStatus.SCHEDULED
    participants: list[str] = field(default_factory=list)
    title: str = ""
    duration: int = 0
    project: str = ""
    id: str = ""

    @classmethod
    def from_document(cls, data: dict[str, Any], doc_id: str = "") -> "MeetingRecord | None":
        """Create a MeetingRecord from a stored document, or None without a date."""
        when = _first_instant(data, ("date", "startTime", "start"))
        if when is None:
            logger.warning(f"Skipping meeting {data.get('title', '')!r}: no date")
            return None
        participants = data.get("participants") or []
        if not isinstance(participants, list):
            participants = []
        try:
            duration = int(data.get("duration") or 0)
        except (TypeError, ValueError):
            duration = 0
        return cls(
            date=when,
            status=MeetingStatus.parse(data.get("status")),
            participants=[str(p) for p in participants],
            title=str(data.get("title") or ""),
            duration=duration,
            project=str(data.get("project") or ""),
            id=doc_id or str(data.get("id", "")),
        )


@dataclass
class ProjectRecord:
    """A project with its (ambiguously scaled) progress."""

    name: str
    progress: float = 0.0
    id: str = ""

    @classmethod
    def from_document(cls, data: dict[str, Any], doc_id: str = "") -> "ProjectRecord":
        return cls(
            name=str(data.get("name") or ""),
            progress=_as_float(data.get("progress", 0)),
            id=doc_id or str(data.get("id", "")),
        )

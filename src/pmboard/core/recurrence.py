"""Recurring window evaluation - no I/O dependencies.

A recurring task is active on every day from its due day through its
recurring end day, inclusive. Without an end date it is active on the due
day only. `recurring_pattern` is carried on the record but does not expand
the window into separate occurrences.
"""

from datetime import date, datetime, tzinfo

from .dates import day_of
from .records import MeetingRecord, TaskRecord
from .status import CanonicalStatus


def active_window(task: TaskRecord, tz: tzinfo | None = None) -> tuple[date, date]:
    """
    Inclusive (first, last) day on which the task is active.

    An end date before the due day collapses to the due day so that
    first <= last always holds.
    """
    start = day_of(task.due_date, tz)
    if task.is_recurring and task.recurring_end_date is not None:
        end = day_of(task.recurring_end_date, tz)
        return (start, max(start, end))
    return (start, start)


def is_active_on(task: TaskRecord, day: date | datetime, tz: tzinfo | None = None) -> bool:
    """
    Whether the task occurs on `day`.

    Pure function - never reads the clock; pass today explicitly.
    """
    first, last = active_window(task, tz)
    return first <= day_of(day, tz) <= last


def tasks_on(tasks: list[TaskRecord], day: date | datetime, tz: tzinfo | None = None) -> list[TaskRecord]:
    """Tasks active on a given day."""
    return [t for t in tasks if is_active_on(t, day, tz)]


def meetings_on(
    meetings: list[MeetingRecord], day: date | datetime, tz: tzinfo | None = None
) -> list[MeetingRecord]:
    """Meetings held on a given day."""
    target = day_of(day, tz)
    return [m for m in meetings if day_of(m.date, tz) == target]


def is_window_expired(task: TaskRecord, today: date, tz: tzinfo | None = None) -> bool:
    """True for a bounded recurring task whose last day is before today."""
    if not task.is_recurring or task.recurring_end_date is None:
        return False
    return active_window(task, tz)[1] < today


def is_due_today(task: TaskRecord, today: date, tz: tzinfo | None = None) -> bool:
    """Active today and not yet completed."""
    if task.canonical_status is CanonicalStatus.COMPLETED:
        return False
    return is_active_on(task, today, tz)


def is_overdue(task: TaskRecord, today: date, tz: tzinfo | None = None) -> bool:
    """Due day already passed and not completed."""
    if task.canonical_status is CanonicalStatus.COMPLETED:
        return False
    return day_of(task.due_date, tz) < today

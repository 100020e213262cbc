"""Dominant status per calendar cell - no I/O dependencies."""

from enum import Enum
from typing import Iterable

from .status import CanonicalStatus, MeetingStatus


class _Sentinel(Enum):
    NO_STATUS = "none"


# Result for a cell with nothing on it.
NO_STATUS = _Sentinel.NO_STATUS

# Highest priority first.
MEETING_PRIORITY: tuple[MeetingStatus, ...] = (
    MeetingStatus.CANCELLED,
    MeetingStatus.IN_PROGRESS,
    MeetingStatus.COMPLETED,
    MeetingStatus.SCHEDULED,
)

TASK_PRIORITY: tuple[CanonicalStatus, ...] = (
    CanonicalStatus.CANCELED,
    CanonicalStatus.NEED_HELP,
    CanonicalStatus.STUCK,
    CanonicalStatus.ON_HOLD_BY_CLIENT,
    CanonicalStatus.WAITING_FOR_CLIENT,
    CanonicalStatus.IN_PROGRESS,
    CanonicalStatus.COMPLETED,
    CanonicalStatus.NOT_STARTED,
)

CELL_COLORS: dict[object, str] = {
    MeetingStatus.CANCELLED: "red",
    MeetingStatus.IN_PROGRESS: "orange",
    MeetingStatus.COMPLETED: "green",
    MeetingStatus.SCHEDULED: "yellow",
    CanonicalStatus.CANCELED: "gray",
    CanonicalStatus.NEED_HELP: "red",
    CanonicalStatus.STUCK: "orange",
    CanonicalStatus.ON_HOLD_BY_CLIENT: "orange",
    CanonicalStatus.WAITING_FOR_CLIENT: "purple",
    CanonicalStatus.IN_PROGRESS: "blue",
    CanonicalStatus.COMPLETED: "green",
    CanonicalStatus.NOT_STARTED: "gray",
    NO_STATUS: "clear",
}

_RANKS: dict[object, int] = {
    **{status: rank for rank, status in enumerate(MEETING_PRIORITY)},
    **{status: rank for rank, status in enumerate(TASK_PRIORITY)},
}


def dominant_status(
    statuses: Iterable[MeetingStatus | CanonicalStatus],
) -> MeetingStatus | CanonicalStatus | _Sentinel:
    """
    Pick the single highest-priority status of one calendar cell.

    Meeting and task statuses each have their own fixed order. A cell that
    mixes both is resolved by the meeting order. Empty input yields NO_STATUS.

    Pure function - no I/O.
    """
    meeting_statuses = []
    task_statuses = []
    for status in statuses:
        if isinstance(status, MeetingStatus):
            meeting_statuses.append(status)
        elif isinstance(status, CanonicalStatus):
            task_statuses.append(status)

    for group in (meeting_statuses, task_statuses):
        if group:
            return min(group, key=_RANKS.__getitem__)
    return NO_STATUS


def status_color(status: MeetingStatus | CanonicalStatus | _Sentinel) -> str:
    """Cell color name for a (dominant) status."""
    return CELL_COLORS.get(status, CELL_COLORS[NO_STATUS])


def dominant_color(statuses: Iterable[MeetingStatus | CanonicalStatus]) -> str:
    return status_color(dominant_status(statuses))

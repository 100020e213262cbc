"""Month grid construction - no I/O dependencies."""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta, tzinfo
from enum import Enum

from .dominant import NO_STATUS, dominant_status, status_color
from .records import MeetingRecord, TaskRecord
from .recurrence import meetings_on, tasks_on

SUNDAY = calendar.SUNDAY
MONDAY = calendar.MONDAY


class GridMode(Enum):
    """Month grid layouts."""

    BLANK_PADDED = "blank"
    WEEK_ALIGNED = "week"

    @classmethod
    def parse(cls, raw: str) -> "GridMode":
        wanted = raw.strip().lower()
        for mode in cls:
            if wanted in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown grid mode: {raw!r}")


def weekday_offset(day: date, week_start: int = SUNDAY) -> int:
    """Column of `day` in a week beginning on `week_start` (0-6)."""
    return (day.weekday() - week_start) % 7


def build_grid(
    month: date,
    mode: GridMode = GridMode.BLANK_PADDED,
    week_start: int = SUNDAY,
) -> list[date | None]:
    """
    Dates to render for the month containing `month`.

    BLANK_PADDED: None cells before the 1st (one per weekday column before
    it), every day of the month, then None cells up to a full week.

    WEEK_ALIGNED: every day from the start of the week holding the 1st to the
    end of the week holding the last day, with no placeholders.

    Either way the result is ascending, gap-free over its populated range,
    and a positive multiple of 7 long.

    Pure function - no I/O.
    """
    first = month.replace(day=1)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    last = first.replace(day=days_in_month)

    if mode is GridMode.WEEK_ALIGNED:
        start = first - timedelta(days=weekday_offset(first, week_start))
        end = last + timedelta(days=6 - weekday_offset(last, week_start))
        return [start + timedelta(days=i) for i in range((end - start).days + 1)]

    cells: list[date | None] = [None] * weekday_offset(first, week_start)
    cells.extend(first + timedelta(days=i) for i in range(days_in_month))
    while len(cells) % 7:
        cells.append(None)
    return cells


def grid_weeks(cells: list) -> list[list]:
    """Split a grid into rows of seven."""
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


@dataclass
class CalendarDay:
    """A grid cell: one date and what is active on it."""

    date: date
    tasks: list[TaskRecord] = field(default_factory=list)
    meetings: list[MeetingRecord] = field(default_factory=list)
    in_month: bool = True

    @property
    def is_empty(self) -> bool:
        return not self.tasks and not self.meetings

    def task_status(self):
        """Dominant task status, or NO_STATUS."""
        return dominant_status(t.canonical_status for t in self.tasks)

    def meeting_status(self):
        """Dominant meeting status, or NO_STATUS."""
        return dominant_status(m.status for m in self.meetings)

    def color(self) -> str:
        """Cell color: meetings decide when present, tasks otherwise."""
        status = self.meeting_status()
        if status is NO_STATUS:
            status = self.task_status()
        return status_color(status)


def populate_grid(
    cells: list[date | None],
    tasks: list[TaskRecord],
    meetings: list[MeetingRecord],
    month: date | None = None,
    tz: tzinfo | None = None,
) -> list[CalendarDay | None]:
    """
    Attach active tasks and same-day meetings to each populated cell.

    Placeholders stay None. Cells outside `month` are flagged in_month=False.
    """
    result: list[CalendarDay | None] = []
    for cell in cells:
        if cell is None:
            result.append(None)
            continue
        in_month = month is None or (cell.year, cell.month) == (month.year, month.month)
        result.append(
            CalendarDay(
                date=cell,
                tasks=tasks_on(tasks, cell, tz),
                meetings=meetings_on(meetings, cell, tz),
                in_month=in_month,
            )
        )
    return result

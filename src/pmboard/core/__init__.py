"""Functional core - pure reconciliation logic with no I/O."""

from .progress import fraction, percentage, is_complete, summarize_progress
from .status import CanonicalStatus, MeetingStatus, canonicalize
from .catalog import StatusCatalog
from .records import TaskRecord, MeetingRecord, ProjectRecord
from .resolver import RawStatusIndex, display_label, raw_status_key
from .recurrence import is_active_on
from .dominant import NO_STATUS, dominant_status, status_color
from .calendar_grid import CalendarDay, GridMode, build_grid, populate_grid

__all__ = [
    # Progress
    "fraction",
    "percentage",
    "is_complete",
    "summarize_progress",
    # Statuses
    "CanonicalStatus",
    "MeetingStatus",
    "canonicalize",
    "StatusCatalog",
    "RawStatusIndex",
    "display_label",
    "raw_status_key",
    # Records
    "TaskRecord",
    "MeetingRecord",
    "ProjectRecord",
    # Recurrence
    "is_active_on",
    # Calendar
    "NO_STATUS",
    "dominant_status",
    "status_color",
    "CalendarDay",
    "GridMode",
    "build_grid",
    "populate_grid",
]

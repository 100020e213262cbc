"""Record repository interface."""

from typing import Protocol

from pmboard.core.catalog import StatusCatalog
from pmboard.core.records import MeetingRecord, ProjectRecord, TaskRecord


class RecordRepository(Protocol):
    """Interface for loading records and the status catalog from any backend."""

    def fetch_tasks(self) -> list[TaskRecord]:
        """Fetch all task records."""
        ...

    def fetch_meetings(self) -> list[MeetingRecord]:
        """Fetch all meeting records."""
        ...

    def fetch_projects(self) -> list[ProjectRecord]:
        """Fetch all project records."""
        ...

    def fetch_catalog(self) -> StatusCatalog | None:
        """Fetch the configured status catalog. None if not configured."""
        ...

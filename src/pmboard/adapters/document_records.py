"""Record repository over a document store."""

import logging

from pmboard.config import Config
from pmboard.core.catalog import StatusCatalog
from pmboard.core.records import MeetingRecord, ProjectRecord, TaskRecord
from pmboard.ports.document_store import DocumentStore

logger = logging.getLogger(__name__)


class DocumentRecordRepository:
    """
    Maps raw documents onto domain records.

    Implements RecordRepository protocol. Documents that cannot be turned
    into records are skipped.
    """

    def __init__(self, store: DocumentStore, config: Config):
        self.store = store
        self.config = config

    def fetch_tasks(self) -> list[TaskRecord]:
        tasks = []
        for doc_id, data in self.store.list_documents(self.config.tasks_collection):
            task = TaskRecord.from_document(data, doc_id)
            if task is not None:
                tasks.append(task)
        return tasks

    def fetch_meetings(self) -> list[MeetingRecord]:
        meetings = []
        for doc_id, data in self.store.list_documents(self.config.meetings_collection):
            meeting = MeetingRecord.from_document(data, doc_id)
            if meeting is not None:
                meetings.append(meeting)
        return meetings

    def fetch_projects(self) -> list[ProjectRecord]:
        return [
            ProjectRecord.from_document(data, doc_id)
            for doc_id, data in self.store.list_documents(self.config.projects_collection)
        ]

    def fetch_catalog(self) -> StatusCatalog | None:
        data = self.store.get_document(self.config.status_document)
        if data is None:
            logger.info(f"No status document at {self.config.status_document}")
            return None
        return StatusCatalog.from_document(data)

"""Tests for mapping stored documents onto records."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from pmboard.adapters.document_records import DocumentRecordRepository
from pmboard.config import Config
from pmboard.core.status import CanonicalStatus, MeetingStatus


@pytest.fixture
def config():
    return Config(meetings_collection="meetings")


@pytest.fixture
def store():
    documents = {
        "tasks": [
            ("t1", {"title": "Draft", "dueDate": "2025-01-15", "status": "In Progress"}),
            ("t2", {"title": "", "dueDate": "2025-01-15"}),
            ("t3", {"title": "No date"}),
        ],
        "meetings": [
            ("m1", {"title": "Sync", "date": "2025-01-15T10:00:00", "status": "Cancelled"}),
            ("m2", {"title": "Undated"}),
        ],
        "projects": [("p1", {"name": "Apollo", "progress": 100})],
    }
    mock = MagicMock()
    mock.list_documents.side_effect = lambda collection: documents.get(collection, [])
    mock.get_document.return_value = {"statuses": [{"name": "Review", "color": "#123456"}, "Done"]}
    return mock


@pytest.fixture
def repo(store, config):
    return DocumentRecordRepository(store, config)


def test_fetch_tasks_skips_incomplete(repo):
    tasks = repo.fetch_tasks()
    assert [t.id for t in tasks] == ["t1"]
    assert tasks[0].canonical_status is CanonicalStatus.IN_PROGRESS


def test_fetch_meetings_uses_configured_collection(repo, store):
    meetings = repo.fetch_meetings()
    store.list_documents.assert_called_with("meetings")
    assert len(meetings) == 1
    assert meetings[0].date == datetime(2025, 1, 15, 10, 0)
    assert meetings[0].status is MeetingStatus.CANCELLED


def test_fetch_projects(repo):
    projects = repo.fetch_projects()
    assert projects[0].name == "Apollo"
    assert projects[0].progress == 100


def test_fetch_catalog(repo, store):
    catalog = repo.fetch_catalog()
    store.get_document.assert_called_with("settings/task-statuses")
    assert catalog.labels == ("All", "Done", "Review")
    assert catalog.color_for("review") == "#123456"


def test_fetch_catalog_missing_document(repo, store):
    store.get_document.return_value = None
    assert repo.fetch_catalog() is None

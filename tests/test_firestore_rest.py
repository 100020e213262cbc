"""Tests for the Firestore REST adapter."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from pmboard.adapters.firestore_rest import FirestoreRestStore, decode_fields, decode_value
from pmboard.config import Config
from pmboard.ports.document_store import DocumentStoreError


def make_response(status_code=200, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload or {}
    resp.text = text
    return resp


@pytest.fixture
def config():
    return Config(store="firestore", firestore_project_id="demo", firestore_api_key="k3y")


@pytest.fixture
def store(config):
    adapter = FirestoreRestStore(config=config, id_token="tok")
    adapter._session = MagicMock()
    return adapter


class TestDecodeValue:
    def test_scalars(self):
        assert decode_value({"stringValue": "a"}) == "a"
        assert decode_value({"integerValue": "42"}) == 42
        assert decode_value({"doubleValue": 0.5}) == 0.5
        assert decode_value({"booleanValue": True}) is True
        assert decode_value({"nullValue": None}) is None

    def test_timestamp_with_nanoseconds(self):
        value = decode_value({"timestampValue": "2025-01-15T10:00:00.123456789Z"})
        assert value == datetime(2025, 1, 15, 10, 0, 0, 123456, tzinfo=timezone.utc)

    def test_nested(self):
        fields = {
            "statuses": {
                "arrayValue": {
                    "values": [
                        {"mapValue": {"fields": {"name": {"stringValue": "Done"}}}},
                        {"stringValue": "Stuck"},
                    ]
                }
            },
            "empty": {"arrayValue": {}},
        }
        assert decode_fields(fields) == {"statuses": [{"name": "Done"}, "Stuck"], "empty": []}


class TestGetDocument:
    def test_decodes_fields(self, store):
        store._session.get.return_value = make_response(
            payload={"name": ".../settings/task-statuses", "fields": {"title": {"stringValue": "x"}}}
        )
        assert store.get_document("settings/task-statuses") == {"title": "x"}

        url = store._session.get.call_args.args[0]
        kwargs = store._session.get.call_args.kwargs
        assert url == (
            "https://firestore.googleapis.com/v1/projects/demo/databases/(default)"
            "/documents/settings/task-statuses"
        )
        assert kwargs["params"]["key"] == "k3y"
        assert kwargs["headers"]["Authorization"] == "Bearer tok"

    def test_missing_document(self, store):
        store._session.get.return_value = make_response(status_code=404)
        assert store.get_document("settings/task-statuses") is None

    def test_http_error(self, store):
        store._session.get.return_value = make_response(status_code=403, text="denied")
        with pytest.raises(DocumentStoreError, match="403"):
            store.get_document("settings/task-statuses")

    def test_network_error(self, store):
        store._session.get.side_effect = requests.ConnectionError("offline")
        with pytest.raises(DocumentStoreError, match="offline"):
            store.get_document("settings/task-statuses")

    def test_requires_project(self):
        adapter = FirestoreRestStore(config=Config(store="firestore"))
        adapter._session = MagicMock()
        with pytest.raises(DocumentStoreError, match="FIRESTORE_PROJECT_ID"):
            adapter.get_document("settings/task-statuses")
        adapter._session.get.assert_not_called()


class TestListDocuments:
    def test_follows_page_tokens(self, store):
        store._session.get.side_effect = [
            make_response(
                payload={
                    "documents": [
                        {"name": "projects/demo/databases/(default)/documents/tasks/a", "fields": {}},
                    ],
                    "nextPageToken": "next",
                }
            ),
            make_response(
                payload={
                    "documents": [
                        {
                            "name": "projects/demo/databases/(default)/documents/tasks/b",
                            "fields": {"title": {"stringValue": "B"}},
                        },
                    ]
                }
            ),
        ]

        documents = store.list_documents("tasks")

        assert documents == [("a", {}), ("b", {"title": "B"})]
        second_params = store._session.get.call_args_list[1].kwargs["params"]
        assert second_params["pageToken"] == "next"

    def test_empty_collection(self, store):
        store._session.get.return_value = make_response(payload={})
        assert store.list_documents("tasks") == []

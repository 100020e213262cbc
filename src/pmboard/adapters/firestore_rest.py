"""Firestore REST adapter - HTTP client for document reads."""

import logging
import re
from datetime import datetime
from typing import Any

import requests

from pmboard.config import Config, load_config
from pmboard.ports.document_store import DocumentStoreError

logger = logging.getLogger(__name__)

API_BASE = "https://firestore.googleapis.com/v1"
PAGE_SIZE = 300

# Firestore timestamps carry up to nanosecond precision.
_FRACTION = re.compile(r"\.(\d{6})\d+")


def _parse_timestamp(text: str) -> datetime | str:
    cleaned = _FRACTION.sub(r".\1", text)
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned)
    except ValueError:
        logger.warning(f"Unparseable timestampValue: {text!r}")
        return text


def decode_value(value: dict[str, Any]) -> Any:
    """Convert one typed Firestore value into plain Python data."""
    if "stringValue" in value:
        return value["stringValue"]
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "timestampValue" in value:
        return _parse_timestamp(value["timestampValue"])
    if "nullValue" in value:
        return None
    if "arrayValue" in value:
        return [decode_value(v) for v in value["arrayValue"].get("values", [])]
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields", {}))
    if "referenceValue" in value:
        return value["referenceValue"]
    if "geoPointValue" in value:
        return value["geoPointValue"]
    return None


def decode_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Convert a Firestore `fields` map into a plain dict."""
    return {key: decode_value(value) for key, value in fields.items()}


class FirestoreRestStore:
    """
    Firestore REST adapter.

    Implements DocumentStore protocol. Reads documents and pages through
    collections with an API key and optional ID token. No business logic -
    just I/O.
    """

    def __init__(
        self,
        config: Config | None = None,
        id_token: str = "",
        timeout: int = 30,
    ):
        self.config = config or load_config()
        self.id_token = id_token
        self.timeout = timeout
        self._session = requests.Session()

    @property
    def _documents_url(self) -> str:
        return (
            f"{API_BASE}/projects/{self.config.firestore_project_id}"
            f"/databases/{self.config.firestore_database}/documents"
        )

    def _request(self, path: str, params: dict[str, Any] | None = None) -> dict | None:
        """Make a GET request; None on 404."""
        if not self.config.firestore_project_id:
            raise DocumentStoreError("No Firestore project configured. Set FIRESTORE_PROJECT_ID.")

        query = dict(params or {})
        if self.config.firestore_api_key:
            query["key"] = self.config.firestore_api_key
        headers = {}
        if self.id_token:
            headers["Authorization"] = f"Bearer {self.id_token}"

        url = f"{self._documents_url}/{path.strip('/')}"
        try:
            resp = self._session.get(url, params=query, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise DocumentStoreError(f"Request to {path} failed: {e}") from e

        if resp.status_code == 404:
            logger.debug(f"Document not found: {path}")
            return None
        if resp.status_code != 200:
            raise DocumentStoreError(f"Reading {path} failed ({resp.status_code}): {resp.text}")
        return resp.json()

    def get_document(self, path: str) -> dict[str, Any] | None:
        """Fetch one document by path. None if missing."""
        data = self._request(path)
        if data is None:
            return None
        return decode_fields(data.get("fields", {}))

    def list_documents(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Fetch every document in a collection, following page tokens."""
        documents: list[tuple[str, dict[str, Any]]] = []
        page_token = ""
        while True:
            params: dict[str, Any] = {"pageSize": PAGE_SIZE}
            if page_token:
                params["pageToken"] = page_token
            data = self._request(collection, params)
            if data is None:
                break
            for doc in data.get("documents", []):
                doc_id = doc.get("name", "").rsplit("/", 1)[-1]
                documents.append((doc_id, decode_fields(doc.get("fields", {}))))
            page_token = data.get("nextPageToken", "")
            if not page_token:
                break
        logger.debug(f"Fetched {len(documents)} documents from {collection}")
        return documents

"""Adapters - I/O implementations of ports."""

from .firestore_rest import FirestoreRestStore
from .json_store import JsonDocumentStore
from .document_records import DocumentRecordRepository

__all__ = [
    "FirestoreRestStore",
    "JsonDocumentStore",
    "DocumentRecordRepository",
]

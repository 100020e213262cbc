"""Ports - interfaces/protocols for external dependencies."""

from .document_store import DocumentStore, DocumentStoreError
from .record_repo import RecordRepository

__all__ = [
    "DocumentStore",
    "DocumentStoreError",
    "RecordRepository",
]

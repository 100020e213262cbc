"""Document store interface."""

from typing import Any, Protocol


class DocumentStoreError(Exception):
    """Raised when a document store cannot be read."""

    pass


class DocumentStore(Protocol):
    """Interface for reading plain documents from the remote store."""

    def get_document(self, path: str) -> dict[str, Any] | None:
        """Fetch one document by path ("collection/doc"). None if missing."""
        ...

    def list_documents(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Fetch every (doc_id, data) pair in a collection."""
        ...

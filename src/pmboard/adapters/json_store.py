"""JSON file document store adapter."""

import json
import logging
from pathlib import Path
from typing import Any

from pmboard.ports.document_store import DocumentStoreError

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """
    File-based document store over a directory of JSON exports.

    Implements DocumentStore protocol. A document "settings/task-statuses"
    lives at `<root>/settings/task-statuses.json`; a collection is either a
    directory of such files or a single `<collection>.json` holding a list
    of objects (each may carry an "id") or an {id: object} map.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser()

    def _read(self, path: Path) -> Any:
        try:
            return json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentStoreError(f"Cannot read {path}: {e}") from e

    def get_document(self, path: str) -> dict[str, Any] | None:
        """Read one document. None if the file does not exist."""
        file_path = self.root / f"{path.strip('/')}.json"
        if not file_path.exists():
            return None
        data = self._read(file_path)
        if not isinstance(data, dict):
            raise DocumentStoreError(f"{file_path} does not hold a JSON object")
        return data

    def list_documents(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Read every document in a collection, ordered by id for directories."""
        directory = self.root / collection.strip("/")
        if directory.is_dir():
            documents = []
            for path in sorted(directory.glob("*.json")):
                data = self._read(path)
                if isinstance(data, dict):
                    documents.append((path.stem, data))
                else:
                    logger.warning(f"Skipping {path}: not a JSON object")
            return documents

        bundle = directory.with_suffix(".json")
        if not bundle.exists():
            return []
        data = self._read(bundle)
        if isinstance(data, dict):
            return [(str(k), v) for k, v in data.items() if isinstance(v, dict)]
        if isinstance(data, list):
            return [
                (str(item.get("id", index)), item)
                for index, item in enumerate(data)
                if isinstance(item, dict)
            ]
        raise DocumentStoreError(f"{bundle} does not hold a JSON list or object")

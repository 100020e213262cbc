"""Status catalog snapshot holder.

The catalog is loaded once per session and replaced whole whenever the
settings document changes. Readers take `store.current` and work on that
immutable snapshot; they never see a half-applied update.
"""

import logging
import threading

from .core.catalog import StatusCatalog
from .ports.document_store import DocumentStoreError
from .ports.record_repo import RecordRepository

logger = logging.getLogger(__name__)


class CatalogStore:
    """Single-writer holder of the current StatusCatalog snapshot."""

    def __init__(self, initial: StatusCatalog | None = None):
        self._current = initial or StatusCatalog.default()
        self._lock = threading.Lock()

    @property
    def current(self) -> StatusCatalog:
        return self._current

    def replace(self, catalog: StatusCatalog) -> bool:
        """Swap in a new snapshot. Returns True if it differs from the old one."""
        with self._lock:
            changed = catalog != self._current or catalog.colors != self._current.colors
            self._current = catalog
        if changed:
            logger.info(f"Status catalog updated: {list(catalog.labels)}")
        return changed

    def refresh(self, repo: RecordRepository) -> StatusCatalog:
        """
        Reload from the repository.

        Fetch failures and empty documents keep the previous snapshot.
        """
        try:
            catalog = repo.fetch_catalog()
        except DocumentStoreError as e:
            logger.warning(f"Keeping previous status catalog: {e}")
            return self._current
        if catalog is None:
            return self._current
        self.replace(catalog)
        return self._current

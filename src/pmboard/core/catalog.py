"""Administrator-configurable status label catalog - no I/O dependencies."""

import logging
from dataclasses import dataclass, field
from typing import Any

from .status import CanonicalStatus, canonicalize, is_known_label, normalize_label

logger = logging.getLogger(__name__)

ALL_OPTION = "All"
TODAY_OPTION = "Today's Task"
RECURRING_OPTION = "Recurring Task"

# Menu entries that select a view rather than a status.
PSEUDO_OPTIONS = (ALL_OPTION, TODAY_OPTION, RECURRING_OPTION)

# Preferred menu order; labels not listed sort alphabetically after these.
PREFERRED_ORDER = (
    TODAY_OPTION,
    "TODO",
    "In Progress",
    "Stuck",
    "Waiting For",
    "Hold by Client",
    "Need Help",
    "Done",
    RECURRING_OPTION,
    "Canceled",
)

DEFAULT_COLORS: dict[CanonicalStatus, str] = {
    CanonicalStatus.COMPLETED: "#34C759",
    CanonicalStatus.IN_PROGRESS: "#007AFF",
    CanonicalStatus.NOT_STARTED: "#8E8E93",
    CanonicalStatus.STUCK: "#FF9500",
    CanonicalStatus.WAITING_FOR_CLIENT: "#AF52DE",
    CanonicalStatus.ON_HOLD_BY_CLIENT: "#FF9500",
    CanonicalStatus.NEED_HELP: "#FF3B30",
    CanonicalStatus.CANCELED: "#8E8E93",
}


def is_pseudo_option(label: str) -> bool:
    return normalize_label(label) in {normalize_label(o) for o in PSEUDO_OPTIONS}


@dataclass(frozen=True)
class StatusCatalog:
    """
    Immutable snapshot of the configured status labels.

    `labels` is the menu order, pseudo-options included. Replace the whole
    snapshot on change; never mutate one in place.
    """

    labels: tuple[str, ...]
    colors: dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def default(cls) -> "StatusCatalog":
        return cls(
            labels=(
                ALL_OPTION,
                TODAY_OPTION,
                "TODO",
                "In Progress",
                "Stuck",
                "Waiting For",
                "Hold by Client",
                "Need Help",
                "Done",
                RECURRING_OPTION,
            )
        )

    @classmethod
    def from_labels(
        cls, labels: list[str], colors: dict[str, str] | None = None
    ) -> "StatusCatalog":
        """
        Build a catalog from raw labels.

        Trims, drops empties and exact duplicates, orders by PREFERRED_ORDER
        then alphabetically, and puts "All" first.
        """
        seen: set[str] = set()
        cleaned = []
        for raw in labels:
            if not isinstance(raw, str):
                continue
            label = raw.strip()
            if not label or label in seen or label == ALL_OPTION:
                continue
            seen.add(label)
            cleaned.append(label)

        def sort_key(label: str) -> tuple[int, str]:
            try:
                rank = PREFERRED_ORDER.index(label)
            except ValueError:
                rank = len(PREFERRED_ORDER)
            return (rank, label)

        ordered = sorted(cleaned, key=sort_key)
        return cls(labels=(ALL_OPTION, *ordered), colors=dict(colors or {}))

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "StatusCatalog | None":
        """
        Parse a task-statuses settings document.

        Accepts a `statuses` array of {"name", "color"} maps or plain strings;
        without one, any map values carrying a `name` are used. Returns None
        when the document holds no labels.
        """
        labels: list[str] = []
        colors: dict[str, str] = {}

        def take(entry: Any) -> None:
            if isinstance(entry, dict):
                name = entry.get("name")
                name = name.strip() if isinstance(name, str) else ""
                if not name:
                    return
                labels.append(name)
                color = entry.get("color")
                if isinstance(color, str):
                    colors[name] = color
            elif isinstance(entry, str) and entry.strip():
                labels.append(entry.strip())

        statuses = data.get("statuses")
        if isinstance(statuses, list):
            for entry in statuses:
                take(entry)
        else:
            for value in data.values():
                if isinstance(value, dict):
                    take(value)

        if not labels:
            logger.debug("Status document has no labels")
            return None
        return cls.from_labels(labels, colors)

    def status_labels(self) -> list[str]:
        """Labels that name a status (pseudo-options removed)."""
        return [label for label in self.labels if not is_pseudo_option(label)]

    def find(self, label: str) -> str | None:
        """First configured label equal to `label` after normalization."""
        wanted = normalize_label(label)
        for entry in self.status_labels():
            if normalize_label(entry) == wanted:
                return entry
        return None

    def default_label(self, status: CanonicalStatus) -> str:
        """Display text for a canonical status under this catalog."""
        exact = self.find(status.value)
        if exact is not None:
            return exact
        for entry in self.status_labels():
            if is_known_label(entry) and canonicalize(entry) is status:
                return entry
        return status.value

    def color_for(self, label: str) -> str:
        """Configured hex color for a label, else its canonical default."""
        if label in self.colors:
            return self.colors[label]
        entry = self.find(label)
        if entry is not None and entry in self.colors:
            return self.colors[entry]
        return DEFAULT_COLORS[canonicalize(label)]

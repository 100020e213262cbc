"""Canonical status taxonomy and label canonicalization - no I/O dependencies."""

import re
from enum import Enum


class CanonicalStatus(Enum):
    """Closed task status taxonomy. Values are the default display labels."""

    NOT_STARTED = "TODO"
    IN_PROGRESS = "In Progress"
    STUCK = "Stuck"
    WAITING_FOR_CLIENT = "Waiting For"
    ON_HOLD_BY_CLIENT = "Hold by Client"
    NEED_HELP = "Need Help"
    COMPLETED = "Done"
    CANCELED = "Canceled"

    @property
    def label(self) -> str:
        return self.value


class MeetingStatus(Enum):
    """Meeting lifecycle, smaller than the task taxonomy."""

    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, raw: object) -> "MeetingStatus":
        """Case-insensitive parse; anything unrecognised is Scheduled."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return cls.SCHEDULED
        return _MEETING_SYNONYMS.get(normalize_label(raw), cls.SCHEDULED)


_STRIP_PATTERN = re.compile(r"[\s\-_]+")


def normalize_label(label: str) -> str:
    """Trim, lower-case and drop spaces, hyphens and underscores."""
    return _STRIP_PATTERN.sub("", label.strip().lower())


_SYNONYMS: dict[CanonicalStatus, tuple[str, ...]] = {
    CanonicalStatus.NOT_STARTED: ("todo", "to do", "to-do", "not started", "notstarted"),
    CanonicalStatus.IN_PROGRESS: ("in progress", "in-progress", "inprogress"),
    CanonicalStatus.STUCK: ("stuck",),
    CanonicalStatus.WAITING_FOR_CLIENT: (
        "waiting for",
        "waiting",
        "waiting for client",
    ),
    CanonicalStatus.ON_HOLD_BY_CLIENT: (
        "hold by client",
        "on hold by client",
        "hold",
        "hold client",
    ),
    CanonicalStatus.NEED_HELP: ("need help",),
    CanonicalStatus.COMPLETED: ("done", "completed", "complete"),
    CanonicalStatus.CANCELED: ("canceled", "cancelled"),
}

# Normalized synonym -> status. Enum member names and values are included so
# that canonicalize() is stable on its own output.
SYNONYM_TABLE: dict[str, CanonicalStatus] = {}
for _status, _words in _SYNONYMS.items():
    for _word in (*_words, _status.value, _status.name):
        SYNONYM_TABLE[normalize_label(_word)] = _status

_MEETING_SYNONYMS: dict[str, MeetingStatus] = {
    normalize_label(word): status
    for status in MeetingStatus
    for word in (status.value, status.name)
}
_MEETING_SYNONYMS[normalize_label("canceled")] = MeetingStatus.CANCELLED
_MEETING_SYNONYMS[normalize_label("done")] = MeetingStatus.COMPLETED


def canonicalize(label: object) -> CanonicalStatus:
    """
    Map any label onto the canonical taxonomy.

    Total: non-strings and unknown labels fall back to NOT_STARTED.
    """
    if isinstance(label, CanonicalStatus):
        return label
    if not isinstance(label, str):
        return CanonicalStatus.NOT_STARTED
    return SYNONYM_TABLE.get(normalize_label(label), CanonicalStatus.NOT_STARTED)


def is_known_label(label: str) -> bool:
    """True if the label is a synonym of some canonical status."""
    return normalize_label(label) in SYNONYM_TABLE

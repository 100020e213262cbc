"""Progress normalization - no I/O dependencies.

Stored progress values are ambiguous: some writers store a fraction of 1,
others a percentage out of 100. Anything above 1 is read as a percentage,
anything at or below 1 as a fraction. That makes exactly 1 mean 100%, so a
value written as "1 percent" reads as complete.
"""

import math
from dataclasses import dataclass
from typing import Iterable

# Absorbs float noise such as 0.57 * 100 == 56.99999999999999 before truncating.
_EPSILON = 1e-9


def fraction(progress: float | int | None) -> float:
    """Completion as a fraction clamped into [0, 1]."""
    if progress is None:
        return 0.0
    try:
        value = float(progress)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    if value > 1:
        value = value / 100.0
    return min(max(value, 0.0), 1.0)


def percentage(progress: float | int | None) -> int:
    """Completion as a truncated integer percentage in [0, 100]."""
    return int(math.floor(fraction(progress) * 100 + _EPSILON))


def is_complete(progress: float | int | None) -> bool:
    return percentage(progress) >= 100


def is_not_started(progress: float | int | None) -> bool:
    return percentage(progress) == 0


@dataclass
class ProgressSummary:
    """Counts of items per completion bucket."""

    completed: int = 0
    in_progress: int = 0
    not_started: int = 0

    @property
    def total(self) -> int:
        return self.completed + self.in_progress + self.not_started


def summarize_progress(values: Iterable[float | int | None]) -> ProgressSummary:
    """
    Bucket progress values into completed / in progress / not started.

    Pure function - no I/O.
    """
    summary = ProgressSummary()
    for value in values:
        pct = percentage(value)
        if pct >= 100:
            summary.completed += 1
        elif pct == 0:
            summary.not_started += 1
        else:
            summary.in_progress += 1
    return summary

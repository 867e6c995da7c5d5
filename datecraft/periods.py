"""Date periods: length, membership and overlap."""

from __future__ import annotations

from dataclasses import dataclass

from .dates import Date, difference_in_days


@dataclass(frozen=True)
class Period:
    """A span of days from ``start`` to ``end``, both included."""

    start: Date
    end: Date

    def length(self, include_end_day: bool = False) -> int:
        """Return the number of days from start to end."""
        return difference_in_days(self.start, self.end, include_end_day)

    def contains(self, date: Date) -> bool:
        """Return True if ``date`` lies within the period."""
        return self.start <= date <= self.end

    def overlaps(self, other: Period) -> bool:
        """Return True if the two periods share at least one day."""
        return not (other.end < self.start or other.start > self.end)

    def overlap_days(self, other: Period) -> int:
        """Return how many days the two periods have in common."""
        if not self.overlaps(other):
            return 0
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        return difference_in_days(start, end, True)
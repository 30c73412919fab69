"""A span of calendar dates and the overlap test between two spans."""

from __future__ import annotations

from dataclasses import dataclass

from datetext.dates import Date, DateCompare

__all__ = ["Period"]


@dataclass(frozen=True)
class Period:
    """A period running from ``start`` to ``end``, both days included."""

    start: Date
    end: Date

    def overlaps(self, other: Period) -> bool:
        """Return True if the two periods share at least one day."""
        if other.end.compare(self.start) is DateCompare.BEFORE:
            return False
        if other.start.compare(self.end) is DateCompare.AFTER:
            return False
        return True

    def describe(self) -> str:
        """Return the start and end dates as two labelled lines."""
        return f"Period Start: {self.start}\nPeriod End: {self.end}\n"
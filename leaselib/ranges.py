# leaselib/ranges.py - DateRange model and overlap primitives
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from leaselib.utils import from_timestamp, is_missing, to_timestamp


@dataclass(frozen=True)
class DateRange:
    """Inclusive span of days. Fields keep whatever the caller passed in."""
    start_date: Any = None
    end_date: Any = None

    @classmethod
    def from_mapping(cls, data: dict) -> 'DateRange':
        start = data.get('start_date', data.get('startDate'))
        end = data.get('end_date', data.get('endDate'))
        return cls(start, end)

    def is_complete(self) -> bool:
        return not (is_missing(self.start_date) or is_missing(self.end_date))

    def timestamps(self):
        return to_timestamp(self.start_date), to_timestamp(self.end_date)

    def normalized(self) -> 'DateRange':
        start, end = self.timestamps()
        return DateRange(
            from_timestamp(start) if start is not None else None,
            from_timestamp(end) if end is not None else None,
        )


def ranges_overlap(a: DateRange, b: DateRange) -> bool:
    a_start, a_end = a.timestamps()
    b_start, b_end = b.timestamps()
    if None in (a_start, a_end, b_start, b_end):
        return False
    # b starts in a
    if a_start <= b_start <= a_end:
        return True
    # b ends in a
    if a_start <= b_end <= a_end:
        return True
    # b includes a
    if b_start < a_start and a_end < b_end:
        return True
    return False


def find_overlapping_range(ranges: Sequence[DateRange], candidate: DateRange) -> int:
    """Index of the first range overlapping candidate, -1 if there is none."""
    for i, r in enumerate(ranges):
        if ranges_overlap(r, candidate):
            return i
    return -1


def compare_range_durations(a: DateRange, b: DateRange) -> Optional[int]:
    """Compare range lengths: -1 if a is shorter, 1 if longer, 0 if equal.

    Returns None when either range is missing a boundary or cannot be parsed.
    """
    if not (a.is_complete() and b.is_complete()):
        return None
    a_start, a_end = a.timestamps()
    b_start, b_end = b.timestamps()
    if None in (a_start, a_end, b_start, b_end):
        return None
    a_len = a_end - a_start
    b_len = b_end - b_start
    if a_len < b_len:
        return -1
    if a_len > b_len:
        return 1
    return 0

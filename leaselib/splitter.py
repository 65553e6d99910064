# leaselib/splitter.py - carve a reservation out of an availability range
from enum import Enum
from typing import List, NamedTuple, Optional

from leaselib.ranges import DateRange, ranges_overlap
from leaselib.settings import DAY_MS, superset_policy
from leaselib.utils import from_timestamp
import logging
logger = logging.getLogger(__name__)


class Overlap(Enum):
    DISJOINT = 'disjoint'
    # withdraw reaches outside split
    SUPERSET = 'superset'
    LEFT_OVERHANG = 'left_overhang'
    RIGHT_OVERHANG = 'right_overhang'
    # withdraw boundaries inside split
    EXACT = 'exact'
    LEFT_FLUSH = 'left_flush'
    RIGHT_FLUSH = 'right_flush'
    INTERIOR = 'interior'


class Bounds(NamedTuple):
    split_start: int
    split_end: int
    withdraw_start: int
    withdraw_end: int


def _bounds(split: DateRange, withdraw: DateRange) -> Optional[Bounds]:
    if not (split.is_complete() and withdraw.is_complete()):
        logger.debug('missing boundary: %s / %s', split, withdraw)
        return None
    if not ranges_overlap(split, withdraw):
        logger.debug('ranges do not overlap: %s / %s', split, withdraw)
        return None
    s_start, s_end = split.timestamps()
    w_start, w_end = withdraw.timestamps()
    if None in (s_start, s_end, w_start, w_end):
        logger.debug('malformed dates: %s / %s', split, withdraw)
        return None
    if s_start > s_end:
        logger.debug('split range is reversed: %s', split)
        return None
    if w_start > w_end:
        logger.debug('withdraw range is reversed: %s', withdraw)
        return None
    return Bounds(s_start, s_end, w_start, w_end)


def _classify(b: Bounds) -> Overlap:
    s0, s1, w0, w1 = b
    if w0 < s0 or w1 > s1 + DAY_MS:
        if w0 < s0 and w1 <= s1:
            return Overlap.LEFT_OVERHANG
        if s0 <= w0 <= s1 and w1 > s1:
            return Overlap.RIGHT_OVERHANG
        if w0 < s0 and w1 > s1:
            return Overlap.SUPERSET
        return Overlap.DISJOINT
    if w0 == s0 and w1 == s1:
        return Overlap.EXACT
    if w0 == s0:
        return Overlap.LEFT_FLUSH
    if w1 == s1:
        return Overlap.RIGHT_FLUSH
    return Overlap.INTERIOR


def classify_overlap(split: DateRange, withdraw: DateRange) -> Overlap:
    """Geometric relation of withdraw to split. Invalid input is DISJOINT."""
    b = _bounds(split, withdraw)
    if b is None:
        return Overlap.DISJOINT
    return _classify(b)


def _before(b: Bounds):
    return b.split_start, b.withdraw_start - DAY_MS


def _after(b: Bounds):
    return b.withdraw_end + DAY_MS, b.split_end


def subtract_range(split: DateRange, withdraw: DateRange, policy: Optional[str] = None) -> List[Optional[DateRange]]:
    """Remove withdraw from split and return what is left of split.

    [] means invalid input or no overlap, [None] means split is fully
    consumed and should be deleted, otherwise one or two remaining ranges.
    """
    b = _bounds(split, withdraw)
    if b is None:
        return []
    case = _classify(b)
    logger.debug('subtract_range case %s for %s', case.value, b)

    if case is Overlap.DISJOINT:
        return []
    if case is Overlap.EXACT:
        return [None]
    if case is Overlap.SUPERSET:
        if superset_policy(policy) == 'consume':
            return [None]
        pieces = [(b.split_start, b.split_end)]
    elif case in (Overlap.LEFT_OVERHANG, Overlap.LEFT_FLUSH):
        pieces = [_after(b)]
    elif case in (Overlap.RIGHT_OVERHANG, Overlap.RIGHT_FLUSH):
        pieces = [_before(b)]
    else:
        pieces = [_before(b), _after(b)]

    # withdraw ending inside the one-day tolerance past split leaves inverted pieces
    pieces = [(start, end) for start, end in pieces if start <= end]
    if not pieces:
        return [None]
    try:
        return [DateRange(from_timestamp(start), from_timestamp(end)) for start, end in pieces]
    except OverflowError:
        logger.debug('remaining range out of calendar bounds: %s', b)
        return []

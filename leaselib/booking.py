# leaselib/booking.py - apply a booking to in-memory availability and reservation lists
from typing import List, Optional, Sequence, Tuple

from leaselib.ranges import DateRange, find_overlapping_range
from leaselib.splitter import subtract_range
from leaselib.utils import days_between
import logging
logger = logging.getLogger(__name__)


class BookingError(RuntimeError):
    pass


def is_available(reservations: Sequence[DateRange], requested: DateRange) -> bool:
    return find_overlapping_range(reservations, requested) == -1


def apply_withdrawal(availabilities: Sequence[DateRange], requested: DateRange, policy: Optional[str] = None) -> List[DateRange]:
    """Return a new availability list with requested carved out of the window it falls in.

    A fully consumed window is dropped, a split window is replaced in place by
    its remaining pieces. Under the keep policy a request engulfing the whole
    window leaves that window untouched.
    """
    idx = find_overlapping_range(availabilities, requested)
    if idx == -1:
        raise BookingError('No availability window covers the requested dates')
    remaining = subtract_range(availabilities[idx], requested, policy)
    if not remaining:
        raise BookingError('Requested dates cannot be withdrawn from availability')
    if remaining == [availabilities[idx].normalized()]:
        logger.warning('Requested range %s engulfs window %s, availability left unchanged', requested, availabilities[idx])
    updated = list(availabilities[:idx])
    if remaining != [None]:
        updated.extend(remaining)
    updated.extend(availabilities[idx + 1:])
    return updated


def reserve(availabilities: Sequence[DateRange], reservations: Sequence[DateRange], requested: DateRange, policy: Optional[str] = None) -> Tuple[List[DateRange], List[DateRange]]:
    if not requested.is_complete():
        raise BookingError('Missing or empty dates')
    if not is_available(reservations, requested):
        logger.warning('Requested range %s overlaps an existing reservation', requested)
        raise BookingError('Selected item is not available for these dates')
    updated = apply_withdrawal(availabilities, requested, policy)
    booked = list(reservations) + [requested.normalized()]
    logger.info('Reserved %s, %d availability window(s) left', requested, len(updated))
    return updated, booked


def booking_price(daily_price: float, requested: DateRange) -> float:
    start, end = requested.timestamps()
    if start is None or end is None or start > end:
        raise BookingError('Invalid booking dates')
    norm = requested.normalized()
    days = days_between(norm.start_date.date(), norm.end_date.date())
    return float(daily_price) * days

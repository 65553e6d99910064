from leaselib.booking import BookingError, apply_withdrawal, booking_price, is_available, reserve
from leaselib.ranges import DateRange
import logging
import pytest

def dr(start, end):
    return DateRange(start, end)

def days(start, end):
    return dr(start, end).normalized()

AVAILABILITY = [
    dr('2024-01-01', '2024-01-10'),
    dr('2024-02-01', '2024-02-28'),
]

def test_is_available():
    reservations = [dr('2024-01-03', '2024-01-04')]
    assert is_available([], dr('2024-01-01', '2024-01-02'))
    assert is_available(reservations, dr('2024-01-05', '2024-01-06'))
    assert not is_available(reservations, dr('2024-01-04', '2024-01-06'))

def test_apply_withdrawal_splits_matching_window():
    updated = apply_withdrawal(AVAILABILITY, dr('2024-02-10', '2024-02-12'))
    assert updated == [
        AVAILABILITY[0],
        days('2024-02-01', '2024-02-09'),
        days('2024-02-13', '2024-02-28'),
    ]

def test_apply_withdrawal_drops_consumed_window():
    updated = apply_withdrawal(AVAILABILITY, dr('2024-01-01', '2024-01-10'))
    assert updated == [AVAILABILITY[1]]

def test_apply_withdrawal_leaves_input_list_alone():
    original = list(AVAILABILITY)
    apply_withdrawal(AVAILABILITY, dr('2024-01-01', '2024-01-05'))
    assert AVAILABILITY == original

def test_apply_withdrawal_outside_availability():
    with pytest.raises(BookingError):
        apply_withdrawal(AVAILABILITY, dr('2024-03-01', '2024-03-05'))

def test_reserve_updates_both_lists():
    availability, reservations = reserve(AVAILABILITY, [], dr('2024-01-01', '2024-01-05'))
    assert availability == [days('2024-01-06', '2024-01-10'), AVAILABILITY[1]]
    assert reservations == [days('2024-01-01', '2024-01-05')]

def test_reserve_rejects_overlapping_reservation():
    reservations = [days('2024-01-01', '2024-01-05')]
    with pytest.raises(BookingError):
        reserve(AVAILABILITY, reservations, dr('2024-01-05', '2024-01-07'))

def test_reserve_rejects_missing_dates():
    with pytest.raises(BookingError):
        reserve(AVAILABILITY, [], dr('2024-01-05', None))

def test_booking_price():
    assert booking_price(20, dr('2024-01-01', '2024-01-01')) == 20.0
    assert booking_price(12.5, dr('2024-01-01', '2024-01-04')) == 50.0
    with pytest.raises(BookingError):
        booking_price(10, dr('2024-01-04', '2024-01-01'))

def test_reserve_engulfing_request_keeps_window(caplog):
    window = dr('2024-01-05', '2024-01-10')
    with caplog.at_level(logging.WARNING):
        availability, reservations = reserve([window], [], dr('2024-01-01', '2024-01-20'))
    assert availability == [window.normalized()]
    assert reservations == [days('2024-01-01', '2024-01-20')]
    assert 'availability left unchanged' in caplog.text

def test_reserve_engulfing_request_consume_policy(caplog):
    window = dr('2024-01-05', '2024-01-10')
    with caplog.at_level(logging.WARNING):
        availability, _ = reserve([window], [], dr('2024-01-01', '2024-01-20'), policy='consume')
    assert availability == []
    assert 'availability left unchanged' not in caplog.text

"""Booking Status Enum"""

from enum import StrEnum


class BookingStatus(StrEnum):
    PENDING = 'PENDING'
    CONFIRMED = 'CONFIRMED'
    RETURNED = 'RETURNED'
    CANCELLED = 'CANCELLED'

    @property
    def is_active(self) -> bool:
        """Active bookings hold (or may come to hold) a seat"""
        return self in (BookingStatus.PENDING, BookingStatus.CONFIRMED)

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStatus.RETURNED, BookingStatus.CANCELLED)

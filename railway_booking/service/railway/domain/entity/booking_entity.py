from datetime import date
from typing import Optional

import attrs

from railway_booking.platform.exception.exceptions import DomainError
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.service.railway.domain.enum.booking_status import BookingStatus


@attrs.define
class Booking:
    booking_id: str
    passenger_id: str
    train_id: str
    booking_date: str  # YYYY-MM-DD
    status: BookingStatus = attrs.field(default=BookingStatus.PENDING, converter=BookingStatus)
    seat_number: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        booking_id: str,
        passenger_id: str,
        train_id: str,
        booking_date: Optional[date] = None,
    ) -> 'Booking':
        if not booking_id:
            raise DomainError('booking_id is required')
        if not passenger_id or not train_id:
            raise DomainError('Booking must reference a passenger and a train')

        return cls(
            booking_id=booking_id,
            passenger_id=passenger_id,
            train_id=train_id,
            booking_date=(booking_date or date.today()).isoformat(),
            status=BookingStatus.PENDING,
        )

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    @Logger.io
    def validate_can_be_confirmed(self) -> None:
        if self.status != BookingStatus.PENDING:
            raise DomainError('Only pending bookings can be confirmed')

    @Logger.io
    def confirm(self, *, seat_number: int) -> None:
        """
        PENDING → CONFIRMED with the assigned seat

        Raises:
            DomainError: When booking is not pending
        """
        self.validate_can_be_confirmed()
        if seat_number < 1:
            raise DomainError('Seat number must be positive')
        self.seat_number = seat_number
        self.status = BookingStatus.CONFIRMED

    @Logger.io
    def validate_can_be_returned(self) -> None:
        if self.status != BookingStatus.CONFIRMED:
            raise DomainError('Only confirmed bookings can be returned')

    @Logger.io
    def mark_as_returned(self) -> None:
        self.validate_can_be_returned()
        self.status = BookingStatus.RETURNED

    @Logger.io
    def validate_can_be_cancelled(self) -> None:
        if self.status.is_terminal:
            raise DomainError('Booking is already cancelled or returned')

    @Logger.io
    def cancel(self) -> bool:
        """
        PENDING/CONFIRMED → CANCELLED

        Returns:
            True when the booking held a seat that must be released

        Raises:
            DomainError: When booking is already terminal
        """
        self.validate_can_be_cancelled()
        held_seat = self.status == BookingStatus.CONFIRMED
        self.status = BookingStatus.CANCELLED
        return held_seat

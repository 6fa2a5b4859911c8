"""
Passenger role operations.

Each operation checks the caller's role tag and its own preconditions, then
delegates to RailwaySystem. Failures are reported through the system's
notifier and surface as None / False.
"""

from typing import List, Optional

import uuid_utils as uuid

from railway_booking.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.service.railway.app.railway_system import RailwaySystem
from railway_booking.service.railway.domain.entity.booking_entity import Booking
from railway_booking.service.railway.domain.entity.user_entity import User
from railway_booking.service.railway.domain.enum.user_role import UserRole


def generate_booking_id() -> str:
    # UUIDv7 is time-ordered, and unique within the same millisecond
    return f'B{uuid.uuid7().hex}'


@Logger.io
def book_train(system: RailwaySystem, passenger: User, *, train_id: str) -> Optional[Booking]:
    try:
        passenger.validate_role(UserRole.PASSENGER)

        train = system.get_train_by_id(train_id)
        if train is None:
            raise NotFoundError('Train not found')
        if train.available_seats <= 0:
            raise DomainError('No seats available on this train')

        booking = Booking.create(
            booking_id=generate_booking_id(),
            passenger_id=passenger.user_id,
            train_id=train.train_id,
        )
    except CustomBaseError as e:
        system.notify_failure(e)
        return None

    if not system.add_booking(booking):
        return None

    passenger.remember_booking(booking.booking_id)
    if system.get_user_by_id(passenger.user_id) is not None:
        system.update_user(passenger)

    Logger.base.info(
        f'🎫 [BOOKING] {passenger.user_id} requested {booking.booking_id} on {train_id}'
    )
    return booking


def get_my_bookings(system: RailwaySystem, passenger: User) -> List[Booking]:
    return system.get_bookings_by_passenger(passenger.user_id)


@Logger.io
def cancel_my_booking(system: RailwaySystem, passenger: User, *, booking_id: str) -> bool:
    try:
        passenger.validate_role(UserRole.PASSENGER)

        booking = system.get_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundError('Booking not found')
        if booking.passenger_id != passenger.user_id:
            raise ForbiddenError('Only the passenger can cancel this booking')
    except CustomBaseError as e:
        return system.notify_failure(e)

    return system.cancel_booking(booking_id)

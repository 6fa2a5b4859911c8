"""
Railway staff role operations.

Thin wrappers that enforce the seat and status preconditions before
delegating to RailwaySystem. Each returns True on success; on failure the
reason goes to the system's notifier and False is returned.
"""

from railway_booking.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    NotFoundError,
)
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.service.railway.app.railway_system import RailwaySystem
from railway_booking.service.railway.domain.entity.train_entity import Train
from railway_booking.service.railway.domain.entity.user_entity import User
from railway_booking.service.railway.domain.enum.user_role import UserRole


@Logger.io
def add_train(system: RailwaySystem, staff: User, *, train: Train) -> bool:
    try:
        staff.validate_role(UserRole.STAFF)
    except CustomBaseError as e:
        return system.notify_failure(e)

    return system.add_train(train)


@Logger.io
def update_train_status(
    system: RailwaySystem, staff: User, *, train_id: str, new_total_seats: int
) -> bool:
    try:
        staff.validate_role(UserRole.STAFF)

        train = system.get_train_by_id(train_id)
        if train is None:
            raise NotFoundError('Train not found')
        if new_total_seats < 0:
            raise DomainError('Seat count cannot be negative')
        if not train.set_total_seats(new_total_seats):
            raise DomainError('Cannot reduce seats below booked count')
    except CustomBaseError as e:
        return system.notify_failure(e)

    return system.update_train(train)


@Logger.io
def delete_train(system: RailwaySystem, staff: User, *, train_id: str) -> bool:
    try:
        staff.validate_role(UserRole.STAFF)
    except CustomBaseError as e:
        return system.notify_failure(e)

    return system.remove_train(train_id)


@Logger.io
def issue_booking(system: RailwaySystem, staff: User, *, booking_id: str) -> bool:
    """
    Confirm a pending booking and assign the next sequential seat.

    Flow:
    1. Booking must exist and be PENDING
    2. Referenced train must exist and have a free seat
    3. seat_number = total_seats - available_seats + 1, then book the seat
    """
    try:
        staff.validate_role(UserRole.STAFF)

        booking = system.get_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundError('Booking not found')
        booking.validate_can_be_confirmed()

        train = system.get_train_by_id(booking.train_id)
        if train is None:
            raise NotFoundError('Train not found')
        if train.available_seats <= 0:
            raise DomainError('No seats available')

        booking.confirm(seat_number=train.next_seat_number())
    except CustomBaseError as e:
        return system.notify_failure(e)

    train.book_seat()
    Logger.base.info(
        f'✅ [BOOKING] {booking_id} confirmed on {train.train_id}, seat {booking.seat_number}'
    )
    return system.update_booking(booking) and system.update_train(train)


@Logger.io
def process_return(system: RailwaySystem, staff: User, *, booking_id: str) -> bool:
    try:
        staff.validate_role(UserRole.STAFF)

        booking = system.get_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundError('Booking not found')
        booking.mark_as_returned()
    except CustomBaseError as e:
        return system.notify_failure(e)

    train = system.get_train_by_id(booking.train_id)
    if train is not None:
        train.release_seat()
        system.update_train(train)

    return system.update_booking(booking)

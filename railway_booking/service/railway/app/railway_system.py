"""
RailwaySystem - Aggregate Root for trains and bookings

[Design]
- Sole owner of the Train and Booking collections; callers hold references
  to the live entities and hand them back through the update methods
- Every mutation rewrites the whole Train and Booking collections
- Public operations never raise for domain failures: they return False (or
  None for lookups) and push the reason to the notifier

[Business Invariants]
- 0 <= booked_seats <= total_seats for every train
- booked_seats equals the number of CONFIRMED bookings for that train after
  every load
"""

from collections import Counter
from typing import List, Optional

from railway_booking.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    DomainError,
    NotFoundError,
)
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.service.railway.app.interface.i_notifier import INotifier
from railway_booking.service.railway.app.interface.i_railway_state_repo import IRailwayStateRepo
from railway_booking.service.railway.domain.entity.booking_entity import Booking
from railway_booking.service.railway.domain.entity.train_entity import Train
from railway_booking.service.railway.domain.entity.user_entity import User
from railway_booking.service.railway.domain.enum.booking_status import BookingStatus


class RailwaySystem:
    def __init__(self, *, state_repo: IRailwayStateRepo, notifier: INotifier) -> None:
        self.state_repo = state_repo
        self.notifier = notifier
        self._trains: List[Train] = []
        self._bookings: List[Booking] = []
        self._users: List[User] = []
        self.reload()

    # ========== PERSISTENCE ==========

    @Logger.io
    def reload(self) -> None:
        """Replace in-memory state with the stored collections, then resync seat counts"""
        self._trains = self.state_repo.load_trains()
        self._bookings = self.state_repo.load_bookings()
        self._users = self.state_repo.load_users()
        self._sync_booked_seats()
        Logger.base.info(
            f'🚆 [RAILWAY] Loaded {len(self._trains)} trains, '
            f'{len(self._bookings)} bookings, {len(self._users)} users'
        )

    def save_to_database(self) -> bool:
        """
        Persist both collections.

        A failed write is logged by the storage layer and otherwise ignored;
        in-memory state stays ahead of the stored state until the next save.
        """
        trains_saved = self.state_repo.save_trains(self._trains)
        bookings_saved = self.state_repo.save_bookings(self._bookings)
        return trains_saved and bookings_saved

    def _sync_booked_seats(self) -> None:
        confirmed_per_train = Counter(
            booking.train_id
            for booking in self._bookings
            if booking.status == BookingStatus.CONFIRMED
        )
        for train in self._trains:
            overflow = train.reset_booked_seats(confirmed_per_train[train.train_id])
            if overflow:
                Logger.base.warning(
                    f'⚠️ [RAILWAY] Train {train.train_id} has {overflow} more confirmed '
                    f'bookings than seats, capped at {train.total_seats}'
                )

    @Logger.io
    def reset(self) -> bool:
        """Remove every stored key and empty the in-memory collections"""
        self._trains, self._bookings, self._users = [], [], []
        return self.state_repo.clear()

    def notify_failure(self, reason: CustomBaseError | str) -> bool:
        """Push a failure reason to the user; always returns False"""
        message = reason.message if isinstance(reason, CustomBaseError) else reason
        self.notifier.notify(message=message)
        return False

    # ========== TRAIN MANAGEMENT ==========

    @Logger.io
    def add_train(self, train: Train) -> bool:
        if self.get_train_by_id(train.train_id):
            return self.notify_failure(ConflictError('Train with this ID already exists'))

        self._trains.append(train)
        self.save_to_database()
        return True

    def get_train_by_id(self, train_id: str) -> Optional[Train]:
        return next((train for train in self._trains if train.train_id == train_id), None)

    def get_all_trains(self) -> List[Train]:
        return list(self._trains)

    @Logger.io
    def update_train(self, train: Train) -> bool:
        for index, existing in enumerate(self._trains):
            if existing.train_id == train.train_id:
                self._trains[index] = train
                self.save_to_database()
                return True
        return self.notify_failure(NotFoundError('Train not found'))

    @Logger.io
    def remove_train(self, train_id: str) -> bool:
        if any(
            booking.train_id == train_id and booking.is_active for booking in self._bookings
        ):
            return self.notify_failure(DomainError('Cannot delete train with active bookings'))

        train = self.get_train_by_id(train_id)
        if train is None:
            return self.notify_failure(NotFoundError('Train not found'))

        self._trains.remove(train)
        self.save_to_database()
        return True

    # ========== BOOKING MANAGEMENT ==========

    @Logger.io
    def add_booking(self, booking: Booking) -> bool:
        if self.get_booking_by_id(booking.booking_id):
            return self.notify_failure(ConflictError('Booking with this ID already exists'))

        self._bookings.append(booking)
        self.save_to_database()
        return True

    def get_booking_by_id(self, booking_id: str) -> Optional[Booking]:
        return next(
            (booking for booking in self._bookings if booking.booking_id == booking_id), None
        )

    def get_all_bookings(self) -> List[Booking]:
        return list(self._bookings)

    def get_bookings_by_passenger(self, passenger_id: str) -> List[Booking]:
        return [booking for booking in self._bookings if booking.passenger_id == passenger_id]

    def get_bookings_by_train(self, train_id: str) -> List[Booking]:
        return [booking for booking in self._bookings if booking.train_id == train_id]

    @Logger.io
    def update_booking(self, booking: Booking) -> bool:
        for index, existing in enumerate(self._bookings):
            if existing.booking_id == booking.booking_id:
                self._bookings[index] = booking
                self.save_to_database()
                return True
        return self.notify_failure(NotFoundError('Booking not found'))

    @Logger.io
    def cancel_booking(self, booking_id: str) -> bool:
        booking = self.get_booking_by_id(booking_id)
        if booking is None:
            return self.notify_failure(NotFoundError('Booking not found'))

        try:
            held_seat = booking.cancel()
        except DomainError as e:
            return self.notify_failure(e)

        if held_seat and (train := self.get_train_by_id(booking.train_id)):
            train.release_seat()

        self.save_to_database()
        return True

    # ========== USER DIRECTORY ==========

    @Logger.io
    def register_user(self, user: User) -> bool:
        if self.get_user_by_id(user.user_id):
            return self.notify_failure(ConflictError('User with this ID already exists'))

        self._users.append(user)
        self.state_repo.save_users(self._users)
        return True

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return next((user for user in self._users if user.user_id == user_id), None)

    def get_all_users(self) -> List[User]:
        return list(self._users)

    @Logger.io
    def update_user(self, user: User) -> bool:
        for index, existing in enumerate(self._users):
            if existing.user_id == user.user_id:
                self._users[index] = user
                self.state_repo.save_users(self._users)
                return True
        return self.notify_failure(NotFoundError('User not found'))

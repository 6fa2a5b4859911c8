from typing import Any, Callable, List, TypeVar

from pydantic import BaseModel, ValidationError

from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.service.railway.app.interface.i_railway_state_repo import IRailwayStateRepo
from railway_booking.service.railway.domain.entity.booking_entity import Booking
from railway_booking.service.railway.domain.entity.train_entity import Train
from railway_booking.service.railway.domain.entity.user_entity import User
from railway_booking.service.railway.driven_adapter.model.railway_record import (
    BookingRecord,
    TrainRecord,
    UserRecord,
)
from railway_booking.service.railway.driven_adapter.state.railway_database import (
    RailwayDatabase,
    StorageKey,
)


_Record = TypeVar('_Record', bound=BaseModel)
_Entity = TypeVar('_Entity')


class RailwayStateRepoImpl(IRailwayStateRepo):
    def __init__(self, *, database: RailwayDatabase) -> None:
        self.database = database

    # ========== Mapping ==========

    @staticmethod
    def _train_to_entity(record: TrainRecord) -> Train:
        """
        Stored bookedSeats is only a cache; clamp it so a stale value never
        fails construction. RailwaySystem recomputes it right after loading.
        """
        return Train(
            train_id=record.train_id,
            train_name=record.train_name,
            source=record.source,
            destination=record.destination,
            departure_date=record.departure_date,
            departure_time=record.departure_time,
            total_seats=record.total_seats,
            booked_seats=min(record.booked_seats, record.total_seats),
        )

    @staticmethod
    def _train_to_record(train: Train) -> TrainRecord:
        return TrainRecord(
            train_id=train.train_id,
            train_name=train.train_name,
            source=train.source,
            destination=train.destination,
            departure_date=train.departure_date,
            departure_time=train.departure_time,
            total_seats=train.total_seats,
            booked_seats=train.booked_seats,
        )

    @staticmethod
    def _booking_to_entity(record: BookingRecord) -> Booking:
        return Booking(
            booking_id=record.booking_id,
            passenger_id=record.passenger_id,
            train_id=record.train_id,
            booking_date=record.booking_date,
            status=record.status,
            seat_number=record.seat_number,
        )

    @staticmethod
    def _booking_to_record(booking: Booking) -> BookingRecord:
        return BookingRecord(
            booking_id=booking.booking_id,
            passenger_id=booking.passenger_id,
            train_id=booking.train_id,
            booking_date=booking.booking_date,
            status=booking.status,
            seat_number=booking.seat_number,
        )

    @staticmethod
    def _user_to_entity(record: UserRecord) -> User:
        return User(
            user_id=record.user_id,
            name=record.name,
            email=record.email,
            role=record.role,
            designation=record.designation,
            booking_ids=list(record.booking_ids),
        )

    @staticmethod
    def _user_to_record(user: User) -> UserRecord:
        return UserRecord(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            role=user.role,
            designation=user.designation,
            booking_ids=list(user.booking_ids),
        )

    # ========== Collections ==========

    def _load_collection(
        self,
        key: StorageKey,
        record_type: type[_Record],
        to_entity: Callable[[_Record], _Entity],
        id_of: Callable[[_Entity], str],
    ) -> List[_Entity]:
        raw_items: Any = self.database.load(key, [])
        if not isinstance(raw_items, list):
            Logger.base.warning(f'⚠️ [REPO] {key} is not a JSON array, ignoring stored value')
            return []

        entities: List[_Entity] = []
        seen_ids: set[str] = set()
        for index, raw in enumerate(raw_items):
            try:
                entity = to_entity(record_type.model_validate(raw))
            except (ValidationError, ValueError, TypeError) as e:
                Logger.base.warning(f'⚠️ [REPO] Skipping invalid {key}[{index}]: {e}')
                continue

            # First occurrence wins
            entity_id = id_of(entity)
            if entity_id in seen_ids:
                Logger.base.warning(
                    f'⚠️ [REPO] Skipping invalid {key}[{index}]: duplicate id {entity_id}'
                )
                continue
            seen_ids.add(entity_id)
            entities.append(entity)
        return entities

    @Logger.io
    def load_trains(self) -> List[Train]:
        return self._load_collection(
            StorageKey.TRAINS,
            TrainRecord,
            self._train_to_entity,
            lambda train: train.train_id,
        )

    @Logger.io
    def load_bookings(self) -> List[Booking]:
        return self._load_collection(
            StorageKey.BOOKINGS,
            BookingRecord,
            self._booking_to_entity,
            lambda booking: booking.booking_id,
        )

    @Logger.io
    def load_users(self) -> List[User]:
        return self._load_collection(
            StorageKey.USERS,
            UserRecord,
            self._user_to_entity,
            lambda user: user.user_id,
        )

    @Logger.io
    def save_trains(self, trains: List[Train]) -> bool:
        return self.database.save(
            StorageKey.TRAINS, [self._train_to_record(train).dump() for train in trains]
        )

    @Logger.io
    def save_bookings(self, bookings: List[Booking]) -> bool:
        return self.database.save(
            StorageKey.BOOKINGS,
            [self._booking_to_record(booking).dump() for booking in bookings],
        )

    @Logger.io
    def save_users(self, users: List[User]) -> bool:
        return self.database.save(
            StorageKey.USERS, [self._user_to_record(user).dump() for user in users]
        )

    @Logger.io
    def clear(self) -> bool:
        return self.database.clear()

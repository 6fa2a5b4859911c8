"""
Railway State Repository Interface

Loads and stores whole collections; there is no per-record access.
"""

from abc import ABC, abstractmethod
from typing import List

from railway_booking.service.railway.domain.entity.booking_entity import Booking
from railway_booking.service.railway.domain.entity.train_entity import Train
from railway_booking.service.railway.domain.entity.user_entity import User


class IRailwayStateRepo(ABC):
    @abstractmethod
    def load_trains(self) -> List[Train]:
        pass

    @abstractmethod
    def load_bookings(self) -> List[Booking]:
        pass

    @abstractmethod
    def load_users(self) -> List[User]:
        pass

    @abstractmethod
    def save_trains(self, trains: List[Train]) -> bool:
        """
        Overwrite the stored train collection

        Returns:
            False when the write failed (already logged)
        """
        pass

    @abstractmethod
    def save_bookings(self, bookings: List[Booking]) -> bool:
        pass

    @abstractmethod
    def save_users(self, users: List[User]) -> bool:
        pass

    @abstractmethod
    def clear(self) -> bool:
        pass

"""
Persisted record shapes.

Field aliases are the camelCase keys written to storage; models accept either
the alias or the field name when reading.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from railway_booking.service.railway.domain.enum.booking_status import BookingStatus
from railway_booking.service.railway.domain.enum.user_role import UserRole


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    def dump(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)


class TrainRecord(_Record):
    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
        json_schema_extra={
            'example': {
                'trainId': 'T1',
                'trainName': 'Coastal Express',
                'source': 'Chennai',
                'destination': 'Mumbai',
                'departureDate': '2025-01-10',
                'departureTime': '06:30',
                'totalSeats': 120,
                'bookedSeats': 0,
            }
        },
    )

    train_id: str = Field(alias='trainId', min_length=1)
    train_name: str = Field(alias='trainName')
    source: str
    destination: str
    departure_date: str = Field(alias='departureDate')
    departure_time: str = Field(alias='departureTime')
    total_seats: int = Field(alias='totalSeats', ge=0)
    booked_seats: int = Field(default=0, alias='bookedSeats', ge=0)


class BookingRecord(_Record):
    booking_id: str = Field(alias='bookingId', min_length=1)
    passenger_id: str = Field(alias='passengerId')
    train_id: str = Field(alias='trainId')
    booking_date: str = Field(alias='bookingDate')
    status: BookingStatus = BookingStatus.PENDING
    seat_number: Optional[int] = Field(default=None, alias='seatNumber')


class UserRecord(_Record):
    user_id: str = Field(alias='userId', min_length=1)
    name: str
    email: str
    role: UserRole = UserRole.PASSENGER
    designation: Optional[str] = None
    booking_ids: List[str] = Field(default_factory=list, alias='bookingIds')

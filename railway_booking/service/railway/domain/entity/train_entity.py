import attrs

from railway_booking.platform.logging.loguru_io import Logger


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Train {attribute.name} cannot be empty')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'Train {attribute.name} cannot be negative')


def _validate_within_capacity(instance: 'Train', attribute: attrs.Attribute, value: int) -> None:
    _validate_non_negative(instance, attribute, value)
    if value > instance.total_seats:
        raise ValueError('Train booked_seats cannot exceed total_seats')


@attrs.define
class Train:
    train_id: str = attrs.field(validator=_validate_non_empty_string)
    train_name: str = attrs.field(validator=_validate_non_empty_string)
    source: str = attrs.field(validator=_validate_non_empty_string)
    destination: str = attrs.field(validator=_validate_non_empty_string)
    departure_date: str  # YYYY-MM-DD
    departure_time: str  # HH:MM
    total_seats: int = attrs.field(converter=int, validator=_validate_non_negative)
    # Cached count of CONFIRMED bookings; resynced by RailwaySystem on load
    booked_seats: int = attrs.field(default=0, converter=int, validator=_validate_within_capacity)

    @property
    def available_seats(self) -> int:
        return self.total_seats - self.booked_seats

    @Logger.io
    def book_seat(self) -> bool:
        if self.booked_seats < self.total_seats:
            self.booked_seats += 1
            return True
        return False

    @Logger.io
    def release_seat(self) -> bool:
        if self.booked_seats > 0:
            self.booked_seats -= 1
            return True
        return False

    @Logger.io
    def set_total_seats(self, seats: int) -> bool:
        """Cannot shrink below the seats already committed to confirmed bookings"""
        if seats < 0 or seats < self.booked_seats:
            return False
        self.total_seats = seats
        return True

    def next_seat_number(self) -> int:
        return self.total_seats - self.available_seats + 1

    def reset_booked_seats(self, confirmed_count: int) -> int:
        """
        Overwrite the cached counter with a recomputed confirmed count.

        Returns:
            Number of confirmed bookings that did not fit (0 when consistent)
        """
        self.booked_seats = min(confirmed_count, self.total_seats)
        return confirmed_count - self.booked_seats

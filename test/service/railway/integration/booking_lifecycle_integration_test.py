from collections.abc import Callable
from typing import Any

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from railway_booking.service.railway.app.command.passenger_commands import (
    book_train,
    cancel_my_booking,
)
from railway_booking.service.railway.app.command.staff_commands import (
    add_train,
    delete_train,
    issue_booking,
    process_return,
)
from railway_booking.service.railway.app.railway_system import RailwaySystem
from railway_booking.service.railway.domain.entity.train_entity import Train
from railway_booking.service.railway.domain.entity.user_entity import User
from railway_booking.service.railway.driven_adapter.notifier.in_memory_notifier_impl import (
    InMemoryNotifierImpl,
)


scenarios('booking_lifecycle.feature')


@pytest.fixture
def lifecycle_state(railway_system: RailwaySystem) -> dict[str, Any]:
    """Current system plus booking ids keyed by the alias used in the feature"""
    return {'system': railway_system, 'bookings': {}}


@given(parsers.parse('train "{train_id}" with {seats:d} seats'))
def given_train(
    lifecycle_state: dict[str, Any],
    staff: User,
    make_train: Callable[..., Train],
    train_id: str,
    seats: int,
) -> None:
    assert add_train(
        lifecycle_state['system'], staff, train=make_train(train_id=train_id, total_seats=seats)
    )


@when(parsers.parse('the passenger books train "{train_id}" as "{alias}"'))
def when_passenger_books(
    lifecycle_state: dict[str, Any], passenger: User, train_id: str, alias: str
) -> None:
    booking = book_train(lifecycle_state['system'], passenger, train_id=train_id)
    lifecycle_state['bookings'][alias] = booking.booking_id if booking else None


@when(parsers.parse('staff confirm booking "{alias}"'))
def when_staff_confirm(lifecycle_state: dict[str, Any], staff: User, alias: str) -> None:
    booking_id = lifecycle_state['bookings'][alias]
    assert issue_booking(lifecycle_state['system'], staff, booking_id=booking_id)


@when(parsers.parse('the passenger cancels booking "{alias}"'))
def when_passenger_cancels(
    lifecycle_state: dict[str, Any], passenger: User, alias: str
) -> None:
    booking_id = lifecycle_state['bookings'][alias]
    assert cancel_my_booking(lifecycle_state['system'], passenger, booking_id=booking_id)


@when(parsers.parse('staff process the return of booking "{alias}"'))
def when_staff_return(lifecycle_state: dict[str, Any], staff: User, alias: str) -> None:
    booking_id = lifecycle_state['bookings'][alias]
    assert process_return(lifecycle_state['system'], staff, booking_id=booking_id)


@when(parsers.parse('staff try to delete train "{train_id}"'))
def when_staff_delete(lifecycle_state: dict[str, Any], staff: User, train_id: str) -> None:
    delete_train(lifecycle_state['system'], staff, train_id=train_id)


@when('the system is reloaded from storage')
def when_reloaded(
    lifecycle_state: dict[str, Any], reload_system: Callable[[], RailwaySystem]
) -> None:
    lifecycle_state['system'] = reload_system()


@then(parsers.parse('booking "{alias}" is "{status}" with seat {seat:d}'))
def then_booking_state(lifecycle_state: dict[str, Any], alias: str, status: str, seat: int) -> None:
    booking = lifecycle_state['system'].get_booking_by_id(lifecycle_state['bookings'][alias])
    assert booking.status == status
    assert booking.seat_number == seat


@then(
    parsers.parse(
        'train "{train_id}" has {booked:d} booked and {available:d} available seats'
    )
)
def then_train_seats(
    lifecycle_state: dict[str, Any], train_id: str, booked: int, available: int
) -> None:
    train = lifecycle_state['system'].get_train_by_id(train_id)
    assert train.booked_seats == booked
    assert train.available_seats == available
    assert 0 <= train.booked_seats <= train.total_seats


@then(parsers.parse('booking "{alias}" was rejected with "{message}"'))
def then_booking_rejected(
    lifecycle_state: dict[str, Any], notifier: InMemoryNotifierImpl, alias: str, message: str
) -> None:
    assert lifecycle_state['bookings'][alias] is None
    assert notifier.last_message == message


@then(parsers.parse('the last notification is "{message}"'))
def then_last_notification(notifier: InMemoryNotifierImpl, message: str) -> None:
    assert notifier.last_message == message


@then(parsers.parse('train "{train_id}" no longer exists'))
def then_train_gone(lifecycle_state: dict[str, Any], train_id: str) -> None:
    assert lifecycle_state['system'].get_train_by_id(train_id) is None

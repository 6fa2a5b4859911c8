"""
Test Configuration and Fixtures

- Environment overrides are applied before any application import, because
  settings and the log sinks are configured at import time
- Every RailwaySystem fixture runs over an in-memory key-value store and a
  recording notifier, so tests never touch disk unless they ask for tmp_path
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['STORAGE_BACKEND'] = 'memory'
    os.environ.setdefault('DEBUG', 'false')


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from railway_booking.platform.state.kv_store import InMemoryKeyValueStore  # noqa: E402
from railway_booking.service.railway.app.railway_system import RailwaySystem  # noqa: E402
from railway_booking.service.railway.domain.entity.booking_entity import Booking  # noqa: E402
from railway_booking.service.railway.domain.entity.train_entity import Train  # noqa: E402
from railway_booking.service.railway.domain.entity.user_entity import User  # noqa: E402
from railway_booking.service.railway.driven_adapter.notifier.in_memory_notifier_impl import (  # noqa: E402
    InMemoryNotifierImpl,
)
from railway_booking.service.railway.driven_adapter.repo.railway_state_repo_impl import (  # noqa: E402
    RailwayStateRepoImpl,
)
from railway_booking.service.railway.driven_adapter.state.railway_database import (  # noqa: E402
    RailwayDatabase,
)
from test.test_constants import (  # noqa: E402
    DEFAULT_TRAIN_ID,
    PASSENGER_EMAIL,
    PASSENGER_ID,
    PASSENGER_NAME,
    STAFF_DESIGNATION,
    STAFF_EMAIL,
    STAFF_ID,
    STAFF_NAME,
)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def railway_database(kv_store: InMemoryKeyValueStore) -> RailwayDatabase:
    return RailwayDatabase(store=kv_store)


@pytest.fixture
def state_repo(railway_database: RailwayDatabase) -> RailwayStateRepoImpl:
    return RailwayStateRepoImpl(database=railway_database)


@pytest.fixture
def notifier() -> InMemoryNotifierImpl:
    return InMemoryNotifierImpl()


@pytest.fixture
def railway_system(
    state_repo: RailwayStateRepoImpl, notifier: InMemoryNotifierImpl
) -> RailwaySystem:
    return RailwaySystem(state_repo=state_repo, notifier=notifier)


@pytest.fixture
def reload_system(
    state_repo: RailwayStateRepoImpl, notifier: InMemoryNotifierImpl
) -> Callable[[], RailwaySystem]:
    """Build a second RailwaySystem over the same storage (simulates a page reload)"""

    def _reload() -> RailwaySystem:
        return RailwaySystem(state_repo=state_repo, notifier=notifier)

    return _reload


@pytest.fixture
def make_train() -> Callable[..., Train]:
    def _make_train(**overrides: Any) -> Train:
        fields: dict[str, Any] = {
            'train_id': DEFAULT_TRAIN_ID,
            'train_name': 'Coastal Express',
            'source': 'Chennai',
            'destination': 'Mumbai',
            'departure_date': '2025-01-10',
            'departure_time': '06:30',
            'total_seats': 2,
        }
        fields.update(overrides)
        return Train(**fields)

    return _make_train


@pytest.fixture
def make_booking() -> Callable[..., Booking]:
    def _make_booking(**overrides: Any) -> Booking:
        fields: dict[str, Any] = {
            'booking_id': 'B1',
            'passenger_id': PASSENGER_ID,
            'train_id': DEFAULT_TRAIN_ID,
            'booking_date': '2025-01-01',
        }
        fields.update(overrides)
        return Booking(**fields)

    return _make_booking


@pytest.fixture
def passenger() -> User:
    return User.passenger(user_id=PASSENGER_ID, name=PASSENGER_NAME, email=PASSENGER_EMAIL)


@pytest.fixture
def staff() -> User:
    return User.staff(
        user_id=STAFF_ID, name=STAFF_NAME, email=STAFF_EMAIL, designation=STAFF_DESIGNATION
    )

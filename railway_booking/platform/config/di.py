"""
https://python-dependency-injector.ets-labs.org/index.html

Usage:
    container = Container()
    system = container.railway_system()  # explicit, caller-owned context object
"""

from dependency_injector import containers, providers

from railway_booking.platform.config.core_setting import Settings
from railway_booking.platform.state.kv_store_factory import build_key_value_store
from railway_booking.service.railway.app.railway_system import RailwaySystem
from railway_booking.service.railway.driven_adapter.notifier.in_memory_notifier_impl import (
    InMemoryNotifierImpl,
)
from railway_booking.service.railway.driven_adapter.repo.railway_state_repo_impl import (
    RailwayStateRepoImpl,
)
from railway_booking.service.railway.driven_adapter.state.railway_database import (
    RailwayDatabase,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Storage
    key_value_store = providers.Singleton(build_key_value_store, settings=config_service)
    railway_database = providers.Singleton(RailwayDatabase, store=key_value_store)
    railway_state_repo = providers.Singleton(RailwayStateRepoImpl, database=railway_database)

    # User-facing failure channel
    notifier = providers.Singleton(InMemoryNotifierImpl)

    # Aggregate root - a fresh instance per call, loaded from storage
    railway_system = providers.Factory(
        RailwaySystem,
        state_repo=railway_state_repo,
        notifier=notifier,
    )

from unittest.mock import MagicMock

import pytest
from redis import Redis

from railway_booking.platform.state.kvrocks_client import KvrocksKeyValueStore


@pytest.fixture
def mock_redis() -> MagicMock:
    return MagicMock(spec=Redis)


@pytest.mark.unit
class TestKvrocksKeyValueStore:
    def test_keys_are_prefixed(self, mock_redis: MagicMock) -> None:
        store = KvrocksKeyValueStore(client=mock_redis, key_prefix='test_')

        store.set_item('railway_trains', '[]')
        store.remove_item('railway_trains')

        mock_redis.set.assert_called_once_with('test_railway_trains', '[]')
        mock_redis.delete.assert_called_once_with('test_railway_trains')

    def test_get_decodes_bytes(self, mock_redis: MagicMock) -> None:
        mock_redis.get.return_value = b'[{"trainId": "T1"}]'
        store = KvrocksKeyValueStore(client=mock_redis, key_prefix='')

        assert store.get_item('railway_trains') == '[{"trainId": "T1"}]'
        mock_redis.get.assert_called_once_with('railway_trains')

    def test_get_missing_key(self, mock_redis: MagicMock) -> None:
        mock_redis.get.return_value = None
        store = KvrocksKeyValueStore(client=mock_redis, key_prefix='')

        assert store.get_item('railway_trains') is None

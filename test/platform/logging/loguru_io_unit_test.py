import pytest

from railway_booking.platform.exception.exceptions import DomainError
from railway_booking.platform.logging.loguru_io import Logger
from railway_booking.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestLoggerIo:
    def test_return_value_passes_through(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == 'add'

    def test_domain_error_is_reraised_by_default(self) -> None:
        @Logger.io
        def reject() -> None:
            raise DomainError('Seat number must be positive')

        with pytest.raises(DomainError, match='Seat number must be positive'):
            reject()

    def test_reraise_disabled_returns_none(self) -> None:
        @Logger.io(reraise=False)
        def explode() -> int:
            raise RuntimeError('boom')

        assert explode() is None

    def test_unknown_kwargs_are_dropped(self) -> None:
        def book(*, train_id: str) -> str:
            return train_id

        args, kwargs = normalize_args_kwargs(book, train_id='T1', stray='x')

        assert args == ()
        assert kwargs == {'train_id': 'T1'}


@pytest.mark.unit
class TestLogMasking:
    def test_password_in_repr_is_masked(self) -> None:
        masked = mask_sensitive({'password': 'hunter2', 'name': 'Asha'})

        assert 'hunter2' not in masked
        assert "'name': 'Asha'" in masked

    def test_plain_values_are_returned_unchanged(self) -> None:
        assert mask_sensitive('T1') == 'T1'

    def test_sensitive_keyword_value_is_replaced(self) -> None:
        assert should_mask_keyword('email', 'asha@example.com') == '********'
        assert should_mask_keyword('train_id', 'T1') == 'T1'

    def test_long_content_is_truncated(self) -> None:
        result = truncate_content('x' * 600)

        assert result.startswith('x' * 500)
        assert result.endswith('...(+100 chars)')

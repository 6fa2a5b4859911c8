"""
In-memory Notifier Implementation

Keeps every delivered message in order so a front end (or a test) can drain
them, and mirrors each one to the log.
"""

from typing import List

from railway_booking.platform.logging.loguru_io import Logger


class InMemoryNotifierImpl:
    def __init__(self) -> None:
        self._messages: List[str] = []

    def notify(self, *, message: str) -> None:
        self._messages.append(message)
        Logger.base.warning(f'🔔 [NOTIFY] {message}')

    @property
    def messages(self) -> List[str]:
        return list(self._messages)

    @property
    def last_message(self) -> str | None:
        return self._messages[-1] if self._messages else None

    def drain(self) -> List[str]:
        """Return and forget every pending message"""
        messages, self._messages = self._messages, []
        return messages

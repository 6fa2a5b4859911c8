"""
Notifier Interface

User-facing channel for human-readable failure messages.
"""

from typing import Protocol


class INotifier(Protocol):
    def notify(self, *, message: str) -> None:
        """
        Deliver one message to the user

        Note:
            - Must not raise; a lost notification never aborts an operation
        """
        ...

from typing import Protocol


class NotificationBroadcaster(Protocol):
    def notify_all(self, message: str) -> None:
        """Push a message to every connected observer."""
        ...

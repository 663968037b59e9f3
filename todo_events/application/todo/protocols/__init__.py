from .notification_broadcaster import NotificationBroadcaster
from .todo_repository import TodoRepositoryProtocol

__all__ = ["NotificationBroadcaster", "TodoRepositoryProtocol"]

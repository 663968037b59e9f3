from .notification_hub import NotificationHub

__all__ = ["NotificationHub"]

from .todo_completed_notifier import TodoCompletedNotifier

__all__ = ["TodoCompletedNotifier"]

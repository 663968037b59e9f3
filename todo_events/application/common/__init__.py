from .event_dispatcher import EventDispatcher, EventHandler, EventHandlerError
from .unit_of_work import UnitOfWork

__all__ = [
    "EventDispatcher",
    "EventHandler",
    "EventHandlerError",
    "UnitOfWork",
]

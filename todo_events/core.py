from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from todo_events.application.common.event_dispatcher import EventDispatcher
from todo_events.application.todo.handlers.todo_completed_notifier import TodoCompletedNotifier
from todo_events.application.todo.use_cases import (
    CompleteTodoUseCase,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodosUseCase,
    UpdateTodoUseCase,
)
from todo_events.infrastructure.common.unit_of_work import (
    InMemoryUnitOfWork,
    SqlAlchemyUnitOfWork,
)
from todo_events.infrastructure.realtime.notification_hub import NotificationHub
from todo_events.infrastructure.todo.repositories import InMemoryTodoRepository, TodoRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Process-wide services, built once at startup
    event_dispatcher = providers.Singleton(EventDispatcher)
    notification_hub = providers.Singleton(NotificationHub)

    # Event handlers
    todo_completed_notifier = providers.Factory(
        TodoCompletedNotifier,
        broadcaster=notification_hub,
    )

    # Storage, selected by settings.TODO_STORE
    todo_repository = providers.Selector(
        config.todo_store,
        database=providers.Factory(TodoRepository, db=db),
        memory=providers.Singleton(InMemoryTodoRepository),
    )
    unit_of_work = providers.Selector(
        config.todo_store,
        database=providers.Factory(SqlAlchemyUnitOfWork, db=db, dispatcher=event_dispatcher),
        memory=providers.Factory(InMemoryUnitOfWork, dispatcher=event_dispatcher),
    )

    # Todo module, application use cases
    create_todo_use_case = providers.Factory(
        CreateTodoUseCase,
        todo_repository=todo_repository,
        unit_of_work=unit_of_work,
    )
    get_todos_use_case = providers.Factory(
        GetTodosUseCase,
        todo_repository=todo_repository,
    )
    update_todo_use_case = providers.Factory(
        UpdateTodoUseCase,
        todo_repository=todo_repository,
        unit_of_work=unit_of_work,
    )
    complete_todo_use_case = providers.Factory(
        CompleteTodoUseCase,
        todo_repository=todo_repository,
        unit_of_work=unit_of_work,
    )
    delete_todo_use_case = providers.Factory(
        DeleteTodoUseCase,
        todo_repository=todo_repository,
        unit_of_work=unit_of_work,
    )


container = Container()

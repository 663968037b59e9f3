"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todo_events.application.common.event_dispatcher import EventHandlerError
from todo_events.config import configure_logging, get_settings
from todo_events.core import Container, container
from todo_events.database import create_tables, dispose_engine, initialize_database
from todo_events.domain.common.exceptions import DomainError, ValidationError
from todo_events.domain.todo.events import TodoCompleted
from todo_events.exceptions import TodoServiceError
from todo_events.infrastructure.realtime.routers import router as hub_router
from todo_events.infrastructure.todo.routers.todos import router as todos_router

logger = structlog.get_logger(__name__)


def register_event_handlers(di_container: Container) -> None:
    """Subscribe handlers, then freeze the dispatcher before serving traffic."""
    dispatcher = di_container.event_dispatcher()
    dispatcher.register(TodoCompleted, di_container.todo_completed_notifier())
    dispatcher.freeze()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    if settings.TODO_STORE == "database":
        initialize_database(settings)
        create_tables()
    logger.info("application_started", environment=settings.ENVIRONMENT, store=settings.TODO_STORE)
    yield
    dispose_engine()
    logger.info("application_stopped")


async def service_error_handler(request: Request, exc: TodoServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "field": exc.field},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


async def event_handler_error_handler(request: Request, exc: EventHandlerError) -> JSONResponse:
    # The change itself was committed before the handlers ran
    logger.error("event_dispatch_failed", event_type=exc.event.event_type, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The change was saved, but notifying observers failed."},
    )


def create_app() -> FastAPI:
    """Build the application and wire its process-wide services."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.log_level)

    container.config.from_dict({"todo_store": settings.TODO_STORE})
    register_event_handlers(container)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoServiceError, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(EventHandlerError, event_handler_error_handler)  # type: ignore[arg-type]

    app.include_router(todos_router, prefix=settings.API_V1_PREFIX)
    app.include_router(hub_router)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "todo_events.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()

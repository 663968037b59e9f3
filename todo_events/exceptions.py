"""Custom exception hierarchy for the todo service."""


class TodoServiceError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(TodoServiceError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ConflictError(TodoServiceError):
    """Request conflicts with existing state."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=409)

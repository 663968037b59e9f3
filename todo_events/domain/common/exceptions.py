"""Errors raised by domain objects when a rule would be broken."""


class DomainError(Exception):
    """Base class for domain errors. The web layer maps these to 400."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class ValidationError(DomainError):
    """
    Raised when a value cannot be accepted by an aggregate.

    Carries the offending field name so the API can point at it.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details = {key: val for key, val in (("field", field), ("value", value)) if val is not None}
        super().__init__(message, details)
        self.field = field
        self.value = value

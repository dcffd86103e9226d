"""
Error taxonomy shared by the service and transport layers.

Every error carries an explicit ``kind`` so the HTTP layer can pick a
status code without inspecting the exception type.
"""
import enum


class ErrorKind(str, enum.Enum):
    """Discriminant for chat API errors"""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INFRASTRUCTURE = "infrastructure"


class ChatAPIError(Exception):
    """Base class for all errors raised by the chat API."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(ChatAPIError):
    """
    Bad client input, scoped to a single request field.

    Fields:
        field: Name of the offending field ("title", "text")
        message: Human readable reason, returned to the client as is
    """
    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class NotFoundError(ChatAPIError):
    """A referenced resource does not exist."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, id: int):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.id = id


class InfrastructureError(ChatAPIError):
    """Opaque storage failure. The driver error is kept as ``__cause__``."""
    kind = ErrorKind.INFRASTRUCTURE

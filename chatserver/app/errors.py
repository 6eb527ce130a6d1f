"""Error types shared by the controller, the integration layer and the HTTP routes"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes reported to API clients"""

    VALIDATION_ERROR = "validation_error"
    PERSISTENCE_ERROR = "persistence_error"
    INTERNAL_ERROR = "internal_error"


class ChatError(Exception):
    """Base class for every error raised by the chat backend."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ChatError, ValueError):
    """
    A caller-supplied argument has the wrong type or value.

    Always raised before any database access is attempted.
    """

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class PersistenceError(ChatError):
    """The data access layer failed (connection, query or schema)."""

    code = ErrorCode.PERSISTENCE_ERROR


def error_body(code: ErrorCode, message: str, field: Optional[str] = None) -> dict:
    """
    Create the JSON body returned to HTTP clients for a failed request.

    Args:
        code: Error code from ErrorCode enum
        message: Human readable message
        field: Offending argument, for validation errors

    Returns:
        Dictionary suitable for a JSONResponse
    """
    error = {"code": code.value, "message": message}
    if field:
        error["field"] = field
    return {"error": error}

"""
Custom exception classes for the application.

Every exception carries an ``http_status`` so that the HTTP error handler
can translate it without a lookup table.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when list-query input (page bounds, filter operators, sort
    directives) is malformed. Never retried.

    HTTP Status: 400 Bad Request
    """

    http_status = 400

    def __init__(self, message: str, field: str | None = None):
        """
        Args:
            message: Human-readable error description.
            field: Name of the offending input field, if known.
        """
        self.field = field
        super().__init__(message)


class StorageError(AppException):
    """
    Storage collaborator failed.

    Wraps connectivity, timeout and constraint failures raised while a
    query is executed. The original exception is kept as ``__cause__``.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500


class NotFoundError(AppException):
    """
    Resource not found.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class ConflictError(AppException):
    """
    Resource conflict.

    Raised when an operation conflicts with existing state (e.g., duplicate
    form number).

    HTTP Status: 409 Conflict
    """

    http_status = 409

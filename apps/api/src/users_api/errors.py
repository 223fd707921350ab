"""API errors and their translation to the uniform error body."""

from enum import IntEnum

from users_api.models.error import ErrorResponse

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorKind(IntEnum):
    """Kinds of failure an operation can report, valued by HTTP status."""

    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL = 500


class ApiError(Exception):
    """Error carrying an explicit kind and a client-facing message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status(self) -> int:
        return int(self.kind)


class BadRequestError(ApiError):
    """The client supplied invalid or incomplete input."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.BAD_REQUEST, message)


class NotFoundError(ApiError):
    """The referenced identifier does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.NOT_FOUND, message)


def handle_error(error: BaseException) -> ErrorResponse:
    """Translate any failure into the uniform error body.

    ``ApiError`` instances pass through with their own status and message.
    Anything else is reported as a generic internal error so that no
    internal detail leaves the service.

    Args:
        error: The exception raised by an operation

    Returns:
        ErrorResponse with status and message
    """
    if isinstance(error, ApiError):
        return ErrorResponse(status=error.status, message=error.message)
    return ErrorResponse(status=int(ErrorKind.INTERNAL), message=INTERNAL_ERROR_MESSAGE)

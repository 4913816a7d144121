"""Exceptions for the OctoPrint REST client.

Every failed call raises exactly one exception from this module. Each exception carries an
`ErrorKind` so callers can treat the hierarchy like a closed sum type.

How to use the most important parts:
- `OctoPrintError`: Catch this base exception to handle all client errors.
- `OctoPrintApiError`: Catch this to inspect any failure derived from an HTTP status
  (`status_code` and `response_body` are always populated, except for client-side validation).
- `OctoPrintParseError`: Raised when a success body does not match the expected shape. `path`
  names the offending field, e.g. `files[2].gcodeAnalysis.filament`.
"""

import typing
from enum import StrEnum

if typing.TYPE_CHECKING:
    import pydantic_core


class ErrorKind(StrEnum):
    """The kinds of failure a call can produce.

    `UNAUTHORIZED` extends the per-operation kinds: a rejected API key (401/403) is reported the
    same way for every operation instead of as an undocumented status.
    """

    TRANSPORT_FAILURE = "transport_failure"
    SERVER_ERROR = "server_error"
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    PARSE_FAILURE = "parse_failure"
    UNEXPECTED_STATUS = "unexpected_status"


class OctoPrintError(Exception):
    """Base exception for all OctoPrint client errors."""

    kind: typing.ClassVar[ErrorKind | None] = None


class OctoPrintConfigError(OctoPrintError):
    """Raised when the client cannot be built from the available settings."""


class OctoPrintTransportError(OctoPrintError):
    """Raised when the host is unreachable (timeouts, DNS issues, refused connections)."""

    kind = ErrorKind.TRANSPORT_FAILURE


class OctoPrintApiError(OctoPrintError):
    """Raised when the host answers with a status that maps to a failure."""

    def __init__(self, message: str, status_code: int | None, response_body: str) -> None:
        """Initialize the error.

        Args:
            message: Error description.
            status_code: HTTP status code, or None when the request never left the client.
            response_body: Raw response body from the host (or the local validation message).
        """
        prefix = f"[{status_code}]" if status_code is not None else "[client]"
        super().__init__(f"{prefix} {message}")
        self.status_code = status_code
        self.response_body = response_body


class OctoPrintServerError(OctoPrintApiError):
    """Raised on any 5xx response."""

    kind = ErrorKind.SERVER_ERROR


class OctoPrintBadRequestError(OctoPrintApiError):
    """Raised on 400, or locally when a command violates a documented limit."""

    kind = ErrorKind.BAD_REQUEST


class OctoPrintConflictError(OctoPrintApiError):
    """Raised on 409: the operation is invalid in the printer's current state."""

    kind = ErrorKind.CONFLICT


class OctoPrintNotFoundError(OctoPrintApiError):
    """Raised on 404 for operations that address a resource."""

    kind = ErrorKind.NOT_FOUND


class OctoPrintAuthError(OctoPrintApiError):
    """Raised when the API key is missing or rejected (401/403)."""

    kind = ErrorKind.UNAUTHORIZED


class OctoPrintUnexpectedStatusError(OctoPrintApiError):
    """Raised when the host answers with a status the operation does not document."""

    kind = ErrorKind.UNEXPECTED_STATUS


class OctoPrintParseError(OctoPrintError):
    """Raised when a success body does not match the expected payload shape."""

    kind = ErrorKind.PARSE_FAILURE

    def __init__(
        self,
        path: str,
        message: str,
        response_body: str,
        errors: "list[pydantic_core.ErrorDetails] | None" = None,
    ) -> None:
        """Initialize exception with the location of the mismatch."""
        super().__init__(f"Failed to parse response at {path}: {message}")
        self.path = path
        self.message = message
        self.response_body = response_body
        self.errors = errors or []

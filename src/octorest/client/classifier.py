"""Classification of host responses into typed results or typed errors.

How to use the most important parts:
- `ResponsePolicy`: Declares, per operation, which success codes it accepts, whether the success
  body is parsed, and which of 404/409/400 it documents.
- `classify(...)`: Turns a status code and body into the parsed payload (or `None`), or raises
  the matching `OctoPrintError`.
- `parse_payload(...)`: Validates a JSON body against a shape and reports the exact path of any
  mismatch.
"""

import dataclasses
import typing

import pydantic
import structlog

from octorest.client import exceptions
from octorest.client.models.files import UNION_TAGS

logger = structlog.get_logger(__name__)

T = typing.TypeVar("T")

ROOT_PATH = "<root>"

# Bodies attached to errors are truncated to keep exceptions and logs readable
_MAX_ERROR_BODY = 2000


@dataclasses.dataclass(frozen=True)
class ResponsePolicy:
    """Which responses an operation documents."""

    success: frozenset[int] = frozenset({200})
    body: bool = True
    not_found: bool = False
    conflict: bool = False
    bad_request: bool = False


# Common policies
QUERY = ResponsePolicy()
QUERY_RESOURCE = ResponsePolicy(not_found=True)
QUERY_STATEFUL = ResponsePolicy(conflict=True)
COMMAND = ResponsePolicy(success=frozenset({204}), body=False, conflict=True, bad_request=True)


def format_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as `files[2].gcodeAnalysis.filament`."""
    path = ""
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
        elif item in UNION_TAGS:
            continue
        else:
            path += f".{item}" if path else item
    return path or ROOT_PATH


def _as_text(body: bytes | str) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def parse_payload(body: bytes | str, shape: type[T] | pydantic.TypeAdapter[T]) -> T:
    """Validate a JSON body against `shape`.

    Raises:
        OctoPrintParseError: With the path of the first mismatch.
    """
    adapter = shape if isinstance(shape, pydantic.TypeAdapter) else pydantic.TypeAdapter(shape)
    try:
        return adapter.validate_json(body)
    except pydantic.ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0]
        path = format_location(first["loc"])
        text = _as_text(body)
        logger.warning("Response did not match expected shape", path=path, error=first["msg"], errors=len(errors))
        raise exceptions.OctoPrintParseError(path, first["msg"], text[:_MAX_ERROR_BODY], errors) from e


@typing.overload
def classify(status_code: int, body: bytes | str, policy: ResponsePolicy, shape: None = None) -> None: ...


@typing.overload
def classify(status_code: int, body: bytes | str, policy: ResponsePolicy, shape: type[T]) -> T: ...


@typing.overload
def classify(status_code: int, body: bytes | str, policy: ResponsePolicy, shape: pydantic.TypeAdapter[T]) -> T: ...


def classify(
    status_code: int,
    body: bytes | str,
    policy: ResponsePolicy,
    shape: type[T] | pydantic.TypeAdapter[T] | None = None,
) -> T | None:
    """Classify a response.

    Args:
        status_code: HTTP status code returned by the host.
        body: Raw response body.
        policy: The operation's documented responses.
        shape: Expected success payload type. Required when `policy.body` is set.

    Returns:
        The parsed payload, or None for body-less success.

    Raises:
        OctoPrintServerError: On 5xx.
        OctoPrintAuthError: On 401/403.
        OctoPrintConflictError: On 409, if documented.
        OctoPrintNotFoundError: On 404, if documented.
        OctoPrintBadRequestError: On 400, if documented.
        OctoPrintParseError: If a success body does not match `shape`.
        OctoPrintUnexpectedStatusError: On any status the operation does not document.
    """
    text = _as_text(body)[:_MAX_ERROR_BODY]

    error: type[exceptions.OctoPrintApiError] | None = None
    if 500 <= status_code < 600:
        error = exceptions.OctoPrintServerError
    elif status_code in (401, 403):
        error = exceptions.OctoPrintAuthError
    elif status_code == 409 and policy.conflict:
        error = exceptions.OctoPrintConflictError
    elif status_code == 404 and policy.not_found:
        error = exceptions.OctoPrintNotFoundError
    elif status_code == 400 and policy.bad_request:
        error = exceptions.OctoPrintBadRequestError

    if error is not None:
        logger.info("Request failed", kind=error.kind, status_code=status_code)
        raise error(f"Request failed ({error.kind})", status_code=status_code, response_body=text)

    is_2xx = 200 <= status_code < 300
    if status_code in policy.success or (is_2xx and policy.body):
        if not policy.body:
            return None
        if shape is None:
            raise TypeError("A shape is required for operations that parse a response body")
        return parse_payload(body, shape)

    logger.warning("Host returned an undocumented status", status_code=status_code)
    raise exceptions.OctoPrintUnexpectedStatusError(
        "Undocumented status returned by host", status_code=status_code, response_body=text
    )

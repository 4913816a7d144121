"""Base Service for OctoPrint client modules."""

import typing

from octorest.client import classifier


class AbstractClient(typing.Protocol):
    """Protocol for the OctoPrint client as seen by its services."""

    def request(
        self,
        method: str,
        endpoint: str,
        policy: classifier.ResponsePolicy,
        shape: typing.Any = None,
        **kwargs: typing.Any,
    ) -> typing.Any:
        """Send one request to the host and classify the response."""
        ...


class BaseService:
    """Base class for endpoint-specific services."""

    def __init__(self, client: AbstractClient):
        """Initialize the service."""
        self._client = client

"""OctoPrint REST API Client.

This module provides a high-level interface to the REST API of an OctoPrint host,
handling the API key header, connection pooling, error classification and response validation.

How to use the most important parts:
- `OctoPrintClient`: The core class. Build it with `OctoPrintClient.builder(address, api_key)`,
  construct it directly, or load it from the environment with `OctoPrintClient.from_settings()`.
- The operations live on the client's services: `client.connection`, `client.files`,
  `client.job` and `client.printer`. `client.get_api_version()` is on the client itself.
"""

import typing

import pydantic
import requests
import structlog
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from octorest.client import classifier, config, consts, exceptions, models
from octorest.client.__version__ import __version__
from octorest.client.services.connection import ConnectionService
from octorest.client.services.files import FileService
from octorest.client.services.jobs import JobService
from octorest.client.services.printer import PrinterService

__all__ = ["OctoPrintClient", "OctoPrintClientBuilder"]

logger = structlog.get_logger(__name__)

T = typing.TypeVar("T")


class OctoPrintClient:
    """Client for the REST API of one OctoPrint host.

    The client holds no per-request state; one instance may be shared by concurrent callers.
    No response is ever retried. Only failures to establish a connection, where the request never
    reached the host, are retried, and only when `retries` is greater than zero.

    Usage Example:
    ```python
        >>> from octorest.client import OctoPrintClient
        >>> client = OctoPrintClient.builder("octopi.local", "API_KEY").port(5000).build()
        >>> client.get_api_version().server
        '1.10.2'
    ```
    """

    def __init__(
        self,
        address: str,
        api_key: str,
        port: int = consts.DEFAULT_PORT,
        scheme: str = consts.DEFAULT_SCHEME,
        timeout: float = consts.DEFAULT_TIMEOUT,
        retries: int = consts.DEFAULT_RETRIES,
        session: requests.Session | None = None,
    ) -> None:
        """Initializes the client.

        Args:
            address: Host name or IP address of the OctoPrint host.
            api_key: The API key sent with every request.
            port: TCP port of the host. Defaults to 80.
            scheme: `http` or `https`.
            timeout: Timeout for each request in seconds.
            retries: Connection attempts to retry when the host cannot be reached.
            session: Optional preconfigured `requests.Session`.
        """
        self._address = address
        self._port = port
        self._api_key = api_key
        self._base_url = f"{scheme}://{address}:{port}"
        self._timeout = timeout
        self._session = session or requests.Session()

        # Only connect errors are retried; every response reaches the classifier
        retry = Retry(
            total=retries,
            connect=retries,
            read=0,
            redirect=0,
            status=0,
            other=0,
            backoff_factor=0.5,
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

        self._session.headers.update(
            {
                consts.API_KEY_HEADER: api_key,
                "User-Agent": f"octorest-python/{__version__}",
                "Accept": "application/json",
            }
        )

        self._connection = ConnectionService(self)
        self._files = FileService(self)
        self._job = JobService(self)
        self._printer = PrinterService(self)

    @classmethod
    def builder(cls, address: str, api_key: str) -> "OctoPrintClientBuilder":
        """Start building a client for `address` authenticated with `api_key`."""
        return OctoPrintClientBuilder(address, api_key)

    @classmethod
    def from_settings(cls, settings: config.OctoPrintSettings | None = None) -> "OctoPrintClient":
        """Build a client from `OctoPrintSettings` (environment, `.env` or config.json).

        Raises:
            OctoPrintConfigError: If the host or API key is not configured.
        """
        settings = settings or config.OctoPrintSettings()
        if not settings.host or settings.api_key is None:
            raise exceptions.OctoPrintConfigError(
                "No host or API key configured. Set OCTOPRINT_HOST and OCTOPRINT_API_KEY, "
                f"or add them to {config.get_config_path()}."
            )
        return cls(
            settings.host,
            settings.api_key.get_secret_value(),
            port=settings.port,
            scheme=settings.scheme,
            timeout=settings.timeout,
            retries=settings.retries,
        )

    @property
    def address(self) -> str:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        """`scheme://address:port` without a trailing slash."""
        return self._base_url

    @property
    def connection(self) -> ConnectionService:
        return self._connection

    @property
    def files(self) -> FileService:
        return self._files

    @property
    def job(self) -> JobService:
        return self._job

    @property
    def printer(self) -> PrinterService:
        return self._printer

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "OctoPrintClient":
        return self

    def __exit__(self, *exc_info: typing.Any) -> None:
        self.close()

    @typing.overload
    def request(
        self,
        method: str,
        endpoint: str,
        policy: classifier.ResponsePolicy,
        shape: None = None,
        **kwargs: typing.Any,
    ) -> None: ...

    @typing.overload
    def request(
        self,
        method: str,
        endpoint: str,
        policy: classifier.ResponsePolicy,
        shape: type[T] | pydantic.TypeAdapter[T],
        **kwargs: typing.Any,
    ) -> T: ...

    def request(
        self,
        method: str,
        endpoint: str,
        policy: classifier.ResponsePolicy,
        shape: type[T] | pydantic.TypeAdapter[T] | None = None,
        **kwargs: typing.Any,
    ) -> T | None:
        """Send one request and classify its response.

        Args:
            method: HTTP method (GET, POST, DELETE).
            endpoint: Path below the host, e.g. `/api/job`.
            policy: The responses the operation documents.
            shape: Expected success payload type.
            **kwargs: Passed to `requests.Session.request` (e.g. `json`, `params`).

        Returns:
            The parsed payload, or None for body-less success.

        Raises:
            OctoPrintTransportError: If no response was received.
            OctoPrintError: Any error raised by `classifier.classify`.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("timeout", self._timeout)

        try:
            logger.debug("API Request", method=method, url=url, params=kwargs.get("params"))
            response = self._session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("Network error", method=method, url=url, error=str(e))
            raise exceptions.OctoPrintTransportError(f"Failed to reach OctoPrint at {self._base_url}: {e}") from e

        logger.debug("API Response", status_code=response.status_code, body_len=len(response.content))
        return classifier.classify(response.status_code, response.content, policy, shape)

    def get_api_version(self) -> models.ApiVersion:
        """Fetch the API and server version of the host.

        Returns:
            An `ApiVersion` object.

        Usage Example:
        ```python
            >>> version = client.get_api_version()
            >>> print(version.text)
            OctoPrint 1.10.2
        ```
        """
        return self.request("GET", "/api/version", classifier.QUERY, models.ApiVersion)


class OctoPrintClientBuilder:
    """Collects connection options before an `OctoPrintClient` is created."""

    def __init__(self, address: str, api_key: str) -> None:
        self._address = address
        self._api_key = api_key
        self._port = consts.DEFAULT_PORT
        self._scheme = consts.DEFAULT_SCHEME
        self._timeout = consts.DEFAULT_TIMEOUT
        self._retries = consts.DEFAULT_RETRIES
        self._session: requests.Session | None = None

    def port(self, port: int) -> "OctoPrintClientBuilder":
        """Set the port. Defaults to 80."""
        self._port = port
        return self

    def scheme(self, scheme: typing.Literal["http", "https"]) -> "OctoPrintClientBuilder":
        self._scheme = scheme
        return self

    def timeout(self, timeout: float) -> "OctoPrintClientBuilder":
        self._timeout = timeout
        return self

    def retries(self, retries: int) -> "OctoPrintClientBuilder":
        """Set how often a failed connection attempt is retried."""
        self._retries = retries
        return self

    def session(self, session: requests.Session) -> "OctoPrintClientBuilder":
        self._session = session
        return self

    def build(self) -> OctoPrintClient:
        """Create the client."""
        return OctoPrintClient(
            self._address,
            self._api_key,
            port=self._port,
            scheme=self._scheme,
            timeout=self._timeout,
            retries=self._retries,
            session=self._session,
        )

"""Service for the printer connection."""

import structlog

from octorest.client import classifier, commands, encoders, models
from octorest.client.services.base import BaseService

logger = structlog.get_logger(__name__)

# 204 on success, 400 for an invalid port, baudrate or profile
_SET_CONNECTION = classifier.ResponsePolicy(success=frozenset({204}), body=False, bad_request=True)


class ConnectionService(BaseService):
    """Service for reading and changing the serial connection."""

    def get(self) -> models.ConnectionInfo:
        """Fetch the current connection and the available options.

        Returns:
            A `ConnectionInfo` object.

        Usage Example:
        ```python
            >>> info = client.connection.get()
            >>> print(info.current.state, info.options.ports)
        ```
        """
        return self._client.request("GET", "/api/connection", classifier.QUERY, models.ConnectionInfo)

    def issue_command(self, command: commands.ConnectionCommand) -> None:
        """Send a connection command (`Connect`, `Disconnect` or `FakeAck`).

        Args:
            command: The command to send.

        Raises:
            OctoPrintBadRequestError: If the host rejects the connection settings.
        """
        body = encoders.encode_connection_command(command)
        logger.debug("Issuing connection command", command=body.command)
        self._client.request("POST", "/api/connection", _SET_CONNECTION, json=body.to_json())

    def connect(
        self,
        port: str | None = None,
        baudrate: int | None = None,
        printer_profile: str | None = None,
        save: bool | None = None,
        autoconnect: bool | None = None,
    ) -> None:
        """Connect to the printer. Unset values fall back to the host's stored preferences."""
        self.issue_command(
            commands.Connect(
                port=port,
                baudrate=baudrate,
                printer_profile=printer_profile,
                save=save,
                autoconnect=autoconnect,
            )
        )

    def disconnect(self) -> None:
        self.issue_command(commands.Disconnect())

"""Service for printer telemetry and printer commands."""

import collections.abc
import typing

import structlog

from octorest.client import classifier, commands, encoders, models
from octorest.client.services.base import BaseService

logger = structlog.get_logger(__name__)

_TOOL_COMMAND = classifier.ResponsePolicy(
    success=frozenset({200, 204}), body=False, conflict=True, bad_request=True
)
_SD_COMMAND = classifier.ResponsePolicy(success=frozenset({204}), body=False, conflict=True)
_GCODE = classifier.ResponsePolicy(success=frozenset({204}), body=False, conflict=True)

PrinterSection = typing.Literal["temperature", "sd", "state"]


def history_params(history: bool, limit: int | None) -> dict[str, str]:
    """Query parameters for temperature history. `limit` only applies with `history`."""
    params = {}
    if history:
        params["history"] = "true"
        if limit is not None:
            params["limit"] = str(limit)
    return params


class PrinterService(BaseService):
    """Service for printer state, printhead, tools, bed and SD card."""

    # -- Telemetry ------------------------------------------------------------

    def get_state(
        self,
        history: bool = False,
        limit: int | None = None,
        exclude: collections.abc.Iterable[PrinterSection] | None = None,
    ) -> models.PrinterState:
        """Fetch temperatures, SD state and state flags.

        Args:
            history: Include the temperature history.
            limit: Maximum number of history entries.
            exclude: Sections to leave out of the response.

        Returns:
            A `PrinterState` object.

        Raises:
            OctoPrintConflictError: If the printer is not operational.

        Usage Example:
        ```python
            >>> state = client.printer.get_state(history=True, limit=2)
            >>> print(state.state.text, state.temperature.heaters["tool0"].actual)
        ```
        """
        params = history_params(history, limit)
        if exclude:
            params["exclude"] = ",".join(exclude)
        return self._client.request(
            "GET", "/api/printer", classifier.QUERY_STATEFUL, models.PrinterState, params=params
        )

    def get_tool_state(self, history: bool = False, limit: int | None = None) -> models.ToolState:
        """Fetch hotend temperatures."""
        return self._client.request(
            "GET",
            "/api/printer/tool",
            classifier.QUERY_STATEFUL,
            models.ToolState,
            params=history_params(history, limit),
        )

    def get_bed_state(self, history: bool = False, limit: int | None = None) -> models.BedState:
        """Fetch bed temperature."""
        return self._client.request(
            "GET",
            "/api/printer/bed",
            classifier.QUERY_STATEFUL,
            models.BedState,
            params=history_params(history, limit),
        )

    def get_sd_state(self) -> models.SdState:
        """Fetch whether the SD card is ready.

        Raises:
            OctoPrintNotFoundError: If SD support is disabled on the host.
        """
        return self._client.request("GET", "/api/printer/sd", classifier.QUERY_RESOURCE, models.SdState)

    # -- Printhead ------------------------------------------------------------

    def issue_printhead_command(self, command: commands.PrintheadCommand) -> None:
        """Send a printhead command (`Jog`, `Home` or `Feedrate`).

        Raises:
            OctoPrintBadRequestError: If the command is invalid, locally or on the host.
            OctoPrintConflictError: If the printer is not operational or is printing.
        """
        encoders.validate_command(command)
        body = encoders.encode_printhead_command(command)
        logger.debug("Issuing printhead command", command=body.command)
        self._client.request("POST", "/api/printer/printhead", classifier.COMMAND, json=body.to_json())

    def jog(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
        absolute: bool | None = None,
        speed: int | None = None,
    ) -> None:
        self.issue_printhead_command(commands.Jog(x=x, y=y, z=z, absolute=absolute, speed=speed))

    def home(self, axes: collections.abc.Sequence[str] = ("x", "y", "z")) -> None:
        self.issue_printhead_command(commands.Home(axes=tuple(axes)))

    def change_printhead_feedrate(self, factor: float) -> None:
        """Change the feedrate factor.

        Args:
            factor: Between 0.5 and 2.0. Anything else is rejected without contacting the host.
        """
        self.issue_printhead_command(commands.Feedrate(factor=factor))

    # -- Tool -----------------------------------------------------------------

    def issue_tool_command(self, command: commands.ToolCommand) -> None:
        """Send a tool command.

        Raises:
            OctoPrintBadRequestError: If the command is invalid, locally or on the host.
            OctoPrintConflictError: If the printer is not operational.
        """
        encoders.validate_command(command)
        body = encoders.encode_tool_command(command)
        logger.debug("Issuing tool command", command=body.command)
        self._client.request("POST", "/api/printer/tool", _TOOL_COMMAND, json=body.to_json())

    def set_tool_targets(self, targets: collections.abc.Mapping[str, float]) -> None:
        """Set target temperatures, e.g. `{"tool0": 220}`."""
        self.issue_tool_command(commands.ToolTarget(targets=dict(targets)))

    def set_tool_offsets(self, offsets: collections.abc.Mapping[str, float]) -> None:
        self.issue_tool_command(commands.ToolOffset(offsets=dict(offsets)))

    def select_tool(self, tool: str) -> None:
        self.issue_tool_command(commands.ToolSelect(tool=tool))

    def extrude(self, amount: float, speed: int | None = None) -> None:
        """Extrude `amount` mm with the active tool. Negative values retract."""
        self.issue_tool_command(commands.Extrude(amount=amount, speed=speed))

    def change_tool_flowrate(self, factor: float) -> None:
        """Change the flow rate factor.

        Args:
            factor: Between 0.75 and 1.25. Anything else is rejected without contacting the host.
        """
        self.issue_tool_command(commands.Flowrate(factor=factor))

    # -- Bed ------------------------------------------------------------------

    def issue_bed_command(self, command: commands.BedCommand) -> None:
        """Send a bed command (`BedTarget` or `BedOffset`)."""
        encoders.validate_command(command)
        body = encoders.encode_bed_command(command)
        logger.debug("Issuing bed command", command=body.command)
        self._client.request("POST", "/api/printer/bed", classifier.COMMAND, json=body.to_json())

    def set_bed_target(self, target: float) -> None:
        self.issue_bed_command(commands.BedTarget(target=target))

    def set_bed_offset(self, offset: float) -> None:
        self.issue_bed_command(commands.BedOffset(offset=offset))

    # -- SD card and raw G-code -------------------------------------------------

    def issue_sd_command(self, command: commands.SdCommand) -> None:
        """Send an SD card command (`SdInit`, `SdRefresh` or `SdRelease`).

        Raises:
            OctoPrintConflictError: If the printer is not operational or SD support is off.
        """
        body = encoders.encode_sd_command(command)
        logger.debug("Issuing SD command", command=body.command)
        self._client.request("POST", "/api/printer/sd", _SD_COMMAND, json=body.to_json())

    def send_gcode(self, gcode: str | collections.abc.Sequence[str]) -> None:
        """Send one or more raw G-code lines to the printer.

        Raises:
            OctoPrintConflictError: If the printer is not operational.
        """
        lines = [gcode] if isinstance(gcode, str) else list(gcode)
        logger.debug("Sending G-code", lines=len(lines))
        self._client.request("POST", "/api/printer/command", _GCODE, json={"commands": lines})

"""Encoders from domain commands to wire bodies.

Encoding is total: every command variant has exactly one wire form, and encoding never fails.
Limits documented by the host are checked separately by `validate_command`, before any request
is sent, and reported as `OctoPrintBadRequestError` so callers handle local and remote
rejections the same way.
"""

import typing

import structlog

from octorest.client import command_models, commands, consts, exceptions

logger = structlog.get_logger(__name__)


def encode_connection_command(command: commands.ConnectionCommand) -> command_models.ConnectionCommandBody:
    """Encode a connection command."""
    match command:
        case commands.Connect():
            return command_models.ConnectionCommandBody(
                command="connect",
                port=command.port,
                baudrate=command.baudrate,
                printer_profile=command.printer_profile,
                save=command.save,
                autoconnect=command.autoconnect,
            )
        case commands.Disconnect():
            return command_models.ConnectionCommandBody(command="disconnect")
        case commands.FakeAck():
            return command_models.ConnectionCommandBody(command="fake_ack")
        case _:
            typing.assert_never(command)


def encode_file_command(command: commands.FileCommand) -> command_models.FileCommandBody:
    """Encode a file command."""
    match command:
        case commands.Select():
            return command_models.FileCommandBody(command="select", print_after_select=command.print)
        case commands.Unselect():
            return command_models.FileCommandBody(command="unselect")
        case commands.Copy():
            return command_models.FileCommandBody(command="copy", destination=command.destination)
        case commands.Move():
            return command_models.FileCommandBody(command="move", destination=command.destination)
        case _:
            typing.assert_never(command)


def encode_job_command(command: commands.JobCommand) -> command_models.JobCommandBody:
    """Encode a job command. Pause, resume and toggle share the `pause` command."""
    match command:
        case commands.Start():
            return command_models.JobCommandBody(command="start")
        case commands.Cancel():
            return command_models.JobCommandBody(command="cancel")
        case commands.Restart():
            return command_models.JobCommandBody(command="restart")
        case commands.Pause():
            return command_models.JobCommandBody(command="pause", action="pause")
        case commands.Resume():
            return command_models.JobCommandBody(command="pause", action="resume")
        case commands.Toggle():
            return command_models.JobCommandBody(command="pause", action="toggle")
        case _:
            typing.assert_never(command)


def encode_printhead_command(command: commands.PrintheadCommand) -> command_models.PrintheadCommandBody:
    """Encode a printhead command."""
    match command:
        case commands.Jog():
            return command_models.PrintheadCommandBody(
                command="jog",
                x=command.x,
                y=command.y,
                z=command.z,
                absolute=command.absolute,
                speed=command.speed,
            )
        case commands.Home():
            return command_models.PrintheadCommandBody(command="home", axes=list(command.axes))
        case commands.Feedrate():
            return command_models.PrintheadCommandBody(command="feedrate", factor=command.factor)
        case _:
            typing.assert_never(command)


def encode_tool_command(command: commands.ToolCommand) -> command_models.ToolCommandBody:
    """Encode a tool command."""
    match command:
        case commands.ToolTarget():
            return command_models.ToolCommandBody(command="target", targets=dict(command.targets))
        case commands.ToolOffset():
            return command_models.ToolCommandBody(command="offset", offsets=dict(command.offsets))
        case commands.ToolSelect():
            return command_models.ToolCommandBody(command="select", tool=command.tool)
        case commands.Extrude():
            return command_models.ToolCommandBody(command="extrude", amount=command.amount, speed=command.speed)
        case commands.Flowrate():
            return command_models.ToolCommandBody(command="flowrate", factor=command.factor)
        case _:
            typing.assert_never(command)


def encode_bed_command(command: commands.BedCommand) -> command_models.BedCommandBody:
    """Encode a bed command."""
    match command:
        case commands.BedTarget():
            return command_models.BedCommandBody(command="target", target=command.target)
        case commands.BedOffset():
            return command_models.BedCommandBody(command="offset", offset=command.offset)
        case _:
            typing.assert_never(command)


def encode_sd_command(command: commands.SdCommand) -> command_models.SdCommandBody:
    """Encode an SD card command."""
    match command:
        case commands.SdInit():
            return command_models.SdCommandBody(command="init")
        case commands.SdRefresh():
            return command_models.SdCommandBody(command="refresh")
        case commands.SdRelease():
            return command_models.SdCommandBody(command="release")
        case _:
            typing.assert_never(command)


_FAMILY_ENCODERS: dict[type[commands.Command], typing.Callable[[typing.Any], command_models.WireCommand]] = {
    commands.Connect: encode_connection_command,
    commands.Disconnect: encode_connection_command,
    commands.FakeAck: encode_connection_command,
    commands.Select: encode_file_command,
    commands.Unselect: encode_file_command,
    commands.Copy: encode_file_command,
    commands.Move: encode_file_command,
    commands.Start: encode_job_command,
    commands.Cancel: encode_job_command,
    commands.Restart: encode_job_command,
    commands.Pause: encode_job_command,
    commands.Resume: encode_job_command,
    commands.Toggle: encode_job_command,
    commands.Jog: encode_printhead_command,
    commands.Home: encode_printhead_command,
    commands.Feedrate: encode_printhead_command,
    commands.ToolTarget: encode_tool_command,
    commands.ToolOffset: encode_tool_command,
    commands.ToolSelect: encode_tool_command,
    commands.Extrude: encode_tool_command,
    commands.Flowrate: encode_tool_command,
    commands.BedTarget: encode_bed_command,
    commands.BedOffset: encode_bed_command,
    commands.SdInit: encode_sd_command,
    commands.SdRefresh: encode_sd_command,
    commands.SdRelease: encode_sd_command,
}


def encode(command: commands.Command) -> command_models.WireCommand:
    """Encode any command into the wire body of its family.

    Raises:
        TypeError: If `command` is not one of the known variants.
    """
    encoder = _FAMILY_ENCODERS.get(type(command))
    if encoder is None:
        raise TypeError(f"Unknown command type: {type(command).__name__}")
    return encoder(command)


def _reject(message: str) -> typing.NoReturn:
    logger.info("Rejected command before sending", reason=message)
    raise exceptions.OctoPrintBadRequestError(message, status_code=None, response_body=message)


def _check_range(name: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        _reject(f"{name} factor {value} is outside [{low}, {high}]")


def validate_command(command: commands.Command) -> None:
    """Check a command against the limits the host documents.

    Raises:
        OctoPrintBadRequestError: With `status_code=None` if the command would be rejected.
    """
    match command:
        case commands.Feedrate(factor=factor):
            _check_range("Feedrate", factor, consts.FEEDRATE_RANGE)
        case commands.Flowrate(factor=factor):
            _check_range("Flowrate", factor, consts.FLOWRATE_RANGE)
        case commands.Home(axes=axes):
            if not axes:
                _reject("Home needs at least one axis")
            invalid = sorted(set(axes) - consts.HOME_AXES)
            if invalid:
                _reject(f"Cannot home unknown axes: {', '.join(invalid)}")
        case commands.Jog(x=None, y=None, z=None):
            _reject("Jog needs at least one of x, y, z")
        case commands.ToolTarget(targets=values) | commands.ToolOffset(offsets=values):
            if not values:
                _reject(f"{type(command).__name__} needs at least one tool")
            invalid = sorted(k for k in values if not k.startswith("tool"))
            if invalid:
                _reject(f"Unknown tool names: {', '.join(invalid)}")
        case _:
            pass

"""Domain-level commands and addressing for the OctoPrint REST client.

Each command is its own small immutable type carrying only the fields meaningful to it. Commands
are grouped into families matching the host endpoint that receives them.

How to use the most important parts:
- Construct a command (e.g. `Connect(port="/dev/ttyACM0", baudrate=115200)`) and pass it to the
  matching service method, e.g. `client.connection.issue_command(...)`.
- `PathDescriptor` addresses a single file or folder; `FilesLocation` selects a listing root.
"""

from enum import StrEnum

import pydantic

from octorest.client.models import Origin


class Command(pydantic.BaseModel):
    """Base for all domain commands."""

    model_config = pydantic.ConfigDict(frozen=True)


# -- Addressing ---------------------------------------------------------------


class FilesLocation(StrEnum):
    """Where to list files from. `ROOT` lists every origin."""

    ROOT = ""
    LOCAL = "local"
    SDCARD = "sdcard"


class PathDescriptor(pydantic.BaseModel):
    """The origin and path of a single file or folder."""

    location: Origin
    path: str

    model_config = pydantic.ConfigDict(frozen=True)

    @property
    def url_path(self) -> str:
        """`{location}/{path}` with one leading slash of `path` removed."""
        path = self.path.removeprefix("/")
        return f"{self.location}/{path}"


# -- Connection ---------------------------------------------------------------


class Connect(Command):
    """Connect to the printer. Unset values fall back to the host's preferences."""

    port: str | None = None
    baudrate: int | None = None
    printer_profile: str | None = None
    save: bool | None = None
    autoconnect: bool | None = None


class Disconnect(Command):
    """Disconnect from the printer."""


class FakeAck(Command):
    """Send a fake acknowledgement to unstick a waiting serial line."""


type ConnectionCommand = Connect | Disconnect | FakeAck


# -- Files --------------------------------------------------------------------


class Select(Command):
    """Select a file, optionally starting the print right away."""

    print: bool = False


class Unselect(Command):
    """Clear the current selection."""


class Copy(Command):
    """Copy to `destination`, a path relative to the same origin."""

    destination: str


class Move(Command):
    """Move to `destination`, a path relative to the same origin."""

    destination: str


type FileCommand = Select | Unselect | Copy | Move


# -- Job ----------------------------------------------------------------------


class Start(Command):
    """Start printing the selected file."""


class Cancel(Command):
    """Cancel the active job."""


class Restart(Command):
    """Restart the paused job from the beginning."""


class Pause(Command):
    """Pause the active job."""


class Resume(Command):
    """Resume the paused job."""


class Toggle(Command):
    """Pause if printing, resume if paused."""


type JobCommand = Start | Cancel | Restart | Pause | Resume | Toggle


# -- Printhead ----------------------------------------------------------------


class Jog(Command):
    """Move the printhead by (or, with `absolute`, to) the given amounts in mm."""

    x: float | None = None
    y: float | None = None
    z: float | None = None
    absolute: bool | None = None
    speed: int | None = None


class Home(Command):
    """Home the given axes."""

    axes: tuple[str, ...] = ("x", "y", "z")


class Feedrate(Command):
    """Change the feedrate factor, 0.5 to 2.0."""

    factor: float


type PrintheadCommand = Jog | Home | Feedrate


# -- Tool ---------------------------------------------------------------------


class ToolTarget(Command):
    """Set target temperatures, keyed by tool name (`tool0`, `tool1`, ...)."""

    targets: dict[str, float]


class ToolOffset(Command):
    """Set temperature offsets, keyed by tool name."""

    offsets: dict[str, float]


class ToolSelect(Command):
    """Make `tool` the active tool."""

    tool: str


class Extrude(Command):
    """Extrude (or retract, if negative) `amount` mm of filament with the active tool."""

    amount: float
    speed: int | None = None


class Flowrate(Command):
    """Change the flow rate factor, 0.75 to 1.25."""

    factor: float


type ToolCommand = ToolTarget | ToolOffset | ToolSelect | Extrude | Flowrate


# -- Bed ----------------------------------------------------------------------


class BedTarget(Command):
    target: float


class BedOffset(Command):
    offset: float


type BedCommand = BedTarget | BedOffset


# -- SD card ------------------------------------------------------------------


class SdInit(Command):
    """Initialize the printer's SD card."""


class SdRefresh(Command):
    """Refresh the SD card file list."""


class SdRelease(Command):
    """Release the SD card so it can be removed."""


type SdCommand = SdInit | SdRefresh | SdRelease

"""Wire shapes for command bodies sent to the host.

Every command family has exactly one flat record: a `command` discriminator plus the optional
siblings any variant of that family may need. Unset siblings stay `None` and are left out of
the JSON body.

How to use the most important parts:
- Build these through `octorest.client.encoders.encode(...)` rather than by hand.
- `WireCommand.to_json()` returns the exact dictionary sent as the request body.
"""

import typing

import pydantic
from pydantic.alias_generators import to_camel


class WireCommand(pydantic.BaseModel):
    """Base for all command bodies."""

    command: str

    model_config = pydantic.ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json(self) -> dict[str, typing.Any]:
        """Serialize with wire names, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ConnectionCommandBody(WireCommand):
    """Body of `POST /api/connection`."""

    port: str | None = None
    baudrate: int | None = None
    printer_profile: str | None = None
    save: bool | None = None
    autoconnect: bool | None = None


class FileCommandBody(WireCommand):
    """Body of `POST /api/files/{location}/{path}`."""

    print_after_select: bool | None = pydantic.Field(None, alias="print")
    destination: str | None = None


class JobCommandBody(WireCommand):
    """Body of `POST /api/job`."""

    action: str | None = None


class PrintheadCommandBody(WireCommand):
    """Body of `POST /api/printer/printhead`."""

    x: float | None = None
    y: float | None = None
    z: float | None = None
    absolute: bool | None = None
    speed: int | None = None
    axes: list[str] | None = None
    factor: float | None = None


class ToolCommandBody(WireCommand):
    """Body of `POST /api/printer/tool`."""

    targets: dict[str, float] | None = None
    offsets: dict[str, float] | None = None
    tool: str | None = None
    amount: float | None = None
    speed: int | None = None
    factor: float | None = None


class BedCommandBody(WireCommand):
    """Body of `POST /api/printer/bed`."""

    target: float | None = None
    offset: float | None = None


class SdCommandBody(WireCommand):
    """Body of `POST /api/printer/sd`."""

"""Connection models for the OctoPrint REST client."""

import pydantic

from .common import ApiModel


class PrinterProfile(ApiModel):
    """A printer profile known to the host."""

    id: str
    name: str


class ConnectionCurrent(ApiModel):
    """The connection the host is currently using."""

    state: str
    port: str | None = None
    baudrate: int | None = None
    printer_profile: str | None = None


class ConnectionOptions(ApiModel):
    """Values accepted by the connect command, plus the stored preferences."""

    ports: list[str] = pydantic.Field(default_factory=list)
    baudrates: list[int] = pydantic.Field(default_factory=list)
    printer_profiles: list[PrinterProfile] = pydantic.Field(default_factory=list)
    port_preference: str | None = None
    baudrate_preference: int | None = None
    printer_profile_preference: str | None = None
    autoconnect: bool | None = None


class ConnectionInfo(ApiModel):
    """Response of `GET /api/connection`."""

    current: ConnectionCurrent
    options: ConnectionOptions

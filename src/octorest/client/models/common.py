"""Common models for the OctoPrint REST client."""

import typing
from enum import StrEnum

import pydantic
import structlog
from pydantic.alias_generators import to_camel

logger = structlog.get_logger(__name__)


class ApiModel(pydantic.BaseModel):
    """Base model for every payload exchanged with the host.

    Wire names are camelCase, attributes are snake_case. Unknown fields are dropped
    but their names are logged so shape drift on the host side is visible.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @pydantic.model_validator(mode="before")
    @classmethod
    def log_unknown_fields(cls, data: typing.Any) -> typing.Any:
        if isinstance(data, dict) and cls.model_config.get("extra") == "ignore":
            known = set(cls.model_fields)
            known.update(f.alias for f in cls.model_fields.values() if f.alias)
            unknown = [k for k in data if k not in known]
            if unknown:
                logger.debug("Ignoring unknown fields", model=cls.__name__, fields=unknown)
        return data


class Origin(StrEnum):
    """Storage location of a file on the host."""

    LOCAL = "local"
    SDCARD = "sdcard"


class ApiVersion(ApiModel):
    """Version information returned by `/api/version`."""

    api: str
    server: str
    text: str


class Dimensions(ApiModel):
    """Bounding box size of a model in millimetres."""

    width: float
    height: float
    depth: float


class Area(ApiModel):
    """Axis-aligned area covered by moves in a G-code file."""

    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float


class FilamentUsage(ApiModel):
    """Filament consumed by one tool."""

    length: float | None = None
    volume: float | None = None


def per_tool_filament(value: typing.Any) -> typing.Any:
    """Read the legacy flat `{length, volume}` filament shape as belonging to `tool0`."""
    if isinstance(value, dict) and value and set(value) <= {"length", "volume"}:
        return {"tool0": value}
    return value


FilamentByTool = typing.Annotated[dict[str, FilamentUsage], pydantic.BeforeValidator(per_tool_filament)]


class Refs(ApiModel):
    """Reference URLs for a file or folder."""

    resource: str
    download: str | None = None
    model: str | None = None

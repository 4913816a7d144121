"""Printer telemetry models for the OctoPrint REST client."""

import typing

import pydantic
import structlog

from .common import ApiModel

logger = structlog.get_logger(__name__)


class TemperatureReading(ApiModel):
    """Actual, target and offset temperature of one heater."""

    actual: float | None = None
    target: float | None = None
    offset: float | None = None


class HeaterMap(ApiModel):
    """A payload whose keys (other than the declared fields) are heater names.

    The host names heaters dynamically (`tool0`, `tool1`, `bed`, `chamber`, ...), so they are
    validated as typed extra fields and exposed through `heaters`.
    """

    model_config = pydantic.ConfigDict(extra="allow")

    __pydantic_extra__: dict[str, TemperatureReading] = pydantic.Field(init=False)

    @pydantic.model_validator(mode="before")
    @classmethod
    def drop_non_heater_fields(cls, data: typing.Any) -> typing.Any:
        """Only objects can be heater readings; other unknown keys are ignored."""
        if not isinstance(data, dict):
            return data
        known = set(cls.model_fields)
        known.update(f.alias for f in cls.model_fields.values() if f.alias)
        dropped = [k for k, v in data.items() if k not in known and not isinstance(v, dict)]
        if not dropped:
            return data
        logger.debug("Ignoring unknown fields", model=cls.__name__, fields=dropped)
        return {k: v for k, v in data.items() if k not in dropped}

    @property
    def heaters(self) -> dict[str, TemperatureReading]:
        """Readings keyed by heater name."""
        return dict(self.__pydantic_extra__ or {})

    @property
    def tools(self) -> dict[str, TemperatureReading]:
        """Only the hotend readings."""
        return {k: v for k, v in self.heaters.items() if k.startswith("tool")}

    @property
    def bed(self) -> TemperatureReading | None:
        return self.heaters.get("bed")


class TemperatureHistoryEntry(HeaterMap):
    """One sample of the temperature history."""

    time: int


class TemperatureState(HeaterMap):
    """Current temperatures, optionally with history."""

    history: list[TemperatureHistoryEntry] | None = None


class ToolState(TemperatureState):
    """Response of `GET /api/printer/tool`."""


class BedState(TemperatureState):
    """Response of `GET /api/printer/bed`."""


class SdState(ApiModel):
    """Response of `GET /api/printer/sd`."""

    ready: bool


class PrinterFlags(ApiModel):
    """State flags reported by the host."""

    operational: bool
    paused: bool
    printing: bool
    pausing: bool | None = None
    cancelling: bool | None = None
    sd_ready: bool
    error: bool
    ready: bool
    closed_or_error: bool


class PrinterStatus(ApiModel):
    """Human readable state plus flags."""

    text: str
    flags: PrinterFlags
    error: str | None = None


class PrinterState(ApiModel):
    """Response of `GET /api/printer`.

    Each section may be missing when excluded via the `exclude` query parameter.
    """

    temperature: TemperatureState | None = None
    sd: SdState | None = None
    state: PrinterStatus | None = None

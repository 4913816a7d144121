"""File tree models for the OctoPrint REST client.

`FileTreeEntry` is a tagged union over `FileEntry` and `FolderEntry`. The host has used more than
one tag for the same kind of entry across versions, so the tag is resolved through
`ENTRY_TYPE_ALIASES`. Unknown tags fail validation instead of falling back to either variant.
"""

import typing

import pydantic

from .common import ApiModel, Area, Dimensions, FilamentByTool, Origin, Refs

FILE_TAG = "<file>"
FOLDER_TAG = "<folder>"

ENTRY_TYPE_ALIASES: dict[str, str] = {
    "machinecode": FILE_TAG,
    "model": FILE_TAG,
    "folder": FOLDER_TAG,
}

# Tags are injected into validation locations and must never be mistaken for wire field names
UNION_TAGS = frozenset(ENTRY_TYPE_ALIASES.values())


class GcodeAnalysis(ApiModel):
    """Result of the host's G-code analysis."""

    estimated_print_time: float | None = None
    filament: FilamentByTool | None = None
    dimensions: Dimensions | None = None
    printing_area: Area | None = None
    travel_area: Area | None = None
    travel_dimensions: Dimensions | None = None


class LastPrint(ApiModel):
    """Outcome of the most recent print of a file."""

    date: float
    print_time: float | None = None
    success: bool


class PrintHistory(ApiModel):
    """Success and failure counters for a file."""

    success: int
    failure: int
    last: LastPrint | None = None


class Statistics(ApiModel):
    """Per printer-profile print time statistics."""

    average_print_time: dict[str, float] = pydantic.Field(default_factory=dict)
    last_print_time: dict[str, float] = pydantic.Field(default_factory=dict)


class FileEntry(ApiModel):
    """A printable or model file."""

    type: typing.Literal["machinecode", "model"]
    name: str
    path: str
    origin: Origin
    display: str | None = None
    type_path: list[str] = pydantic.Field(default_factory=list)
    hash: str | None = None
    size: int | None = None
    date: int | None = None
    refs: Refs | None = None
    gcode_analysis: GcodeAnalysis | None = None
    print_history: PrintHistory | None = pydantic.Field(None, alias="print")
    statistics: Statistics | None = None


class FolderEntry(ApiModel):
    """A folder and the entries below it."""

    type: typing.Literal["folder"]
    name: str
    path: str
    origin: Origin
    display: str | None = None
    type_path: list[str] = pydantic.Field(default_factory=list)
    size: int | None = None
    refs: Refs | None = None
    children: "list[FileTreeEntry]" = pydantic.Field(default_factory=list)


def entry_kind(value: typing.Any) -> str | None:
    """Resolve the union tag for a raw payload or an already built entry."""
    raw = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if not isinstance(raw, str):
        return None
    return ENTRY_TYPE_ALIASES.get(raw, raw)


FileTreeEntry = typing.Annotated[
    typing.Annotated[FileEntry, pydantic.Tag(FILE_TAG)] | typing.Annotated[FolderEntry, pydantic.Tag(FOLDER_TAG)],
    pydantic.Discriminator(
        entry_kind,
        custom_error_type="unknown_entry_type",
        custom_error_message="Entry type is missing or not one of machinecode, model, folder",
    ),
]

FolderEntry.model_rebuild()


class FileList(ApiModel):
    """Listing returned by `/api/files` and `/api/files/{location}`."""

    files: list[FileTreeEntry] = pydantic.Field(default_factory=list)
    free: pydantic.ByteSize | None = None
    total: pydantic.ByteSize | None = None


def walk(entries: typing.Iterable[FileEntry | FolderEntry]) -> typing.Iterator[FileEntry | FolderEntry]:
    """Yield every entry in a file tree, depth first, parents before children."""
    for entry in entries:
        yield entry
        if isinstance(entry, FolderEntry):
            yield from walk(entry.children)

"""Pydantic models for OctoPrint REST API responses.

This module defines the data structures used by the client to parse
API responses into typed, immutable objects.
"""

from .common import (
    ApiModel,
    ApiVersion,
    Area,
    Dimensions,
    FilamentUsage,
    Origin,
    Refs,
)
from .connection import (
    ConnectionCurrent,
    ConnectionInfo,
    ConnectionOptions,
    PrinterProfile,
)
from .files import (
    ENTRY_TYPE_ALIASES,
    FileEntry,
    FileList,
    FileTreeEntry,
    FolderEntry,
    GcodeAnalysis,
    LastPrint,
    PrintHistory,
    Statistics,
    walk,
)
from .jobs import Job, JobFile, JobInformation, JobProgress
from .printer import (
    BedState,
    PrinterFlags,
    PrinterState,
    PrinterStatus,
    SdState,
    TemperatureHistoryEntry,
    TemperatureReading,
    TemperatureState,
    ToolState,
)

# ruff: noqa: RUF022
__all__ = [
    # Common
    "ApiModel",
    "ApiVersion",
    "Area",
    "Dimensions",
    "FilamentUsage",
    "Origin",
    "Refs",
    # Connection
    "ConnectionCurrent",
    "ConnectionInfo",
    "ConnectionOptions",
    "PrinterProfile",
    # Files
    "ENTRY_TYPE_ALIASES",
    "FileEntry",
    "FileList",
    "FileTreeEntry",
    "FolderEntry",
    "GcodeAnalysis",
    "LastPrint",
    "PrintHistory",
    "Statistics",
    "walk",
    # Jobs
    "Job",
    "JobFile",
    "JobInformation",
    "JobProgress",
    # Printer
    "BedState",
    "PrinterFlags",
    "PrinterState",
    "PrinterStatus",
    "SdState",
    "TemperatureHistoryEntry",
    "TemperatureReading",
    "TemperatureState",
    "ToolState",
]

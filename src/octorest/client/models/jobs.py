"""Job models for the OctoPrint REST client."""

from .common import ApiModel, FilamentByTool


class JobFile(ApiModel):
    """The file selected for printing, if any."""

    name: str | None = None
    display: str | None = None
    path: str | None = None
    origin: str | None = None
    size: int | None = None
    date: int | None = None


class Job(ApiModel):
    """The currently selected job."""

    file: JobFile
    estimated_print_time: float | None = None
    last_print_time: float | None = None
    filament: FilamentByTool | None = None
    user: str | None = None


class JobProgress(ApiModel):
    """Progress of the active job."""

    completion: float | None = None
    filepos: int | None = None
    print_time: int | None = None
    print_time_left: int | None = None
    print_time_left_origin: str | None = None


class JobInformation(ApiModel):
    """Response of `GET /api/job`."""

    job: Job
    progress: JobProgress
    state: str
    error: str | None = None

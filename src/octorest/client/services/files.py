"""Service for File operations."""

import urllib.parse

import pydantic
import structlog

from octorest.client import classifier, commands, encoders, models
from octorest.client.services.base import BaseService

logger = structlog.get_logger(__name__)

_ENTRY_ADAPTER: pydantic.TypeAdapter[models.FileEntry | models.FolderEntry] = pydantic.TypeAdapter(
    models.FileTreeEntry
)

_FILE_COMMAND = classifier.ResponsePolicy(
    success=frozenset({201, 204}), body=False, conflict=True, bad_request=True
)
_DELETE = classifier.ResponsePolicy(success=frozenset({204}), body=False, not_found=True, conflict=True)


def listing_params(force: bool, recursive: bool) -> dict[str, str]:
    """Query parameters for a listing. Flags are only sent when set, `force` first."""
    params = {}
    if force:
        params["force"] = "true"
    if recursive:
        params["recursive"] = "true"
    return params


def _entry_endpoint(path: commands.PathDescriptor) -> str:
    return f"/api/files/{urllib.parse.quote(path.url_path)}"


class FileService(BaseService):
    """Service for listing and managing files on the host."""

    def list(
        self,
        location: commands.FilesLocation = commands.FilesLocation.ROOT,
        force: bool = False,
        recursive: bool = False,
    ) -> models.FileList:
        """Fetch the files and folders of one or all origins.

        Args:
            location: `ROOT` for every origin, or `LOCAL` / `SDCARD`.
            force: Make the host refresh its file cache first.
            recursive: Include the contents of sub folders.

        Returns:
            A `FileList` whose `files` are `FileEntry` or `FolderEntry` objects.

        Raises:
            OctoPrintNotFoundError: If the location does not exist (e.g. SD support is off).
        """
        endpoint = "/api/files" if not location else f"/api/files/{location}"
        file_list = self._client.request(
            "GET",
            endpoint,
            classifier.QUERY_RESOURCE,
            models.FileList,
            params=listing_params(force, recursive),
        )
        logger.debug("Fetched files", location=str(location) or "root", count=len(file_list.files))
        return file_list

    def get(
        self,
        path: commands.PathDescriptor,
        force: bool = False,
        recursive: bool = False,
    ) -> models.FileEntry | models.FolderEntry:
        """Fetch a single file or folder.

        Args:
            path: Origin and path of the entry.
            force: Make the host refresh its file cache first.
            recursive: For folders, include the contents of sub folders.

        Returns:
            A `FileEntry` or `FolderEntry`.

        Raises:
            OctoPrintNotFoundError: If the entry does not exist.
        """
        return self._client.request(
            "GET",
            _entry_endpoint(path),
            classifier.QUERY_RESOURCE,
            _ENTRY_ADAPTER,
            params=listing_params(force, recursive),
        )

    def issue_command(self, path: commands.PathDescriptor, command: commands.FileCommand) -> None:
        """Send a file command (`Select`, `Unselect`, `Copy` or `Move`).

        Args:
            path: The entry the command applies to.
            command: The command to send.

        Raises:
            OctoPrintBadRequestError: If the destination is invalid.
            OctoPrintConflictError: If the printer is busy with the file.

        Usage Example:
        ```python
            >>> from octorest.client import commands
            >>> target = commands.PathDescriptor(location="local", path="/folder/file.gcode")
            >>> client.files.issue_command(target, commands.Copy(destination="/backup"))
        ```
        """
        body = encoders.encode_file_command(command)
        logger.debug("Issuing file command", command=body.command, path=path.url_path)
        self._client.request("POST", _entry_endpoint(path), _FILE_COMMAND, json=body.to_json())

    def select(self, path: commands.PathDescriptor, print_after_select: bool = False) -> None:
        """Select a file, optionally starting the print right away."""
        self.issue_command(path, commands.Select(print=print_after_select))

    def copy(self, path: commands.PathDescriptor, destination: str) -> None:
        self.issue_command(path, commands.Copy(destination=destination))

    def move(self, path: commands.PathDescriptor, destination: str) -> None:
        self.issue_command(path, commands.Move(destination=destination))

    def delete(self, path: commands.PathDescriptor) -> None:
        """Delete a file or folder.

        Raises:
            OctoPrintNotFoundError: If the entry does not exist.
            OctoPrintConflictError: If the file is being printed.
        """
        logger.debug("Deleting file", path=path.url_path)
        self._client.request("DELETE", _entry_endpoint(path), _DELETE)

"""Service for Job operations."""

import structlog

from octorest.client import classifier, commands, encoders, models
from octorest.client.services.base import BaseService

logger = structlog.get_logger(__name__)

# 204 on success, 409 if the printer is not in a state that allows the command
_JOB_COMMAND = classifier.ResponsePolicy(success=frozenset({204}), body=False, conflict=True)


class JobService(BaseService):
    """Service for the active print job."""

    def get(self) -> models.JobInformation:
        """Fetch the current job and its progress.

        Returns:
            A `JobInformation` object.

        Usage Example:
        ```python
            >>> info = client.job.get()
            >>> print(info.state, info.progress.completion)
        ```
        """
        return self._client.request("GET", "/api/job", classifier.QUERY, models.JobInformation)

    def issue_command(self, command: commands.JobCommand) -> None:
        """Send a job command.

        Raises:
            OctoPrintConflictError: E.g. when starting while already printing.
        """
        body = encoders.encode_job_command(command)
        logger.debug("Issuing job command", command=body.command, action=body.action)
        self._client.request("POST", "/api/job", _JOB_COMMAND, json=body.to_json())

    def start(self) -> None:
        self.issue_command(commands.Start())

    def cancel(self) -> None:
        self.issue_command(commands.Cancel())

    def restart(self) -> None:
        self.issue_command(commands.Restart())

    def pause(self) -> None:
        self.issue_command(commands.Pause())

    def resume(self) -> None:
        self.issue_command(commands.Resume())

    def toggle(self) -> None:
        """Pause if printing, resume if paused."""
        self.issue_command(commands.Toggle())

"""OctoPrint REST Client.

This package provides a typed Python client for the REST API of an OctoPrint host.

How to use the most important parts:
- `OctoPrintClient`: Exposes the REST interface. Build one with
  `OctoPrintClient.builder(address, api_key).port(5000).build()`.
- `commands`: Domain-level commands (`Connect`, `Select`, `Pause`, `Jog`, `ToolTarget`, ...) passed
  to the service methods.
- `models`: The immutable payloads returned by the host, e.g. `FileList`, `JobInformation`.
- `exceptions`: One exception type per failure kind; all derive from `OctoPrintError`.
"""

import logging

import structlog

# Set default library logging level to WARNING if the user hasn't configured structlog
if not structlog.is_configured():
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))

from octorest.client.__version__ import __version__
from octorest.client.config import OctoPrintSettings
from octorest.client.exceptions import ErrorKind, OctoPrintError
from octorest.client.sdk import OctoPrintClient, OctoPrintClientBuilder

__all__ = [
    "ErrorKind",
    "OctoPrintClient",
    "OctoPrintClientBuilder",
    "OctoPrintError",
    "OctoPrintSettings",
    "__version__",
]

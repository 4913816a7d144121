"""Constants used across the OctoPrint REST client.

How to use the most important parts:
- Import this module to reference default ports, timeouts and header names without
  hardcoding them in your application logic.
"""

APP_NAME = "octorest"
APP_AUTHOR = "octorest"

# Connection Defaults
DEFAULT_SCHEME = "http"
DEFAULT_PORT = 80
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 0

# Every request carries the API key in this header
API_KEY_HEADER = "X-Api-Key"

# Client-side command limits
FEEDRATE_RANGE = (0.5, 2.0)
FLOWRATE_RANGE = (0.75, 1.25)
HOME_AXES = frozenset({"x", "y", "z"})

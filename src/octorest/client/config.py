"""Configuration handling for the OctoPrint REST client.

Settings are read, in priority order, from keyword arguments, environment variables (prefixed
`OCTOPRINT_`), a `.env` file, and `config.json` in the platform's user config directory.
"""

import json
import pathlib
import typing

import platformdirs
import pydantic
import pydantic_settings
import structlog

from octorest.client import consts

logger = structlog.get_logger(__name__)


def get_config_path() -> pathlib.Path:
    """Location of the optional `config.json`."""
    return pathlib.Path(platformdirs.user_config_dir(consts.APP_NAME, consts.APP_AUTHOR)) / "config.json"


def load_json_config(config_file: pathlib.Path | None = None) -> dict[str, typing.Any]:
    """Load configuration from config.json."""
    config_file = config_file or get_config_path()
    logger.debug("Attempting to load config.json", config_file=str(config_file))
    if not config_file.exists():
        return {}
    try:
        with config_file.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to read config.json", config_file=str(config_file))
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config.json without a top-level object", config_file=str(config_file))
        return {}
    return data


class OctoPrintSettings(pydantic_settings.BaseSettings):
    """Connection settings for a single host."""

    host: str | None = None
    port: int = consts.DEFAULT_PORT
    api_key: pydantic.SecretStr | None = None
    scheme: typing.Literal["http", "https"] = consts.DEFAULT_SCHEME
    timeout: float = consts.DEFAULT_TIMEOUT
    retries: int = pydantic.Field(consts.DEFAULT_RETRIES, ge=0)

    model_config = pydantic_settings.SettingsConfigDict(env_prefix="OCTOPRINT_", env_file=".env", extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[pydantic_settings.PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include config.json."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            pydantic_settings.InitSettingsSource(settings_cls, load_json_config()),
            file_secret_settings,
        )

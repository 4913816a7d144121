"""Tests for the client itself: construction, headers, transport and settings."""

import json
from unittest import mock

import pytest
import requests
import responses
from responses import matchers

from octorest.client import OctoPrintClient, __version__, config, exceptions

VERSION_RESPONSE = {"api": "0.1", "server": "1.10.2", "text": "OctoPrint 1.10.2"}


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Keep settings tests away from the user's environment, .env and config.json."""
    for name in ("HOST", "PORT", "API_KEY", "SCHEME", "TIMEOUT", "RETRIES"):
        monkeypatch.delenv(f"OCTOPRINT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "config.json"
    monkeypatch.setattr(config, "get_config_path", lambda: config_file)
    return config_file


def test_builder_defaults():
    client = OctoPrintClient.builder("octopi.local", "secret").build()

    assert client.address == "octopi.local"
    assert client.port == 80
    assert client.api_key == "secret"
    assert client.base_url == "http://octopi.local:80"


def test_builder_options():
    session = requests.Session()
    client = OctoPrintClient.builder("10.0.0.5", "secret").port(5000).scheme("https").session(session).build()

    assert client.base_url == "https://10.0.0.5:5000"
    assert client._session is session


def test_session_headers(client):
    headers = client._session.headers

    assert headers["X-Api-Key"] == "1234567890"
    assert headers["User-Agent"] == f"octorest-python/{__version__}"
    assert headers["Accept"] == "application/json"


def test_no_retries_by_default(client):
    retry = client._session.get_adapter("http://octopi.local:5000").max_retries

    assert retry.total == 0
    assert retry.connect == 0


def test_retries_only_cover_connect_failures():
    client = OctoPrintClient.builder("octopi.local", "secret").retries(3).build()
    retry = client._session.get_adapter("http://octopi.local").max_retries

    assert retry.connect == 3
    assert retry.read == 0
    assert retry.status == 0
    assert retry.redirect == 0
    assert retry.backoff_factor == 0.5


@responses.activate
def test_get_api_version(client):
    responses.add(
        responses.GET,
        "http://octopi.local:5000/api/version",
        json=VERSION_RESPONSE,
        status=200,
        match=[matchers.header_matcher({"X-Api-Key": "1234567890"})],
    )

    version = client.get_api_version()

    assert version.api == "0.1"
    assert version.server == "1.10.2"
    assert version.text == "OctoPrint 1.10.2"


@responses.activate
def test_request_uses_default_timeout(client):
    responses.add(responses.GET, "http://octopi.local:5000/api/version", json=VERSION_RESPONSE, status=200)

    client.get_api_version()

    assert responses.calls[0].request.req_kwargs["timeout"] == 30.0


@responses.activate
def test_connection_refused_is_transport_error(client):
    responses.add(
        responses.GET,
        "http://octopi.local:5000/api/version",
        body=requests.exceptions.ConnectionError("Connection refused"),
    )

    with pytest.raises(exceptions.OctoPrintTransportError, match="Connection refused") as exc:
        client.get_api_version()

    assert exc.value.kind == exceptions.ErrorKind.TRANSPORT_FAILURE
    assert isinstance(exc.value.__cause__, requests.exceptions.ConnectionError)


@responses.activate
def test_timeout_is_transport_error(client):
    responses.add(responses.POST, "http://octopi.local:5000/api/job", body=requests.exceptions.ReadTimeout("slow"))

    with pytest.raises(exceptions.OctoPrintTransportError):
        client.job.start()


@responses.activate
@pytest.mark.parametrize("status", [401, 403])
def test_invalid_api_key(client, status):
    responses.add(responses.GET, "http://octopi.local:5000/api/version", status=status, body="Invalid API key")

    with pytest.raises(exceptions.OctoPrintAuthError) as exc:
        client.get_api_version()

    assert exc.value.kind == exceptions.ErrorKind.UNAUTHORIZED
    assert exc.value.status_code == status


def test_context_manager_closes_session():
    session = requests.Session()
    with mock.patch.object(session, "close") as close:
        with OctoPrintClient("octopi.local", "secret", session=session) as client:
            assert client.base_url == "http://octopi.local:80"

    close.assert_called_once_with()


def test_from_settings_env(isolated_settings, monkeypatch):
    monkeypatch.setenv("OCTOPRINT_HOST", "octopi.local")
    monkeypatch.setenv("OCTOPRINT_API_KEY", "from-env")
    monkeypatch.setenv("OCTOPRINT_PORT", "5000")

    client = OctoPrintClient.from_settings()

    assert client.base_url == "http://octopi.local:5000"
    assert client.api_key == "from-env"


def test_from_settings_config_json(isolated_settings):
    isolated_settings.write_text(
        json.dumps({"host": "printer.lan", "api_key": "from-file", "scheme": "https", "port": 443})
    )

    client = OctoPrintClient.from_settings()

    assert client.base_url == "https://printer.lan:443"
    assert client.api_key == "from-file"


def test_from_settings_explicit(isolated_settings):
    settings = config.OctoPrintSettings(host="octopi.local", api_key="explicit", retries=2)

    client = OctoPrintClient.from_settings(settings)

    assert client.api_key == "explicit"
    assert client._session.get_adapter("http://octopi.local").max_retries.connect == 2


@pytest.mark.usefixtures("isolated_settings")
def test_from_settings_missing_host():
    with pytest.raises(exceptions.OctoPrintConfigError, match="OCTOPRINT_HOST"):
        OctoPrintClient.from_settings()

import sqlite3

import pytest
import requests

from emojisearcher.errors import DatasetParseError, NetworkError
from emojisearcher.request import HttpRemoteProvider


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self.body = body
        self.text = text

    def json(self):
        if self.body is None:
            raise ValueError("Expecting value")
        return self.body


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def http_provider(tmp_path):
    return HttpRemoteProvider(
        base_url="https://example.invalid/emojibase-data/",
        timeout=5,
        http_cache=str(tmp_path / "http_cache"),
    )


def install(provider, response):
    provider.session = FakeSession(response)
    provider.nocache_session = FakeSession(response)
    return provider


def test_paths(http_provider):
    install(http_provider, FakeResponse(body=[]))

    http_provider.fetch_emojis()
    http_provider.fetch_shortcodes("github")
    http_provider.fetch_package_json()

    assert [url for url, _ in http_provider.session.calls] == [
        "https://example.invalid/emojibase-data/en/data.json",
        "https://example.invalid/emojibase-data/en/shortcodes/github.json",
    ]
    (url, kwargs), = http_provider.nocache_session.calls
    assert url == "https://example.invalid/emojibase-data/package.json"
    assert kwargs["timeout"] == 5


def test_status_error(http_provider):
    install(http_provider, FakeResponse(status_code=404, text="Not found"))

    with pytest.raises(NetworkError) as excinfo:
        http_provider.fetch_emojis()
    assert excinfo.value.reason == 404


def test_connection_error(http_provider):
    install(http_provider, requests.exceptions.ConnectionError("refused"))

    with pytest.raises(NetworkError):
        http_provider.fetch_package_json()


def test_invalid_json(http_provider):
    install(http_provider, FakeResponse(body=None, text="<html>"))

    with pytest.raises(DatasetParseError):
        http_provider.fetch_emojis()


def test_cache_backend_error(http_provider):
    install(http_provider, sqlite3.OperationalError("database is locked"))

    with pytest.raises(NetworkError):
        http_provider.fetch_emojis()


def test_unusable_http_cache(tmp_path):
    not_a_dir = tmp_path / "notadir"
    not_a_dir.write_text("")

    with pytest.raises(NetworkError):
        HttpRemoteProvider(http_cache=str(not_a_dir / "emojisearcher" / "http_cache"))

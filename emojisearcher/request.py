# SPDX-License-Identifier: MIT
"""Fetching emojibase data over HTTP."""

from . import VERSION, logger
from .errors import DatasetParseError, NetworkError
from .utils import user_cache_dir

import os.path
import sqlite3
from typing import Any, Optional

import requests
from pyrate_limiter import Duration, RequestRate, Limiter
from requests import Session
from requests_cache import CacheMixin
from requests_ratelimiter import LimiterSession, LimiterMixin

#: Base URL of the emojibase-data package.
EMOJIBASE_URL = "https://cdn.jsdelivr.net/npm/emojibase-data@latest"

#: Locale of the emoji data and shortcodes.
DATA_LOCALE = "en"

#: Seconds to wait for the server before giving up on a request.
DEFAULT_TIMEOUT = 30

HEADERS = {
    "User-Agent": f"emojisearcher/{VERSION}"
}


class CachedLimiterSession(CacheMixin, LimiterMixin, Session):
    """Requests session that combines caching and ratelimiting."""


limiter = Limiter(RequestRate(10, Duration.SECOND * 3))


class RemoteProvider:
    """
    Source of emojibase JSON documents. Subclasses implement get_json(); the
    layout of the emojibase-data package is handled here.
    """

    locale = DATA_LOCALE

    def get_json(self, path: str, no_cache: bool = False) -> Any:
        """
        Get the JSON document at the given path, relative to the data root.

        :raises NetworkError: if the document could not be fetched.
        :raises DatasetParseError: if the document is not valid JSON.
        """
        raise NotImplementedError

    def fetch_package_json(self) -> Any:
        # Version checks must see the live version, not a cached response.
        return self.get_json("package.json", no_cache=True)

    def fetch_emojis(self) -> Any:
        return self.get_json(f"{self.locale}/data.json")

    def fetch_shortcodes(self, source: str) -> Any:
        return self.get_json(f"{self.locale}/shortcodes/{source}.json")


class HttpRemoteProvider(RemoteProvider):
    """Fetches emojibase data from a CDN."""

    def __init__(
        self,
        base_url: str = EMOJIBASE_URL,
        locale: str = DATA_LOCALE,
        timeout: float = DEFAULT_TIMEOUT,
        http_cache: Optional[str] = None,
    ):
        """
        :param base_url: URL of the emojibase-data package root.
        :param locale: locale of the data and shortcodes to fetch.
        :param timeout: request timeout in seconds.
        :param http_cache: path of the HTTP response cache; defaults to a file
                           in the user cache directory.
        """
        self.base_url = base_url.rstrip("/")
        self.locale = locale
        self.timeout = timeout

        if http_cache is None:
            http_cache = os.path.join(user_cache_dir(), "http_cache")

        try:
            self.session = CachedLimiterSession(
                http_cache, expire_after=180, limiter=limiter
            )
        except (OSError, sqlite3.Error) as e:
            logger.warning(f"Cannot open HTTP cache {http_cache}: {e}")
            raise NetworkError(self.base_url, e) from e

        self.nocache_session = LimiterSession(limiter=limiter)

    def get_json(self, path: str, no_cache: bool = False) -> Any:
        url = f"{self.base_url}/{path}"
        session = self.nocache_session if no_cache else self.session

        try:
            req = session.get(url, headers=HEADERS, timeout=self.timeout)
        except (requests.exceptions.RequestException, OSError, sqlite3.Error) as e:
            logger.warning(f"Request error for {url}: {e}")
            raise NetworkError(url, e) from e

        if req.status_code != 200:
            logger.warning(f"Request error for {url}: {req.status_code}")
            raise NetworkError(url, req.status_code)

        try:
            return req.json()
        except ValueError as e:
            raise DatasetParseError(f"Invalid JSON from {url}: {e}") from e

# SPDX-License-Identifier: MIT
"""Exceptions raised while loading emoji databases."""


class EmojiDbError(Exception):
    """Base class for recoverable emoji database errors."""


class NetworkError(EmojiDbError):
    """A remote fetch failed (connection error, timeout or non-200 status)."""

    def __init__(self, url: str, reason):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class DatasetParseError(EmojiDbError):
    """A JSON or binary payload did not have the expected shape."""


class VersionParseError(DatasetParseError):
    """A version string is not a valid semantic version."""


class CacheCorrupt(DatasetParseError):
    """Cached database bytes could not be decoded."""


class BundleCorrupt(RuntimeError):
    """The data bundled with the package is unreadable; the build is broken."""

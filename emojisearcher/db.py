# SPDX-License-Identifier: MIT
"""
The emoji database: loading it from the bundled data, from emojibase or from
a cache file, saving it, and checking whether a newer version is available.
"""

from . import logger
from .archive import ZipArchiveReader, read_shortcode_sources
from .emoji import Emoji
from .errors import (
    BundleCorrupt,
    CacheCorrupt,
    DatasetParseError,
    EmojiDbError,
    VersionParseError,
)
from .request import HttpRemoteProvider, RemoteProvider
from .shortcodes import SHORTCODE_SOURCES, ShortcodeSet, normalize_shortcodes

import json
import os
import tempfile
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, BinaryIO, Optional, Tuple

import msgpack
from semver import Version

#: Directory holding the emojibase snapshot shipped with the package.
RES_DIR = Path(__file__).resolve().parent / "res"

#: Layout version of cache files; bump when the cached structure changes.
CACHE_FORMAT = 1


def parse_version(version: Any) -> Version:
    """
    Parse a semantic version string.

    :raises VersionParseError: if the version is not valid semver.
    """
    try:
        return Version.parse(version)
    except (TypeError, ValueError) as e:
        raise VersionParseError(f"Invalid version {version!r}") from e


def _parse_package_json(package_json: Any) -> Version:
    if not isinstance(package_json, dict) or "version" not in package_json:
        raise DatasetParseError("package.json has no version")
    return parse_version(package_json["version"])


def _parse_emojis(data: Any) -> Tuple[Emoji, ...]:
    if not isinstance(data, list):
        raise DatasetParseError("Emoji data is not a list")
    return tuple(Emoji.from_json(e) for e in data)


def get_online_version(provider: Optional[RemoteProvider] = None) -> Version:
    """
    Get the version of the latest emojibase data.

    :raises NetworkError: if the version could not be fetched.
    :raises DatasetParseError: if the version is missing or not valid semver.
    """
    provider = provider or HttpRemoteProvider()
    return _parse_package_json(provider.fetch_package_json())


@dataclass(frozen=True)
class EmojiDb:
    """
    An immutable snapshot of the emoji data.

    Searchers share a single instance; to update, construct a new database
    and hand it to EmojiSearcher.swap_db().
    """

    #: Version of the emojibase data (semver).
    version: str

    #: All emoji, in emojibase order.
    emojis: Tuple[Emoji, ...]

    #: One shortcode set per entry of SHORTCODE_SOURCES, in priority order.
    shortcode_sources: Tuple[ShortcodeSet, ...]

    @classmethod
    def from_bundle(cls, res_dir: PathLike = RES_DIR) -> "EmojiDb":
        """
        Load the emojibase snapshot shipped with the package.

        :raises BundleCorrupt: if the bundled data cannot be read. This means
                               the package itself is broken.
        """
        res_dir = Path(res_dir)

        try:
            with open(res_dir / "package.json", "rb") as f:
                version = _parse_package_json(json.load(f))
            with open(res_dir / "data.json", "rb") as f:
                emojis = _parse_emojis(json.load(f))
            shortcode_sources = read_shortcode_sources(
                ZipArchiveReader(res_dir / "shortcodes.zip")
            )
        except (OSError, ValueError, EmojiDbError) as e:
            logger.critical(f"Bundled emoji data in {res_dir} is unreadable: {e}")
            raise BundleCorrupt(f"Bundled emoji data is unreadable: {e}") from e

        logger.debug(f"Loaded bundled emoji database {version} ({len(emojis)} emoji)")
        return cls(
            version=str(version),
            emojis=emojis,
            shortcode_sources=tuple(shortcode_sources),
        )

    @classmethod
    def from_remote(cls, provider: Optional[RemoteProvider] = None) -> "EmojiDb":
        """
        Download the latest emojibase data.

        :raises NetworkError: if any of the files could not be fetched.
        :raises DatasetParseError: if any of the files is malformed.
        """
        provider = provider or HttpRemoteProvider()

        version = get_online_version(provider)
        logger.info(f"Downloading emoji database {version}...")

        emojis = _parse_emojis(provider.fetch_emojis())
        shortcode_sources = tuple(
            normalize_shortcodes(provider.fetch_shortcodes(source))
            for source in SHORTCODE_SOURCES
        )

        return cls(
            version=str(version), emojis=emojis, shortcode_sources=shortcode_sources
        )

    @classmethod
    def from_cache(cls, data: bytes) -> "EmojiDb":
        """
        Load a database previously written by save().

        :raises CacheCorrupt: if the data is not a valid cached database.
        """
        try:
            cached = msgpack.unpackb(data, raw=False)
        except (ValueError, TypeError, msgpack.exceptions.UnpackException) as e:
            raise CacheCorrupt(f"Cannot decode cached emoji database: {e}") from e

        if not isinstance(cached, dict):
            raise CacheCorrupt("Cached emoji database is not a map")
        if cached.get("format") != CACHE_FORMAT:
            raise CacheCorrupt(f"Unsupported cache format {cached.get('format')!r}")

        version = cached.get("version")
        emojis = cached.get("emojis")
        shortcode_sources = cached.get("shortcode_sources")

        if not isinstance(version, str):
            raise CacheCorrupt("Cached emoji database has no version")
        if not isinstance(emojis, list) or not isinstance(shortcode_sources, list):
            raise CacheCorrupt("Cached emoji database is incomplete")
        if len(shortcode_sources) != len(SHORTCODE_SOURCES):
            raise CacheCorrupt(
                f"Cached emoji database has {len(shortcode_sources)} shortcode "
                f"sources, expected {len(SHORTCODE_SOURCES)}"
            )

        try:
            return cls(
                version=version,
                emojis=tuple(Emoji.from_cache(e) for e in emojis),
                shortcode_sources=tuple(
                    normalize_shortcodes(s) for s in shortcode_sources
                ),
            )
        except DatasetParseError as e:
            raise CacheCorrupt(f"Cached emoji database is malformed: {e}") from e

    @classmethod
    def load(cls, path: PathLike) -> "EmojiDb":
        """Load a cached database from a file. See from_cache()."""
        with open(path, "rb") as f:
            return cls.from_cache(f.read())

    def save(self, sink: BinaryIO):
        """Write the database to a binary stream, in the format from_cache() reads."""
        sink.write(
            msgpack.packb(
                {
                    "format": CACHE_FORMAT,
                    "version": self.version,
                    "emojis": [e.to_cache() for e in self.emojis],
                    "shortcode_sources": [
                        {hexcode: list(codes) for hexcode, codes in source.items()}
                        for source in self.shortcode_sources
                    ],
                },
                use_bin_type=True,
            )
        )

    def dump(self, path: PathLike):
        """Save the database to a file, replacing it atomically."""
        basedir = Path(os.path.dirname(os.path.abspath(path)))
        if not basedir.is_dir():
            basedir.mkdir(parents=True)

        fd, tmp_path = tempfile.mkstemp(dir=basedir, prefix=".emojidb-")
        try:
            with os.fdopen(fd, "wb") as f:
                self.save(f)
            os.replace(tmp_path, path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def needs_update(self, provider: Optional[RemoteProvider] = None) -> bool:
        """
        Check whether emojibase has a newer version than this database.

        Returns True if the local version cannot be parsed, and False if the
        online version cannot be determined.
        """
        try:
            current_db_version = parse_version(self.version)
        except VersionParseError:
            logger.error(
                f"Cannot parse current emoji database version {self.version!r}"
            )
            return True

        try:
            online_db_version = get_online_version(provider)
        except EmojiDbError as e:
            logger.warning(f"Online emoji database version not found: {e}")
            return False

        return current_db_version < online_db_version


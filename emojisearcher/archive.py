# SPDX-License-Identifier: MIT
"""Reading the bundled shortcode archive."""

from . import logger
from .errors import DatasetParseError
from .shortcodes import SHORTCODE_SOURCES, ShortcodeSet, parse_shortcodes

import os.path
import zipfile
from os import PathLike
from typing import Dict, Iterator, List, Tuple


class ArchiveReader:
    """Yields the files stored in an archive as (name, contents) pairs."""

    def members(self) -> Iterator[Tuple[str, bytes]]:
        raise NotImplementedError


class ZipArchiveReader(ArchiveReader):
    def __init__(self, path: PathLike):
        self.path = path

    def members(self) -> Iterator[Tuple[str, bytes]]:
        with zipfile.ZipFile(self.path) as archive:
            for member in archive.infolist():
                if member.is_dir():
                    continue
                yield os.path.basename(member.filename), archive.read(member)


def source_name(filename: str) -> str:
    """Turn "shortcodes/github.json" into "github"."""
    return os.path.splitext(os.path.basename(filename))[0]


def read_shortcode_sources(reader: ArchiveReader) -> List[ShortcodeSet]:
    """
    Read one shortcode set per known source from the archive, ordered by
    SHORTCODE_SOURCES.

    :raises DatasetParseError: if a source is missing or malformed.
    """
    found: Dict[str, ShortcodeSet] = {}
    try:
        for filename, raw in reader.members():
            name = source_name(filename)
            if name not in SHORTCODE_SOURCES:
                logger.debug(f"Ignoring unknown archive member {filename}")
                continue
            if name in found:
                raise DatasetParseError(f"Duplicate shortcode source in archive: {name}")
            found[name] = parse_shortcodes(raw)
    except zipfile.BadZipFile as e:
        raise DatasetParseError(f"Invalid shortcode archive: {e}") from e

    missing = [s for s in SHORTCODE_SOURCES if s not in found]
    if missing:
        raise DatasetParseError(f"Shortcode archive is missing: {', '.join(missing)}")

    return [found[s] for s in SHORTCODE_SOURCES]

# SPDX-License-Identifier: MIT
"""Shortcode sources and normalization of their payloads."""

from .errors import DatasetParseError

import json
from typing import Any, Dict, Tuple

#: Shortcode sets provided by emojibase, in priority order.
SHORTCODE_SOURCES = (
    "cldr",
    "emojibase",
    "emojibase-legacy",
    "github",
    "iamcal",
    "joypixels",
)

#: Hexcode -> shortcodes of one source.
ShortcodeSet = Dict[str, Tuple[str, ...]]


def normalize_shortcodes(payload: Any) -> ShortcodeSet:
    """
    Normalize a shortcode payload so that every value is a tuple.

    emojibase stores a single shortcode as a plain string and several as a
    list; both become tuples here. Empty lists are dropped.

    :raises DatasetParseError: if the payload does not follow that schema.
    """
    if not isinstance(payload, dict):
        raise DatasetParseError("Shortcode payload is not an object")

    shortcodes = {}
    for hexcode, value in payload.items():
        if not isinstance(hexcode, str):
            raise DatasetParseError(f"Invalid hexcode in shortcodes: {hexcode!r}")

        if isinstance(value, str):
            shortcodes[hexcode] = (value,)
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            if value:
                shortcodes[hexcode] = tuple(value)
        else:
            raise DatasetParseError(f"Invalid shortcodes for {hexcode}: {value!r}")

    return shortcodes


def parse_shortcodes(raw: bytes) -> ShortcodeSet:
    """Decode a JSON shortcode file and normalize it."""
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise DatasetParseError(f"Invalid shortcode JSON: {e}") from e
    return normalize_shortcodes(payload)

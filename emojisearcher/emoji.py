# SPDX-License-Identifier: MIT
"""Code for emoji parsing."""

from .errors import DatasetParseError

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


def _str_list(value: Any, what: str) -> Tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DatasetParseError(f"Expected a list of strings for {what}")
    return tuple(value)


@dataclass(frozen=True)
class Emoji:
    """Class representing a single emoji."""

    #: Human readable description of the emoji (CLDR annotation).
    label: str

    #: The emoji character itself. Never empty.
    character: str

    #: Hexcode of the emoji, used to look up its shortcodes.
    hexcode: str

    #: CLDR keywords for this emoji, if any.
    tags: Optional[Tuple[str, ...]] = None

    #: Skin tone variants of this emoji. Variants never have skins of their own.
    skins: Optional[Tuple["Emoji", ...]] = None

    def __post_init__(self):
        if not self.character:
            raise ValueError(f"Emoji {self.hexcode} has an empty character")

    @classmethod
    def from_json(cls, obj: Any, with_skins: bool = True) -> "Emoji":
        """
        Create an Emoji from an entry of emojibase's data.json.

        :raises DatasetParseError: if a required field is missing or malformed.
        """
        if not isinstance(obj, dict):
            raise DatasetParseError("Emoji entry is not an object")

        for key in ("label", "emoji", "hexcode"):
            if not isinstance(obj.get(key), str):
                raise DatasetParseError(f"Emoji entry has no valid {key!r}")

        if not obj["emoji"]:
            raise DatasetParseError(f"Emoji {obj['hexcode']} has an empty character")

        tags = None
        if obj.get("tags") is not None:
            tags = _str_list(obj["tags"], f"tags of {obj['hexcode']}")

        skins = None
        if with_skins and obj.get("skins") is not None:
            if not isinstance(obj["skins"], list):
                raise DatasetParseError(f"Skins of {obj['hexcode']} are not a list")
            skins = tuple(cls.from_json(s, with_skins=False) for s in obj["skins"])

        return cls(
            label=obj["label"],
            character=obj["emoji"],
            hexcode=obj["hexcode"],
            tags=tags,
            skins=skins,
        )

    def to_cache(self) -> Dict[str, Any]:
        """Convert the emoji to the plain structure stored in the cache."""
        return {
            "label": self.label,
            "character": self.character,
            "hexcode": self.hexcode,
            "tags": list(self.tags) if self.tags is not None else None,
            "skins": [s.to_cache() for s in self.skins]
            if self.skins is not None
            else None,
        }

    @classmethod
    def from_cache(cls, obj: Any, with_skins: bool = True) -> "Emoji":
        """
        Inverse of to_cache().

        :raises DatasetParseError: if the structure does not match.
        """
        if not isinstance(obj, dict):
            raise DatasetParseError("Cached emoji is not a map")

        try:
            label, character, hexcode = obj["label"], obj["character"], obj["hexcode"]
            tags, skins = obj["tags"], obj["skins"]
        except KeyError as e:
            raise DatasetParseError(f"Cached emoji is missing {e}") from e

        if not all(isinstance(v, str) for v in (label, character, hexcode)):
            raise DatasetParseError("Cached emoji has non-string fields")
        if not character:
            raise DatasetParseError(f"Cached emoji {hexcode} has an empty character")

        if tags is not None:
            tags = _str_list(tags, f"tags of {hexcode}")
        if skins is not None:
            if not with_skins:
                raise DatasetParseError(f"Skin variant {hexcode} has skins of its own")
            if not isinstance(skins, list):
                raise DatasetParseError(f"Skins of {hexcode} are not a list")
            skins = tuple(cls.from_cache(s, with_skins=False) for s in skins)

        return cls(
            label=label, character=character, hexcode=hexcode, tags=tags, skins=skins
        )

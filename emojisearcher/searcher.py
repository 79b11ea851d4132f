# SPDX-License-Identifier: MIT
"""Searching the emoji database."""

from .db import EmojiDb
from .emoji import Emoji
from .shortcodes import ShortcodeSet

from typing import Iterator, NamedTuple, Optional, Sequence


class SearchResult(NamedTuple):
    #: The emoji character.
    emoji: str

    #: The shortcode or tag that matched the query.
    matched: str


def match_emoji(
    emoji: Emoji, shortcode_sources: Sequence[ShortcodeSet], query: str
) -> Optional[str]:
    """
    Find the shortcode or tag of an emoji that contains the query.

    Only the first shortcode source that knows the emoji is consulted; if
    none of its shortcodes match, or no source knows the emoji, the tags are
    searched instead.
    """
    for shortcode_set in shortcode_sources:
        shortcodes = shortcode_set.get(emoji.hexcode)
        if shortcodes is None:
            continue
        for shortcode in shortcodes:
            if query in shortcode:
                return shortcode
        break

    for tag in emoji.tags or ():
        if query in tag:
            return tag

    return None


class EmojiSearcher:
    """An emoji searcher."""

    def __init__(self, db: EmojiDb):
        """
        Initialize the searcher.

        :param db: database to search. It is shared, not copied.
        """
        self.db = db

    def search(self, query: str) -> Iterator[SearchResult]:
        """
        Search for emoji matching the given string.

        This matches any emoji that has a shortcode or a tag containing the
        query (case-sensitive). Results are produced lazily, in database order.
        The database is fixed when search() is called, so a swap_db() during
        iteration does not affect the returned iterator.
        """
        return self._search(self.db, query)

    @staticmethod
    def _search(db: EmojiDb, query: str) -> Iterator[SearchResult]:
        shortcode_sources = db.shortcode_sources
        for emoji in db.emojis:
            matched = match_emoji(emoji, shortcode_sources, query)
            if matched is not None:
                yield SearchResult(emoji=emoji.character, matched=matched)

    def swap_db(self, new_db: EmojiDb):
        """
        Replace the database with a new one, e.g. from EmojiDb.from_remote().

        Searches that are already running keep using the old database.
        """
        self.db = new_db

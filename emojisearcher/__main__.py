# SPDX-License-Identifier: MIT

from . import VERSION, logger
from .db import EmojiDb
from .errors import CacheCorrupt, EmojiDbError
from .searcher import EmojiSearcher
from .utils import colors, user_cache_dir

import argparse
import logging
import os.path
import sys

DEFAULT_CACHE = os.path.join(user_cache_dir(), "emojidb.msgpack")

parser = argparse.ArgumentParser(
    prog="emojisearcher",
    description="Search emoji by shortcode or keyword",
)

parser.add_argument("query", help="text to look for in emoji shortcodes and tags")
parser.add_argument(
    "--cache", help="emoji database cache file", default=DEFAULT_CACHE
)
parser.add_argument(
    "--update",
    action="store_true",
    help="download the latest emoji data if a newer version is available",
)
parser.add_argument(
    "--offline", action="store_true", help="never access the network"
)
parser.add_argument(
    "--show-match",
    action="store_true",
    help="print the shortcode or tag that matched next to each emoji",
)
parser.add_argument("-v", "--verbose", action="store_true", help="print debug output")
parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")


def load_db(cache_path: str) -> EmojiDb:
    """Load the cached database, falling back to the bundled one."""
    if os.path.exists(cache_path):
        try:
            return EmojiDb.load(cache_path)
        except CacheCorrupt as e:
            logger.warning(f"Ignoring broken cache {cache_path}: {e}")
        except OSError as e:
            logger.warning(f"Cannot read cache {cache_path}: {e}")
    return EmojiDb.from_bundle()


def update_db(searcher: EmojiSearcher, cache_path: str):
    """Replace the searcher's database with the latest one, if there is one."""
    if not searcher.db.needs_update():
        logger.debug(f"Emoji database {searcher.db.version} is up to date")
        return

    try:
        db = EmojiDb.from_remote()
    except EmojiDbError as e:
        logger.warning(f"Could not update emoji database: {e}")
        return

    searcher.swap_db(db)
    logger.info(f"Updated emoji database to {colors['bold']}{db.version}{colors['reset']}")

    try:
        db.dump(cache_path)
    except OSError as e:
        logger.warning(f"Could not write cache {cache_path}: {e}")


def main(argv=None) -> int:
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    searcher = EmojiSearcher(load_db(args.cache))

    if args.update and not args.offline:
        update_db(searcher, args.cache)

    found = False
    for result in searcher.search(args.query):
        found = True
        if args.show_match:
            print(f"{result.emoji}  {colors['dim']}{result.matched}{colors['reset']}")
        else:
            print(result.emoji)

    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())

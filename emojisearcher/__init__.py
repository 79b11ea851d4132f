# SPDX-License-Identifier: MIT
"""
emojisearcher - Search emoji by shortcode and keyword using emojibase data
"""

import logging

VERSION = "0.1.0"

# Logger configuration


class LogFormatter(logging.Formatter):
    # https://stackoverflow.com/questions/384076/how-can-i-color-python-logging-output
    FORMATS = {
        logging.DEBUG: "%(message)s",
        logging.INFO: "%(message)s",
        logging.WARNING: "\x1b[33;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.ERROR: "\x1b[31;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.CRITICAL: "\x1b[31;1m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, "%(message)s")
        return logging.Formatter(log_fmt).format(record)


logger = logging.getLogger("emojisearcher")
logger.setLevel(logging.INFO)

_log_stream = logging.StreamHandler()
_log_stream.setFormatter(LogFormatter())
_log_stream.setLevel(logging.DEBUG)
_log_stream.name = "emojisearcher_handler"

logger.addHandler(_log_stream)

# Public API; imported after the logger exists since these modules use it.
from .errors import (  # noqa: E402
    EmojiDbError,
    NetworkError,
    DatasetParseError,
    VersionParseError,
    CacheCorrupt,
    BundleCorrupt,
)
from .emoji import Emoji  # noqa: E402
from .db import EmojiDb  # noqa: E402
from .searcher import EmojiSearcher, SearchResult  # noqa: E402

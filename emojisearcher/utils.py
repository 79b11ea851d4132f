# SPDX-License-Identifier: MIT
"""Miscellaneous helpers."""

import os
import os.path

colors = {
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "reset": "\x1b[0m",
}


def user_cache_dir() -> str:
    """Directory for emojisearcher's cache files ($XDG_CACHE_HOME/emojisearcher)."""
    base = os.environ.get("XDG_CACHE_HOME") or os.path.expanduser("~/.cache")
    return os.path.join(base, "emojisearcher")

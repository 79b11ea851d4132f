import pytest

from emojisearcher.db import EmojiDb
from emojisearcher.emoji import Emoji
from emojisearcher.errors import NetworkError
from emojisearcher.request import RemoteProvider
from emojisearcher.shortcodes import SHORTCODE_SOURCES


class FakeProvider(RemoteProvider):
    """Serves JSON documents from a dict; exceptions stored in it are raised."""

    def __init__(self, documents):
        self.documents = documents
        self.requested = []

    def get_json(self, path, no_cache=False):
        self.requested.append(path)
        if path not in self.documents:
            raise NetworkError(path, 404)
        value = self.documents[path]
        if isinstance(value, Exception):
            raise value
        return value


EMOJI_DATA = [
    {
        "label": "grinning face",
        "hexcode": "1F600",
        "emoji": "😀",
        "tags": ["face", "grin"],
        "order": 1,
    },
    {
        "label": "thumbs up",
        "hexcode": "1F44D",
        "emoji": "👍",
        "tags": ["+1", "hand", "thumb", "up"],
        "skins": [
            {"label": "thumbs up: light skin tone", "hexcode": "1F44D-1F3FB", "emoji": "👍🏻", "tone": 1},
        ],
    },
    {"label": "pizza", "hexcode": "1F355", "emoji": "🍕"},
]


def remote_documents(version="15.3.0"):
    documents = {
        "package.json": {"name": "emojibase-data", "version": version},
        "en/data.json": EMOJI_DATA,
    }
    for source in SHORTCODE_SOURCES:
        documents[f"en/shortcodes/{source}.json"] = {}
    documents["en/shortcodes/github.json"] = {"1F600": "grinning", "1F44D": ["+1", "thumbsup"]}
    return documents


@pytest.fixture
def provider():
    return FakeProvider(remote_documents())


@pytest.fixture
def grin_db():
    return EmojiDb(
        version="1.0.0",
        emojis=(
            Emoji(label="grinning face", character="😀", hexcode="1F600", tags=("face", "happy")),
        ),
        shortcode_sources=({"1F600": ("grin",)},) + ({},) * (len(SHORTCODE_SOURCES) - 1),
    )

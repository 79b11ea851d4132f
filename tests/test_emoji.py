import pytest

from emojisearcher.emoji import Emoji
from emojisearcher.errors import DatasetParseError


def test_from_json():
    emoji = Emoji.from_json(
        {"label": "grinning face", "hexcode": "1F600", "emoji": "😀", "tags": ["face", "grin"], "order": 1}
    )
    assert emoji == Emoji(label="grinning face", character="😀", hexcode="1F600", tags=("face", "grin"))
    assert emoji.skins is None


def test_from_json_without_tags():
    emoji = Emoji.from_json({"label": "pizza", "hexcode": "1F355", "emoji": "🍕"})
    assert emoji.tags is None


def test_from_json_skins_are_not_nested():
    emoji = Emoji.from_json(
        {
            "label": "thumbs up",
            "hexcode": "1F44D",
            "emoji": "👍",
            "skins": [
                {
                    "label": "thumbs up: light skin tone",
                    "hexcode": "1F44D-1F3FB",
                    "emoji": "👍🏻",
                    "skins": [{"label": "x", "hexcode": "X", "emoji": "x"}],
                }
            ],
        }
    )
    assert [s.hexcode for s in emoji.skins] == ["1F44D-1F3FB"]
    assert emoji.skins[0].skins is None


@pytest.mark.parametrize(
    "obj",
    [
        "😀",
        {"label": "grinning face", "hexcode": "1F600"},
        {"label": "grinning face", "hexcode": "1F600", "emoji": ""},
        {"label": "grinning face", "hexcode": "1F600", "emoji": "😀", "tags": "face"},
        {"label": "grinning face", "hexcode": "1F600", "emoji": "😀", "skins": {}},
    ],
)
def test_from_json_rejects_bad_entries(obj):
    with pytest.raises(DatasetParseError):
        Emoji.from_json(obj)


def test_cache_structure_keeps_absent_fields():
    emoji = Emoji(label="pizza", character="🍕", hexcode="1F355")
    cached = emoji.to_cache()
    assert cached["tags"] is None
    assert cached["skins"] is None
    assert Emoji.from_cache(cached) == emoji


def test_from_cache_rejects_empty_character():
    with pytest.raises(DatasetParseError):
        Emoji.from_cache({"label": "x", "character": "", "hexcode": "X", "tags": None, "skins": None})


def test_empty_character_rejected():
    with pytest.raises(ValueError):
        Emoji(label="nothing", character="", hexcode="0000")


def test_from_cache_rejects_nested_skins():
    skin = {"label": "skin", "character": "👍🏻", "hexcode": "1F44D-1F3FB", "tags": None, "skins": []}
    cached = {"label": "thumbs up", "character": "👍", "hexcode": "1F44D", "tags": None, "skins": [skin]}

    with pytest.raises(DatasetParseError, match="1F44D-1F3FB"):
        Emoji.from_cache(cached)


def test_from_cache_keeps_one_level_of_skins():
    emoji = Emoji(
        label="thumbs up",
        character="👍",
        hexcode="1F44D",
        skins=(Emoji(label="skin", character="👍🏻", hexcode="1F44D-1F3FB"),),
    )
    assert Emoji.from_cache(emoji.to_cache()) == emoji

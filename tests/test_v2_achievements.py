"""
Tests for achievements and their tagged rewards and bits.
"""

import pytest

from gw2api import DecodeError
from gw2api.v2.achievements import (
    Achievement,
    AchievementKind,
    CoinsReward,
    ItemBit,
    ItemReward,
    MasteryReward,
    SkinBit,
    TextBit,
    TitleReward,
)

ACHIEVEMENT = {
    "id": 1,
    "name": "Centaur Slayer",
    "description": "",
    "requirement": "Kill  centaurs.",
    "locked_text": "",
    "type": "Default",
    "flags": ["Pvp", "CategoryDisplay", "Repeatable"],
    "tiers": [{"count": 100, "points": 5}, {"count": 1000, "points": 5}],
    "rewards": [
        {"type": "Coins", "count": 10000},
        {"type": "Item", "id": 70102, "count": 1},
        {"type": "Mastery", "id": 4, "region": "Tyria"},
        {"type": "Title", "id": 228},
    ],
    "bits": [
        {"type": "Text", "text": "Kill a centaur"},
        {"type": "Item", "id": 19976},
        {"type": "Skin", "id": 5642},
    ],
}


def test_get(client, fake_api):
    fake_api.add("/v2/achievements", ACHIEVEMENT)

    achievement = Achievement.get(client, 1)

    assert achievement.kind is AchievementKind.DEFAULT
    assert achievement.tiers[1].count == 1000
    assert fake_api.last.url.params["id"] == "1"
    assert fake_api.last.url.params["lang"] == "en"


def test_tagged_rewards(client, fake_api):
    fake_api.add("/v2/achievements", ACHIEVEMENT)

    rewards = Achievement.get(client, 1).rewards

    assert [type(r) for r in rewards] == [CoinsReward, ItemReward, MasteryReward, TitleReward]
    assert rewards[0].count == 10000
    assert rewards[2].region == "Tyria"


def test_tagged_bits(client, fake_api):
    fake_api.add("/v2/achievements", ACHIEVEMENT)

    bits = Achievement.get(client, 1).bits

    assert isinstance(bits[0], TextBit)
    assert bits[0].text == "Kill a centaur"
    assert isinstance(bits[1], ItemBit)
    assert isinstance(bits[2], SkinBit)


def test_missing_optional_lists(client, fake_api):
    payload = {k: v for k, v in ACHIEVEMENT.items() if k not in ("rewards", "bits")}
    fake_api.add("/v2/achievements", payload)

    achievement = Achievement.get(client, 1)

    assert achievement.rewards == []
    assert achievement.bits == []
    assert achievement.prerequisites == []


def test_unknown_reward_tag_is_decode_error(client, fake_api):
    fake_api.add("/v2/achievements", {**ACHIEVEMENT, "rewards": [{"type": "Gems", "count": 1}]})

    with pytest.raises(DecodeError):
        Achievement.get(client, 1)


def test_ids(client, fake_api):
    fake_api.add("/v2/achievements", [1, 2, 3])

    assert Achievement.ids(client) == [1, 2, 3]
    assert "id" not in fake_api.last.url.params


def test_get_many(client, fake_api):
    fake_api.add("/v2/achievements", [ACHIEVEMENT, {**ACHIEVEMENT, "id": 2}])

    achievements = Achievement.get_many(client, [1, 2])

    assert [a.id for a in achievements] == [1, 2]
    assert fake_api.last.url.params["ids"] == "1,2"


def test_get_many_rejects_empty_ids(client, fake_api):
    with pytest.raises(ValueError):
        Achievement.get_many(client, [])
    assert fake_api.requests == []


def test_get_many_rejects_string(client):
    with pytest.raises(TypeError):
        Achievement.get_many(client, "1,2")


def test_no_get_all():
    assert not hasattr(Achievement, "get_all")

"""
Tests for settings validation.
"""

import pytest

from gw2api.config import SUPPORTED_LANGUAGES, Settings, get_settings, settings


def test_defaults_are_valid():
    s = Settings(
        base_url="https://api.guildwars2.com",
        timeout=30.0,
        language="en",
        access_token=None,
    )
    assert s.schema_version
    assert not s.has_access_token


def test_global_settings_is_cached():
    assert get_settings() is settings
    assert settings.language in SUPPORTED_LANGUAGES


def test_has_access_token():
    assert Settings(access_token="abc").has_access_token


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": "ftp://api.guildwars2.com"},
        {"timeout": 0},
        {"timeout": -1.5},
        {"language": "jp"},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)


def test_settings_are_frozen():
    s = Settings(language="de")
    with pytest.raises(AttributeError):
        s.language = "fr"

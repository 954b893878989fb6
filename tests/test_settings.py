from pathlib import Path

import pytest
from pydantic import ValidationError

from config.settings import DEFAULT_USERS_URL, AppSettings, WindowSettings


def test_defaults():
    settings = AppSettings()
    assert settings.window.initial_window == 25
    assert settings.window.increment == 25
    assert settings.window.proximity_threshold == 50
    assert settings.data_source.url == DEFAULT_USERS_URL
    assert settings.data_source.path is None


def test_from_env_overrides():
    settings = AppSettings.from_env(
        {
            "USERDIR_DATA_PATH": "users.json",
            "USERDIR_INITIAL_WINDOW": "10",
            "USERDIR_INCREMENT": "5",
            "USERDIR_PROXIMITY_THRESHOLD": "80",
            "USERDIR_LOG_LEVEL": "debug",
        }
    )
    assert settings.data_source.path == Path("users.json")
    assert settings.window == WindowSettings(initial_window=10, increment=5, proximity_threshold=80)
    assert settings.log_level == "DEBUG"


def test_from_env_without_variables_uses_defaults():
    assert AppSettings.from_env({}) == AppSettings()


def test_increment_must_be_positive():
    with pytest.raises(ValidationError):
        WindowSettings(increment=0)

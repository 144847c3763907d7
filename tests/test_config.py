"""Tests for configuration management."""

import json

import pytest
from pydantic import ValidationError

from pomotask_cli.config import Config, ConfigManager, get_config_manager


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.timer.focus_seconds == 10
    assert config.timer.break_seconds == 10
    assert config.timer.tick_seconds == 1.0
    assert config.tasks.description_limit == 99
    assert config.ui.show_lists is True


def test_config_manager_uses_config_dir(isolated_dirs):
    """Config files live under the platformdirs config directory."""
    config_manager = ConfigManager(profile="test")

    assert config_manager.config_file == isolated_dirs / "config" / "test.json"
    assert config_manager.config_dir.is_dir()


def test_config_save_load():
    """Test saving and loading configuration."""
    config_manager = ConfigManager(profile="test")
    config_manager.set("timer.focus_seconds", 1500)
    assert config_manager.get("timer.focus_seconds") == 1500

    # Create a new manager with the same profile
    config_manager2 = ConfigManager(profile="test")
    assert config_manager2.get("timer.focus_seconds") == 1500


def test_set_unknown_key_raises():
    config_manager = ConfigManager(profile="test")

    with pytest.raises(KeyError):
        config_manager.set("timer.nope", 1)


def test_set_invalid_value_raises():
    config_manager = ConfigManager(profile="test")

    with pytest.raises(ValidationError):
        config_manager.set("timer.focus_seconds", -5)


def test_corrupted_config_falls_back_to_defaults():
    config_manager = ConfigManager(profile="test")
    config_manager.config_file.write_text("{not json", encoding="utf-8")

    assert config_manager.load_config() == Config()


def test_reset_single_key():
    config_manager = ConfigManager(profile="test")
    config_manager.set("ui.show_lists", False)

    config_manager.reset("ui.show_lists")

    assert config_manager.get("ui.show_lists") is True
    saved = json.loads(config_manager.config_file.read_text(encoding="utf-8"))
    assert saved["ui"]["show_lists"] is True


def test_reset_everything():
    config_manager = ConfigManager(profile="test")
    config_manager.set("timer.break_seconds", 300)

    config_manager.reset()

    assert config_manager.config == Config()


def test_list_profiles():
    ConfigManager(profile="work").save_config()
    ConfigManager(profile="home").save_config()

    assert ConfigManager().list_profiles() == ["home", "work"]


def test_get_config_manager_caches_per_profile():
    first = get_config_manager("a")

    assert get_config_manager("a") is first
    assert get_config_manager("b") is not first

"""Unit tests for the settings loader."""
import json

import pytest

from core import settings_manager
from core.settings_manager import DEFAULT_SETTINGS, load_settings, save_settings


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "data" / "user_settings.json"
    monkeypatch.setattr(settings_manager, "SETTINGS_FILE", path)
    return path


class TestLoadSettings:
    """Test cases for load_settings."""

    def test_missing_file_gives_defaults(self, settings_file):
        assert load_settings() == DEFAULT_SETTINGS

    def test_defaults_are_not_shared(self, settings_file):
        loaded = load_settings()
        loaded["card_columns"] = 3

        assert DEFAULT_SETTINGS["card_columns"] == 1

    def test_saved_values_are_merged(self, settings_file):
        save_settings({"card_columns": 2, "show_key_display": False})

        assert load_settings() == {"card_columns": 2, "show_key_display": False}

    @pytest.mark.parametrize("raw,expected", [(0, 1), (9, 3), ("2", 2), ("wide", 1)])
    def test_card_columns_are_clamped(self, settings_file, raw, expected):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"card_columns": raw}), encoding="utf-8")

        assert load_settings()["card_columns"] == expected

    def test_unknown_keys_are_dropped(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"events": [{"id": 1}]}), encoding="utf-8")

        assert "events" not in load_settings()

    def test_unreadable_file_falls_back_to_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{not json", encoding="utf-8")

        assert load_settings() == DEFAULT_SETTINGS

    def test_non_object_file_falls_back_to_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("[1, 2]", encoding="utf-8")

        assert load_settings() == DEFAULT_SETTINGS


class TestSaveSettings:
    """Test cases for save_settings."""

    def test_creates_parent_directory(self, settings_file):
        save_settings({"card_columns": 1, "show_key_display": True})

        assert json.loads(settings_file.read_text(encoding="utf-8"))["card_columns"] == 1

import json
import pytest
from unittest.mock import MagicMock
from commanddeck.core.config import ConfigManager

def test_config_manager_defaults(tmp_path):
    config = ConfigManager(str(tmp_path / "settings.json"))
    assert config.data.general.debug_mode is True
    assert config.data.logging.file_logging is False
    assert config.data.demo.party_volume == 11
    assert config.data.log_dir is None

def test_missing_file_is_written_with_defaults(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    ConfigManager(str(path))

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["demo"]["party_volume"] == 11

def test_config_reactivity(tmp_path):
    path = tmp_path / "settings.json"
    config = ConfigManager(str(path))
    observer = MagicMock()
    config.on_changed.connect(observer)

    config.update("demo", "party_volume", 7)

    assert config.get("demo", "party_volume") == 7
    observer.assert_called_once_with("demo", "party_volume", 7)
    assert json.loads(path.read_text(encoding="utf-8"))["demo"]["party_volume"] == 7

def test_update_validates_values(tmp_path):
    config = ConfigManager(str(tmp_path / "settings.json"))

    with pytest.raises(ValueError):
        config.update("demo", "party_volume", -1)
    with pytest.raises(ValueError):
        config.update("general", "debug_mode", "not-a-bool")

    assert config.data.demo.party_volume == 11

def test_update_rejects_unknown_section_and_key(tmp_path):
    config = ConfigManager(str(tmp_path / "settings.json"))
    with pytest.raises(ValueError):
        config.update("mongo", "host", "localhost")
    with pytest.raises(ValueError):
        config.update("general", "theme", "dark")

def test_load_existing_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "general": {"debug_mode": False},
        "logging": {"file_logging": True, "log_dir": "var/log"},
    }), encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.data.general.debug_mode is False
    assert config.data.log_dir == "var/log"
    assert config.data.demo.party_volume == 11

def test_load_toml(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text('[demo]\nparty_volume = 5\n', encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.data.demo.party_volume == 5

def test_invalid_file_falls_back_to_defaults(tmp_path, log_messages):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.data.demo.party_volume == 11
    assert any("Failed to load config" in m for m in log_messages)
    # rewritten with defaults
    assert json.loads(path.read_text(encoding="utf-8"))["general"]["debug_mode"] is True

"""Tests for configuration loading."""

import json

import pytest

from categorycore.config import Config, ConfigManager, ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CATEGORYCORE_LOG_LEVEL",
        "CATEGORYCORE_LOG_FORMAT",
        "CATEGORYCORE_LOG_FILE",
        "CATEGORYCORE_AUDIT_ENABLED",
        "CATEGORYCORE_ERROR_HISTORY",
    ):
        monkeypatch.delenv(name, raising=False)


class TestConfigManager:
    """Test configuration loading and validation."""

    def test_defaults(self):
        config = ConfigManager().load()

        assert isinstance(config, Config)
        assert config.logging.level == "INFO"
        assert config.logging.format == "json"
        assert config.logging.file is None
        assert config.audit.enabled is True
        assert config.errors.max_history_size == 1000

    def test_load_is_cached(self):
        manager = ConfigManager()

        assert manager.load() is manager.load()
        assert manager.config is manager.load()

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "debug"}, "audit": {"enabled": False}}))

        config = ConfigManager(str(path)).load()

        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"
        assert config.audit.enabled is False

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "absent.json")).load()

        assert config.logging.level == "INFO"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))
        monkeypatch.setenv("CATEGORYCORE_LOG_LEVEL", "warning")
        monkeypatch.setenv("CATEGORYCORE_LOG_FORMAT", "TEXT")
        monkeypatch.setenv("CATEGORYCORE_LOG_FILE", "/tmp/categories.log")
        monkeypatch.setenv("CATEGORYCORE_AUDIT_ENABLED", "no")
        monkeypatch.setenv("CATEGORYCORE_ERROR_HISTORY", "50")

        config = ConfigManager(str(path)).load()

        assert config.logging.level == "WARNING"
        assert config.logging.format == "text"
        assert config.logging.file == "/tmp/categories.log"
        assert config.audit.enabled is False
        assert config.errors.max_history_size == 50

    def test_defaults_not_mutated(self, monkeypatch):
        monkeypatch.setenv("CATEGORYCORE_LOG_LEVEL", "ERROR")
        ConfigManager().load()

        assert ConfigManager.DEFAULT_CONFIG["logging"]["level"] == "INFO"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(str(path)).load()

        assert "Invalid JSON" in str(exc_info.value)

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("CATEGORYCORE_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager().load()

        assert exc_info.value.config_key == "logging.level"

    def test_non_integer_history(self, monkeypatch):
        monkeypatch.setenv("CATEGORYCORE_ERROR_HISTORY", "lots")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager().load()

        assert exc_info.value.config_key == "errors.max_history_size"

    def test_history_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("CATEGORYCORE_ERROR_HISTORY", "0")

        with pytest.raises(ConfigurationError):
            ConfigManager().load()

#!/usr/bin/env python3
"""
Tests for configuration management module.
"""

import json
import pytest
from unittest.mock import patch

from zipcast.config import (
    DEFAULTS,
    Config,
    ConfigError,
    ConfigManager,
    get_config,
    get_config_manager,
)


# ============================================================================
# Config Model Tests
# ============================================================================

class TestConfig:
    """Tests for Config model."""

    def test_create_empty_config(self):
        """Test creating config with all defaults."""
        cfg = Config()
        assert cfg.default_zipcode is None
        assert cfg.default_days is None
        assert cfg.geocode_url is None
        assert cfg.forecast_url is None
        assert cfg.timezone is None
        assert cfg.timeout is None

    def test_get_with_value(self):
        """Test get method when value exists."""
        cfg = Config(default_zipcode="10001")
        assert cfg.get("default_zipcode") == "10001"

    def test_get_with_none_falls_back_to_defaults(self):
        """Test get method when value is None falls back to DEFAULTS."""
        cfg = Config()
        assert cfg.get("default_zipcode") == "02148"
        assert cfg.get("default_days") == 1
        assert cfg.get("timezone") == "America/New_York"
        assert cfg.get("timeout") == DEFAULTS["timeout"]

    def test_get_unknown_key(self):
        """Test get with unknown key returns default."""
        cfg = Config()
        assert cfg.get("unknown_key") is None
        assert cfg.get("unknown_key", "default") == "default"

    def test_require_returns_value(self):
        cfg = Config(forecast_url="http://localhost:8080/v1/forecast")
        assert cfg.require("forecast_url") == "http://localhost:8080/v1/forecast"
        assert cfg.require("geocode_url") == DEFAULTS["geocode_url"]

    def test_require_missing_raises(self):
        """Test require fails loudly for values with no default."""
        with pytest.raises(ConfigError, match="api_key"):
            Config().require("api_key")

    def test_extra_keys_ignored(self):
        cfg = Config.model_validate({"_comment": "hi", "default_days": 3})
        assert cfg.default_days == 3


# ============================================================================
# ConfigManager Tests
# ============================================================================

class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.fixture
    def temp_config_dir(self, tmp_path):
        """Create temporary config directory and point ConfigManager at it."""
        config_dir = tmp_path / ".zipcast"
        config_dir.mkdir()
        config_file = config_dir / "config.json"
        with patch.object(ConfigManager, "CONFIG_DIR", config_dir):
            with patch.object(ConfigManager, "CONFIG_FILE", config_file):
                yield config_dir

    def test_load_nonexistent_config(self, temp_config_dir):
        """Test loading config when file doesn't exist (without creating)."""
        config_file = temp_config_dir / "config.json"
        cfg = ConfigManager().load(create_if_missing=False)
        assert cfg.default_zipcode is None
        assert not config_file.exists()

    def test_load_creates_default_config(self, temp_config_dir):
        """Test that load creates default config file if missing."""
        config_file = temp_config_dir / "config.json"
        ConfigManager().load(create_if_missing=True)
        assert config_file.exists()

        data = json.loads(config_file.read_text())
        assert data["default_zipcode"] == "02148"
        assert data["default_days"] == 1

    def test_load_invalid_json_uses_defaults(self, temp_config_dir):
        """Test that a corrupt config file does not break loading."""
        (temp_config_dir / "config.json").write_text("{not json")
        cfg = ConfigManager().load()
        assert cfg == Config()

    def test_save_and_load_config(self, temp_config_dir):
        """Test saving and loading config."""
        mgr = ConfigManager()
        mgr.save(Config(default_zipcode="10001", timeout=2.5))

        loaded = ConfigManager().load()
        assert loaded.default_zipcode == "10001"
        assert loaded.timeout == 2.5

    def test_save_only_non_none_values(self, temp_config_dir):
        """Test that save only writes non-None values."""
        config_file = temp_config_dir / "config.json"
        ConfigManager().save(Config(default_days=3))

        data = json.loads(config_file.read_text())
        assert data == {"default_days": 3}

    def test_set_preserves_other_values(self, temp_config_dir):
        """Test that setting one value preserves other existing values."""
        ConfigManager().set("default_days", 2)
        ConfigManager().set("default_zipcode", "94103")

        final = ConfigManager().load(create_if_missing=False)
        assert final.default_days == 2
        assert final.default_zipcode == "94103"
        assert final.timezone == "America/New_York"

    def test_set_unknown_key_raises(self, temp_config_dir):
        """Test that setting unknown key raises ConfigError."""
        with pytest.raises(ConfigError, match="Unknown config key"):
            ConfigManager().set("unknown_key", "value")

    def test_unset_value(self, temp_config_dir):
        """Test unsetting a config value."""
        mgr = ConfigManager()
        mgr.set("default_days", 5)
        mgr.unset("default_days")

        loaded = ConfigManager().load()
        assert loaded.default_days is None
        assert loaded.get("default_days") == 1

    def test_list_settings_only_customized(self, temp_config_dir):
        mgr = ConfigManager()
        mgr.set("default_zipcode", "10001")
        mgr._config = None
        assert mgr.list_settings() == {"default_zipcode": "10001"}

    def test_reset(self, temp_config_dir):
        mgr = ConfigManager()
        mgr.set("default_days", 4)
        mgr.reset()
        assert not (temp_config_dir / "config.json").exists()
        assert mgr.config == Config()


# ============================================================================
# Singleton Tests
# ============================================================================

class TestSingleton:
    """Tests for module-level accessors."""

    def test_get_config_manager_is_singleton(self):
        assert get_config_manager() is get_config_manager()

    def test_get_config_uses_manager(self):
        with patch("zipcast.config.config._manager") as mock_manager:
            mock_manager.config = Config(default_days=7)
            assert get_config().default_days == 7

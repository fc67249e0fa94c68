"""Tests for configuration manager."""

from pathlib import Path

import pytest  # type: ignore[import-not-found]
import yaml  # type: ignore[import-untyped]

from minute_share.core.config import ConfigManager


class TestConfigManager:
    """Test ConfigManager."""

    def test_initialization_creates_default_config(self, temp_config_path: Path) -> None:
        """Test that initialization creates default configuration."""
        assert not temp_config_path.exists()

        config = ConfigManager(temp_config_path)

        assert temp_config_path.exists()
        assert config.get("version") == "1.0"
        assert config.get("settings.default_base_amount") == 10000
        assert config.get("api.cors.origins") == ["*"]
        assert config.get("logging.level") == "INFO"

    def test_load_existing_config(self, temp_config_path: Path) -> None:
        """Test loading existing configuration."""
        config_data = {
            "version": "1.0",
            "settings": {"default_base_amount": 2500},
            "api": {"port": 9000},
        }
        with open(temp_config_path, "w") as f:
            yaml.dump(config_data, f)

        config = ConfigManager(temp_config_path)

        assert config.get("settings.default_base_amount") == 2500
        assert config.get("api.port") == 9000

    def test_merge_with_defaults(self, temp_config_path: Path) -> None:
        """Test that partial config is merged with defaults."""
        with open(temp_config_path, "w") as f:
            yaml.dump({"version": "1.0", "api": {"host": "0.0.0.0"}}, f)

        config = ConfigManager(temp_config_path)

        assert config.get("api.host") == "0.0.0.0"
        assert config.get("api.port") == 8000
        assert config.get("api.cors.enabled") is True

    def test_get_missing_key_returns_default(self, temp_config_path: Path) -> None:
        """Test default for unknown keys."""
        config = ConfigManager(temp_config_path)

        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"
        assert config.get("version.too.deep", 1) == 1

    def test_set_persists_value(self, temp_config_path: Path) -> None:
        """Test setting a value and reloading it."""
        config = ConfigManager(temp_config_path)
        config.set("api.port", 9100)

        reloaded = ConfigManager(temp_config_path)
        assert reloaded.get("api.port") == 9100

    def test_set_invalid_value_is_rejected(self, temp_config_path: Path) -> None:
        """Test that invalid values are not kept."""
        config = ConfigManager(temp_config_path)

        with pytest.raises(ValueError, match="Invalid configuration"):
            config.set("settings.default_base_amount", -5)

        assert config.get("settings.default_base_amount") == 10000

    def test_set_invalid_log_level(self, temp_config_path: Path) -> None:
        """Test log level validation."""
        config = ConfigManager(temp_config_path)

        with pytest.raises(ValueError):
            config.set("logging.level", "LOUD")

    def test_invalid_file_is_backed_up(self, temp_config_path: Path) -> None:
        """Test recovery from an invalid config file."""
        with open(temp_config_path, "w") as f:
            yaml.dump({"version": "1.0", "api": {"port": "not-a-port"}}, f)

        with pytest.raises(ValueError, match="backed up"):
            ConfigManager(temp_config_path)

        assert temp_config_path.with_suffix(".yml.backup").exists()
        assert ConfigManager(temp_config_path).get("api.port") == 8000

    def test_reset(self, temp_config_path: Path) -> None:
        """Test resetting to defaults."""
        config = ConfigManager(temp_config_path)
        config.set("api.port", 9100)

        config.reset()

        assert config.get("api.port") == 8000

    def test_get_all_keys(self, temp_config_path: Path) -> None:
        """Test listing keys in dot notation."""
        config = ConfigManager(temp_config_path)
        keys = config.get_all_keys()

        assert "version" in keys
        assert "settings.default_base_amount" in keys
        assert "api.cors.origins" in keys
        assert "api.cors" not in keys

    def test_to_dict_is_a_copy(self, temp_config_path: Path) -> None:
        """Test that to_dict cannot change the config."""
        config = ConfigManager(temp_config_path)
        data = config.to_dict()
        data["api"]["port"] = 1

        assert config.get("api.port") == 8000

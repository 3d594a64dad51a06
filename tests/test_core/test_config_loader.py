"""
Tests for the configuration loader module.

Tests config loading, parsing, path resolution, and error handling.
"""

import json
import pytest
from pathlib import Path

from search_highlighting.core.config_loader import (
    Config,
    PathsConfig,
    get_config,
    reload_config,
)
from search_highlighting.core.exceptions import ConfigurationError


class TestPathsConfig:
    """Tests for PathsConfig dataclass."""

    def test_paths_config_creation(self, temp_dir: Path):
        """Test creating PathsConfig with a logs directory."""
        config = PathsConfig(logs_directory=temp_dir / "logs")

        assert config.logs_directory == temp_dir / "logs"


class TestConfigFromFile:
    """Tests for loading config from file."""

    def test_load_valid_config(self, temp_config: Path, reset_config_singleton):
        """Test loading a valid configuration file."""
        config = Config.from_file(temp_config)

        assert config.highlighting.max_text_length == 5000
        assert config.highlighting.max_terms == 8
        assert config.highlighting.trailing_context == 20
        assert config.gui.page_title == "Test Highlighting"
        assert config.gui.show_performance is False

    def test_load_missing_config_raises_error(self, temp_dir: Path):
        """Test that loading non-existent config raises ConfigurationError."""
        fake_path = temp_dir / "nonexistent" / "config.json"

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(fake_path)

        assert "not found" in str(exc_info.value.message).lower()

    def test_load_invalid_json_raises_error(self, temp_dir: Path):
        """Test that invalid JSON raises ConfigurationError."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text("{ invalid json }")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert "invalid json" in str(exc_info.value.message).lower()

    def test_non_positive_limit_raises_error(self, temp_dir: Path):
        """Test that a zero or negative limit is rejected."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"highlighting": {"max_terms": 0}}))

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert "max_terms" in exc_info.value.message

    @pytest.mark.parametrize("section,values,key", [
        ("highlighting", {"trailing_context": -1}, "trailing_context"),
        ("highlighting", {"max_text_length": "big"}, "max_text_length"),
        ("highlighting", {"min_term_length": True}, "min_term_length"),
        ("gui", {"default_field": "sidebar"}, "default_field"),
    ])
    def test_invalid_values_rejected(self, temp_dir: Path, section, values, key):
        """Test that unusable settings raise ConfigurationError naming the key."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({section: values}))

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert key in exc_info.value.message

    def test_zero_trailing_context_allowed(self, temp_dir: Path):
        """Test that truncation may use no trailing context."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"highlighting": {"trailing_context": 0}}))

        config = Config.from_file(config_path)

        assert config.highlighting.trailing_context == 0

    def test_config_resolves_relative_paths(self, temp_dir: Path):
        """Test that relative paths are resolved against the project root."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {"logs_directory": "output/logs"}}))

        config = Config.from_file(config_path)

        assert config.paths.logs_directory.is_absolute()
        assert config.paths.logs_directory == temp_dir / "output" / "logs"

    def test_config_default_values(self, temp_dir: Path, reset_config_singleton):
        """Test that missing config values get defaults."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {}}))

        config = Config.from_file(config_path)

        assert config.highlighting.max_text_length == 100_000
        assert config.highlighting.max_query_length == 500
        assert config.highlighting.min_term_length == 2
        assert config.logging.level == "INFO"
        assert config.gui.default_field == "content"


class TestGetConfig:
    """Tests for the get_config singleton function."""

    def test_get_config_returns_same_instance(self, temp_config: Path, reset_config_singleton):
        """Test that get_config returns singleton instance."""
        config1 = get_config(temp_config)
        config2 = get_config()

        assert config1 is config2

    def test_reload_config_creates_new_instance(self, temp_config: Path, reset_config_singleton):
        """Test that reload_config creates a fresh instance."""
        _config1 = get_config(temp_config)  # noqa: F841

        with open(temp_config, "r") as f:
            data = json.load(f)
        data["highlighting"]["max_terms"] = 4
        with open(temp_config, "w") as f:
            json.dump(data, f)

        config2 = reload_config(temp_config)

        assert config2.highlighting.max_terms == 4

    def test_missing_config_file_raises(self, temp_dir: Path, reset_config_singleton, monkeypatch):
        """Test that searching from a directory without config fails cleanly."""
        monkeypatch.chdir(temp_dir)

        with pytest.raises(ConfigurationError):
            get_config()

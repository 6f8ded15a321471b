"""Tests for the config loader with JSON and YAML support."""

import json
import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

import wavecrest.core.config.loader as config_loader
from wavecrest.core.config.models import AppConfig


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "output_dir": "build/waves",
        "logging": {"level": "DEBUG", "format": "%(message)s"},
        "geometry": {"viewbox_width": 1000, "default_height": 200, "seed": 7},
    }


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch):
    monkeypatch.delenv(config_loader.LOG_LEVEL_ENV_VAR, raising=False)


def test_detect_format_json():
    """Test format detection for JSON files."""
    assert config_loader.detect_format("config.json") == "json"
    assert config_loader.detect_format(Path("config.JSON")) == "json"


def test_detect_format_yaml():
    """Test format detection for YAML files."""
    assert config_loader.detect_format("config.yaml") == "yaml"
    assert config_loader.detect_format(Path("config.yml")) == "yaml"


def test_detect_format_invalid():
    """Test format detection for invalid extensions."""
    with pytest.raises(ValueError, match="Unsupported config format"):
        config_loader.detect_format("config.txt")


def test_load_config_json(tmp_path, sample_config_data):
    """Test loading JSON config."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config == sample_config_data


def test_load_config_yaml(tmp_path, sample_config_data):
    """Test loading YAML config."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config == sample_config_data


def test_load_config_file_not_found():
    """Test loading non-existent config file."""
    with pytest.raises(FileNotFoundError):
        config_loader.load_config("nonexistent.json")


def test_load_config_invalid_json(tmp_path):
    """Test loading invalid JSON."""
    config_file = tmp_path / "invalid.json"
    config_file.write_text("{ invalid json }")

    with pytest.raises(ValueError, match="Invalid JSON"):
        config_loader.load_config(config_file)


def test_load_config_invalid_yaml(tmp_path):
    """Test loading invalid YAML."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text("invalid: yaml: content: [")

    with pytest.raises(ValueError, match="Invalid YAML"):
        config_loader.load_config(config_file)


def test_load_config_empty_yaml(tmp_path):
    """Empty YAML gives an empty dict."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert config_loader.load_config(config_file) == {}


def test_load_config_yaml_list_rejected(tmp_path):
    """Top-level YAML must be a mapping."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="Expected a mapping"):
        config_loader.load_config(config_file)


def test_load_config_yaml_with_comments(tmp_path):
    """Test loading YAML with comments."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
# Geometry defaults
geometry:
  default_height: 150  # px
  simplify_epsilon: 2.5

logging:
  level: WARNING
"""
    )

    config = config_loader.load_config(config_file)

    assert config["geometry"]["default_height"] == 150
    assert config["logging"]["level"] == "WARNING"


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_explicit_path(self, tmp_path, sample_config_data):
        config_file = tmp_path / "wavecrest.yaml"
        config_file.write_text(yaml.dump(sample_config_data))

        config = config_loader.load_app_config(config_file)

        assert config.output_dir == "build/waves"
        assert config.geometry.viewbox_width == 1000
        assert config.geometry.seed == 7
        assert config.geometry.sample_count == 20
        assert config.logging.level == "DEBUG"

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            config_loader.load_app_config(tmp_path / "missing.json")

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert config_loader.load_app_config() == AppConfig()
        assert AppConfig().output_dir == "."

    def test_default_file_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        Path("wavecrest.json").write_text(json.dumps({"output_dir": "out"}))

        assert config_loader.load_app_config().output_dir == "out"

    def test_unknown_keys_ignored(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"future_option": True}))

        assert config_loader.load_app_config(config_file) == AppConfig()

    def test_invalid_values_raise(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"geometry": {"sample_count": 1}}))

        with pytest.raises(ValidationError):
            config_loader.load_app_config(config_file)

    def test_env_overrides_log_level(self, tmp_path, monkeypatch, sample_config_data):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(sample_config_data))
        monkeypatch.setenv(config_loader.LOG_LEVEL_ENV_VAR, "error")

        config = config_loader.load_app_config(config_file)

        assert config.logging.level == "ERROR"
        assert config.logging.format == "%(message)s"

    def test_invalid_env_log_level_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(config_loader.LOG_LEVEL_ENV_VAR, "loud")

        with pytest.raises(ValidationError):
            config_loader.load_app_config()


class TestLoadOrDefault:
    """Tests for ConfigBase.load_or_default."""

    def test_loads_given_path(self, tmp_path):
        config_file = tmp_path / "app.yaml"
        config_file.write_text("output_dir: svgs\n")

        assert AppConfig.load_or_default(config_file).output_dir == "svgs"

    def test_default_path_must_exist(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(FileNotFoundError):
            AppConfig.load_or_default()


def test_configure_logging_from_config(tmp_path):
    """configure_logging applies the config's level and file."""
    log_file = tmp_path / "wavecrest.log"
    config = AppConfig.model_validate(
        {"logging": {"level": "WARNING", "filename": str(log_file), "format": "%(message)s"}}
    )

    config_loader.configure_logging(config)
    logging.getLogger("test.config").warning("from config")

    assert logging.getLogger().level == logging.WARNING
    assert log_file.read_text().strip() == "from config"

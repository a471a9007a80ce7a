"""
Runtime Configuration Unit Tests
Tests for core/config/runtime.py

Tests:
- Defaults
- YAML loading and validation
- Environment overrides take precedence over file settings
"""
import pytest

from core.config.runtime import (
    RuntimeConfig,
    get_default_config_template,
    load_config,
)
from core.schemas.errors import ConfigException, ErrorCodes


class TestDefaults:
    """Tests for default configuration."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.hash_algorithm == "sha256"
        assert config.logging.level == "INFO"
        assert config.logging.file is None
        assert config.display.hex_prefix is False

    def test_unsupported_hash_algorithm_rejected(self):
        with pytest.raises(ConfigException, match="Unsupported hash algorithm") as exc_info:
            RuntimeConfig(hash_algorithm="md5")

        assert exc_info.value.code == ErrorCodes.CONFIG_ERROR
        assert exc_info.value.details["field_path"] == "hash_algorithm"

    def test_hash_algorithm_case_insensitive(self):
        assert RuntimeConfig(hash_algorithm="SHA256").hash_algorithm == "sha256"

    def test_to_dict(self):
        data = RuntimeConfig().to_dict()

        assert data == {
            "hash_algorithm": "sha256",
            "logging": {"level": "INFO", "file": None},
            "display": {"hex_prefix": False},
        }


class TestFromDict:
    """Tests for RuntimeConfig.from_dict()."""

    def test_partial_dict(self):
        config = RuntimeConfig.from_dict({"display": {"hex_prefix": True}})

        assert config.display.hex_prefix is True
        assert config.logging.level == "INFO"

    def test_log_level_normalized(self):
        config = RuntimeConfig.from_dict({"logging": {"level": "debug"}})

        assert config.logging.level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ConfigException, match="log level"):
            RuntimeConfig.from_dict({"logging": {"level": "LOUD"}})

    def test_unknown_section_key_rejected(self):
        with pytest.raises(ConfigException, match="Invalid configuration section"):
            RuntimeConfig.from_dict({"display": {"colour": "red"}})


class TestFromYaml:
    """Tests for RuntimeConfig.from_yaml()."""

    def test_template_loads(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text(get_default_config_template())

        config = RuntimeConfig.from_yaml(path)

        assert config.to_dict() == RuntimeConfig().to_dict()

    def test_values_loaded(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("display:\n  hex_prefix: true\nlogging:\n  level: WARNING\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.display.hex_prefix is True
        assert config.logging.level == "WARNING"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path).to_dict() == RuntimeConfig().to_dict()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigException, match="mapping"):
            RuntimeConfig.from_yaml(path)

    def test_invalid_yaml_rejected(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("display: [unclosed\n")

        with pytest.raises(ConfigException, match="Invalid YAML"):
            RuntimeConfig.from_yaml(path)


class TestEnvOverrides:
    """Environment variables override defaults and files."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MERKLE_HEX_PREFIX", "true")
        monkeypatch.setenv("MERKLE_LOG_LEVEL", "ERROR")

        config = RuntimeConfig.from_env()

        assert config.display.hex_prefix is True
        assert config.logging.level == "ERROR"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "merkle.yaml"
        path.write_text("display:\n  hex_prefix: true\nlogging:\n  level: DEBUG\n")
        monkeypatch.setenv("MERKLE_HEX_PREFIX", "no")

        config = load_config(path)

        assert config.display.hex_prefix is False
        assert config.logging.level == "DEBUG"

    def test_env_log_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MERKLE_LOG_FILE", str(tmp_path / "merkle.log"))

        config = RuntimeConfig().with_env_overrides()

        assert config.logging.file == str(tmp_path / "merkle.log")

    def test_env_hash_algorithm_validated(self, monkeypatch):
        monkeypatch.setenv("MERKLE_HASH_ALGORITHM", "sha1")

        with pytest.raises(ConfigException):
            RuntimeConfig().with_env_overrides()

    def test_no_overrides_returns_same_config(self):
        config = RuntimeConfig()

        assert config.with_env_overrides() is config


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_without_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "core.config.runtime.DEFAULT_CONFIG_PATHS",
            (tmp_path / "merkle.yaml",),
        )

        assert load_config().to_dict() == RuntimeConfig().to_dict()

    def test_default_location_used(self, tmp_path, monkeypatch):
        path = tmp_path / "merkle.yaml"
        path.write_text("display:\n  hex_prefix: true\n")
        monkeypatch.setattr("core.config.runtime.DEFAULT_CONFIG_PATHS", (path,))

        assert load_config().display.hex_prefix is True

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

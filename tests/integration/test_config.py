#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading from environment variables and validation.
"""

import pytest

from seedbank.core.config import Environment, get_config, reload_config


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_test_environment_defaults(self, tmp_path):
        """Test defaults derived from the data directory."""
        config = get_config()

        assert config.environment == Environment.TEST
        assert config.data_dir == tmp_path / "seedbank_data"
        assert config.persister.source_dir == config.data_dir / "prod"
        assert config.persister.output_dir == config.data_dir / "integ"
        assert config.persister.source_suffix == ""
        assert config.persister.persisted_suffix == "_prod"
        assert config.persister.integ_properties is None
        assert config.obfuscation.remap_salt is None

    def test_directories_created(self):
        """Test data, source and output directories exist after loading."""
        config = get_config()

        assert config.data_dir.is_dir()
        assert config.persister.source_dir.is_dir()
        assert config.persister.output_dir.is_dir()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """Test persister and obfuscation settings are read from the environment."""
        props = tmp_path / "persister_integ.properties"
        monkeypatch.setenv("SEEDBANK_SOURCE_DIR", str(tmp_path / "raw"))
        monkeypatch.setenv("SEEDBANK_SOURCE_SUFFIX", "_raw")
        monkeypatch.setenv("SEEDBANK_PERSISTED_SUFFIX", "_fixture")
        monkeypatch.setenv("SEEDBANK_INTEG_PROPERTIES", str(props))
        monkeypatch.setenv("SEEDBANK_REMAP_SALT", "pepper")

        config = reload_config()

        assert config.persister.source_dir == tmp_path / "raw"
        assert config.persister.source_suffix == "_raw"
        assert config.persister.persisted_suffix == "_fixture"
        assert config.persister.integ_properties == props
        assert config.obfuscation.remap_salt == "pepper"

    def test_reload_config_returns_fresh_instance(self, monkeypatch):
        """Test reload_config() picks up changed environment variables."""
        first = get_config()
        assert get_config() is first

        monkeypatch.setenv("LOG_LEVEL", "debug")
        reloaded = reload_config()

        assert reloaded is not first
        assert reloaded.log_level == "DEBUG"


@pytest.mark.integration
class TestConfigValidation:
    """Test configuration validation errors."""

    def test_empty_persisted_suffix_rejected(self, monkeypatch):
        """Test an empty suffix fails validation."""
        monkeypatch.setenv("SEEDBANK_PERSISTED_SUFFIX", "")

        with pytest.raises(ValueError, match="SEEDBANK_PERSISTED_SUFFIX must not be empty"):
            get_config()

    def test_invalid_log_level_rejected(self, monkeypatch):
        """Test an unknown log level fails validation."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValueError, match="LOG_LEVEL must be one of"):
            get_config()


@pytest.mark.integration
class TestConfigSerialization:
    """Test to_dict() output."""

    def test_salt_redacted(self, monkeypatch):
        """Test the remap salt never appears in to_dict() by default."""
        monkeypatch.setenv("SEEDBANK_REMAP_SALT", "pepper")
        config = get_config()

        assert config.to_dict()["obfuscation"]["remap_salt"] == "***REDACTED***"
        assert config.to_dict(include_sensitive=True)["obfuscation"]["remap_salt"] == "pepper"

    def test_unset_salt_shown_as_none(self):
        """Test an unset salt is reported as None rather than redacted."""
        assert get_config().to_dict()["obfuscation"]["remap_salt"] is None

    def test_paths_and_enums_serialized(self):
        """Test Paths and the environment enum become strings."""
        result = get_config().to_dict()

        assert result["environment"] == "test"
        assert isinstance(result["data_dir"], str)
        assert isinstance(result["persister"]["output_dir"], str)

"""Tests for configuration loading."""

import os
import tempfile

import pytest
import yaml

from matchai.config import AppConfig, is_ai_configured, load_config, validate_config


@pytest.fixture
def config_file():
    """Create a temporary config file."""
    config_data = {
        "profiles": {"path": "/path/to/profiles.yaml"},
        "ai": {"model": "gemini-1.5-pro", "timeout_seconds": 10},
        "matching": {"match_threshold": 65, "normalization": "CaseFold", "max_workers": 8},
        "api_keys": {"google_ai_api_key": "file_key"},
        "logging": {"level": "debug", "loggers": {"matchai.ai": "warning"}},
    }

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(config_data, f)
        path = f.name

    yield path
    os.unlink(path)


@pytest.fixture(autouse=True)
def clear_key_env(monkeypatch):
    monkeypatch.delenv("GOOGLE_AI_API_KEY", raising=False)
    monkeypatch.delenv("NEXT_PUBLIC_GOOGLE_AI_API_KEY", raising=False)


class TestLoadConfig:
    def test_loads_valid_config(self, config_file):
        config = load_config(config_file)
        assert config.profiles.path == "/path/to/profiles.yaml"
        assert config.ai.model == "gemini-1.5-pro"
        assert config.ai.timeout_seconds == 10.0
        assert config.matching.match_threshold == 65
        assert config.matching.normalization == "casefold"
        assert config.matching.max_workers == 8
        assert config.api_keys.google_ai_api_key == "file_key"
        assert config.logging.level == "DEBUG"
        assert config.logging.loggers == {"matchai.ai": "WARNING"}

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent.yaml")

    def test_defaults_applied(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            path = f.name

        try:
            config = load_config(path)
            assert config.ai.enabled is True
            assert config.ai.model == "gemini-1.5-flash"
            assert config.matching.match_threshold == 60
            assert config.matching.normalization == "exact"
            assert config.matching.strict_complementary is False
            assert config.data_dir == "data"
            assert config.logging.level == "INFO"
            assert config.logging.loggers == {}
        finally:
            os.unlink(path)

    def test_env_key_takes_precedence(self, config_file, monkeypatch):
        monkeypatch.setenv("GOOGLE_AI_API_KEY", "env_key")
        assert load_config(config_file).api_keys.google_ai_api_key == "env_key"

    def test_public_env_key(self, config_file, monkeypatch):
        monkeypatch.setenv("NEXT_PUBLIC_GOOGLE_AI_API_KEY", "public_key")
        assert load_config(config_file).api_keys.google_ai_api_key == "public_key"


class TestIsAIConfigured:
    def test_missing_key(self):
        assert not is_ai_configured(AppConfig())

    @pytest.mark.parametrize("key", ["demo-key", "your_google_ai_api_key", "   "])
    def test_placeholder_keys(self, key):
        config = AppConfig()
        config.api_keys.google_ai_api_key = key
        assert not is_ai_configured(config)

    def test_disabled(self):
        config = AppConfig()
        config.api_keys.google_ai_api_key = "real"
        config.ai.enabled = False
        assert not is_ai_configured(config)

    def test_configured(self):
        config = AppConfig()
        config.api_keys.google_ai_api_key = "real"
        assert is_ai_configured(config)


class TestValidateConfig:
    def test_no_profile_store_warns(self):
        warnings = validate_config(AppConfig())
        assert any("profile store" in w.lower() for w in warnings)

    def test_ai_without_key_warns(self):
        config = AppConfig()
        config.profiles.path = "profiles.yaml"
        warnings = validate_config(config)
        assert any("api key" in w.lower() for w in warnings)

    def test_ai_disabled_no_key_warning(self):
        config = AppConfig()
        config.profiles.path = "profiles.yaml"
        config.ai.enabled = False
        assert validate_config(config) == []

    def test_unknown_normalization_warns(self):
        config = AppConfig()
        config.matching.normalization = "stemmed"
        warnings = validate_config(config)
        assert any("normalization" in w.lower() for w in warnings)

    def test_unknown_log_level_warns(self):
        config = AppConfig()
        config.profiles.path = "profiles.yaml"
        config.ai.enabled = False
        config.logging.loggers = {"matchai.ai": "CHATTY"}
        warnings = validate_config(config)
        assert len(warnings) == 1
        assert "matchai.ai" in warnings[0]

    def test_valid_config_no_warnings(self, config_file):
        assert validate_config(load_config(config_file)) == []

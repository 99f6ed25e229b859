"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from mapconfirm.config import MapConfirmConfig, get_config, reset_config


class TestMapConfirmConfig:
    """Test MapConfirmConfig."""

    def test_defaults(self):
        """Defaults apply with no environment set."""
        config = MapConfirmConfig()
        assert config.help_key == "?"
        assert config.invalid_key_pause == 1.0
        assert config.log_level == "WARNING"
        assert config.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("MAPCONFIRM_HELP_KEY", "h")
        monkeypatch.setenv("MAPCONFIRM_INVALID_KEY_PAUSE", "0.25")
        monkeypatch.setenv("MAPCONFIRM_LOG_LEVEL", "debug")
        monkeypatch.setenv("MAPCONFIRM_LOG_FORMAT", "JSON")

        config = MapConfirmConfig()
        assert config.help_key == "h"
        assert config.invalid_key_pause == 0.25
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize("key", ["", "hh", "y", "q", " "])
    def test_invalid_help_key(self, monkeypatch, key):
        """Help key must be one free character."""
        monkeypatch.setenv("MAPCONFIRM_HELP_KEY", key)
        with pytest.raises(ValidationError):
            MapConfirmConfig()

    def test_negative_pause(self, monkeypatch):
        """Pause cannot be negative."""
        monkeypatch.setenv("MAPCONFIRM_INVALID_KEY_PAUSE", "-1")
        with pytest.raises(ValidationError):
            MapConfirmConfig()

    def test_invalid_log_level(self, monkeypatch):
        """Unknown log levels are rejected."""
        monkeypatch.setenv("MAPCONFIRM_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            MapConfirmConfig()


class TestGetConfig:
    """Test the cached global config."""

    def test_cached(self):
        """get_config returns the same instance until reset."""
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first

"""Tests for Settings.from_env."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from stockwatch.config import DEFAULT_UPSTREAM_URL, Settings


class TestSettings:
    """Environment parsing."""

    def test_defaults(self):
        """Test the defaults with an empty environment."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        assert settings.data_dir == Path("data")
        assert settings.quote_max_age == 3600.0
        assert settings.quote_source == "pasardana"
        assert settings.upstream_url == DEFAULT_UPSTREAM_URL
        assert settings.upstream_timeout == 10.0
        assert settings.cors_origins == ("*",)
        assert settings.log_level == "INFO"

    def test_overrides(self):
        """Test that every variable is picked up."""
        env = {
            "STOCKWATCH_DATA_DIR": "/tmp/sw",
            "STOCKWATCH_QUOTE_MAX_AGE": "600",
            "STOCKWATCH_QUOTE_SOURCE": " Simulator ",
            "STOCKWATCH_UPSTREAM_TIMEOUT": "2.5",
            "STOCKWATCH_SESSION_TTL": "60",
            "STOCKWATCH_BCRYPT_ROUNDS": "4",
            "STOCKWATCH_CORS_ORIGINS": "http://a.test, http://b.test",
            "LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        assert settings.data_dir == Path("/tmp/sw")
        assert settings.quote_max_age == 600.0
        assert settings.quote_source == "simulator"
        assert settings.upstream_timeout == 2.5
        assert settings.session_ttl == 60.0
        assert settings.bcrypt_rounds == 4
        assert settings.cors_origins == ("http://a.test", "http://b.test")
        assert settings.log_level == "DEBUG"

    def test_blank_values_fall_back(self):
        """Test that whitespace-only values mean "use the default"."""
        with patch.dict(os.environ, {"STOCKWATCH_QUOTE_MAX_AGE": "  ", "STOCKWATCH_UPSTREAM_URL": ""}, clear=True):
            settings = Settings.from_env()
        assert settings.quote_max_age == 3600.0
        assert settings.upstream_url == DEFAULT_UPSTREAM_URL

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid_max_age_rejected(self, value):
        """Test that non-numeric or non-positive windows are rejected."""
        with patch.dict(os.environ, {"STOCKWATCH_QUOTE_MAX_AGE": value}, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()

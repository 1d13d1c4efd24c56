"""Tests for settings loading."""

import pytest
from pydantic import ValidationError
from py_heightfield.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for key in ["DEFAULT_SIZE", "LOG_FORMAT", "ROUGHNESS", "DEFAULT_SEED"]:
            monkeypatch.delenv(f"HEIGHTFIELD_{key}", raising=False)
        settings = Settings()

        assert settings.default_size == 513
        assert settings.initial_variance == 64.0
        assert settings.roughness == 0.5
        assert settings.log_format == "plain"
        assert settings.default_seed is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("HEIGHTFIELD_DEFAULT_SIZE", "257")
        monkeypatch.setenv("HEIGHTFIELD_DEFAULT_SEED", "abc")
        monkeypatch.setenv("HEIGHTFIELD_LOG_FORMAT", "JSON")

        settings = Settings()

        assert settings.default_size == 257
        assert settings.default_seed == "abc"
        assert settings.log_format == "json"

    def test_invalid_size(self, monkeypatch):
        monkeypatch.setenv("HEIGHTFIELD_DEFAULT_SIZE", "256")

        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("HEIGHTFIELD_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings()

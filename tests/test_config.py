"""Tests for settings and logging configuration."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from py_gmesh.config import Settings
from py_gmesh.logging_config import configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("GMESH_DEFAULT_SIDE_LENGTH", "GMESH_DEFAULT_PATTERN", "GMESH_SEED"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.default_side_length == 20
        assert settings.min_side_length == 5
        assert settings.max_side_length == 100
        assert settings.default_pattern == "triangular"
        assert settings.seed is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("GMESH_DEFAULT_SIDE_LENGTH", "42")
        monkeypatch.setenv("GMESH_SEED", "env-seed")
        settings = Settings(_env_file=None)

        assert settings.default_side_length == 42
        assert settings.seed == "env-seed"

    @pytest.mark.parametrize("side_length", [5, 50, 100])
    def test_side_length_in_bounds(self, side_length):
        assert Settings(_env_file=None).check_side_length(side_length) == side_length

    @pytest.mark.parametrize("side_length", [4, 101, -1])
    def test_side_length_out_of_bounds(self, side_length):
        with pytest.raises(ValueError):
            Settings(_env_file=None).check_side_length(side_length)

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        yield
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_sets_root_level(self, fmt):
        configure_logging(level="warning", fmt=fmt, cache=False)

        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()

    def test_json_output(self, capsys):
        configure_logging(level="INFO", fmt="json", cache=False)
        structlog.get_logger("test").info("Greedy meshing done", quad_count=3)

        out = capsys.readouterr().out
        assert '"event": "Greedy meshing done"' in out
        assert '"quad_count": 3' in out

# tests/test_config.py
"""
Configuration Tests - Unit Tests for Settings, Validators and Logging Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- netrate.config.settings (Settings)
- netrate.shared.validators (validation functions)
- netrate.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging

import pytest
from pydantic import ValidationError

from netrate.config.settings import Settings
from netrate.shared.logging_conf import setup_logging
from netrate.shared.validators import (
    validate_log_level,
    validate_logical_time,
    validate_rate_amount,
    validate_window,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("NETRATE_GENESIS_HEIGHT", "NETRATE_ENFORCE_RATE_WINDOWS", "NETRATE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.genesis_height == 0
        assert config.enforce_rate_windows is False
        assert config.log_level == "INFO"
        assert config.log_stdout is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NETRATE_GENESIS_HEIGHT", "100")
        monkeypatch.setenv("NETRATE_ENFORCE_RATE_WINDOWS", "true")
        monkeypatch.setenv("NETRATE_LOG_LEVEL", "debug")

        config = Settings(_env_file=None)

        assert config.genesis_height == 100
        assert config.enforce_rate_windows is True
        assert config.log_level == "DEBUG"

    def test_field_names_accepted(self):
        config = Settings(_env_file=None, genesis_height=7, enforce_rate_windows=True)

        assert config.genesis_height == 7
        assert config.enforce_rate_windows is True

    def test_negative_genesis_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, genesis_height=-1)

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")


class TestValidators:
    def test_rate_amount(self):
        assert validate_rate_amount(0)
        assert validate_rate_amount(8500)
        assert not validate_rate_amount(-1)
        assert not validate_rate_amount(85.0)
        assert not validate_rate_amount(False)

    def test_logical_time(self):
        assert validate_logical_time(0)
        assert not validate_logical_time(-1)
        assert not validate_logical_time("1")

    def test_window(self):
        assert validate_window(50, 200)
        assert not validate_window(50, 50)
        assert not validate_window(200, 50)

    def test_log_level(self):
        assert validate_log_level("info")
        assert validate_log_level("WARNING")
        assert not validate_log_level("LOUD")
        assert not validate_log_level("")


class TestLoggingSetup:
    def test_file_logging(self, tmp_path, restore_root_logger):
        setup_logging(level="DEBUG", log_dir=tmp_path, log_stdout=False)
        logging.getLogger("netrate.test").info("rate set")
        for handler in restore_root_logger.handlers:
            handler.flush()

        log_file = tmp_path / "netrate.log"
        assert log_file.exists()
        assert "netrate.test :: rate set" in log_file.read_text(encoding="utf-8")
        assert restore_root_logger.level == logging.DEBUG

    def test_stdout_default(self, restore_root_logger):
        setup_logging(level=logging.WARNING)

        assert restore_root_logger.level == logging.WARNING
        assert any(isinstance(h, logging.StreamHandler) for h in restore_root_logger.handlers)

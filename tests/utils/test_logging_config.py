# File: tests/utils/test_logging_config.py
"""Tests for logging configuration."""

import logging
import os

import pytest
from src.medical_gas_engineering.utils.logging_config import (
    MedicalGasLogger,
    PACKAGE_LOGGER,
    get_logger,
)


@pytest.fixture
def package_logger():
    """Package logger, restored after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


class TestConfigure:
    """Test cases for MedicalGasLogger.configure."""

    def test_package_logger_is_module_parent(self):
        """Module loggers propagate to the configured package logger."""
        assert PACKAGE_LOGGER.endswith("medical_gas_engineering")
        assert get_logger(f"{PACKAGE_LOGGER}.calculations.demand").name.startswith(PACKAGE_LOGGER)

    def test_console_only(self, package_logger):
        log_file = MedicalGasLogger.configure()
        assert log_file is None
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO

    def test_log_file(self, package_logger, tmp_path):
        log_file = MedicalGasLogger.configure(
            debug_mode=True, log_dir=str(tmp_path), console=False
        )

        get_logger(f"{PACKAGE_LOGGER}.test").debug("sizing oxygen main")
        for handler in package_logger.handlers:
            handler.flush()

        assert os.path.dirname(log_file) == str(tmp_path)
        assert package_logger.level == logging.DEBUG
        with open(log_file) as f:
            assert "sizing oxygen main" in f.read()

    def test_reconfigure_replaces_handlers(self, package_logger):
        MedicalGasLogger.configure()
        MedicalGasLogger.configure()
        assert len(package_logger.handlers) == 1


class TestGetLogger:
    """Test cases for get_logger."""

    def test_level(self):
        logger = get_logger("medical_gas_test.level", logging.WARNING)
        assert logger.level == logging.WARNING

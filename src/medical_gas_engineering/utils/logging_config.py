# File: src/medical_gas_engineering/utils/logging_config.py
"""
Logging configuration for the medical gas engineering engine.

Library modules only create module-level loggers with
``logging.getLogger(__name__)``; handlers are installed by the host
application through MedicalGasLogger.configure().
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

# Parent of every module logger in the package, however the package is imported
PACKAGE_LOGGER = __name__.rsplit(".", 2)[0]


class MedicalGasLogger:
    """
    Configures logging for the engine.

    Supports:
    - File output with timestamps, one file per run
    - Console output with a shorter format
    - DEBUG or INFO level for the whole package
    """

    FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    CONSOLE_FORMAT = '%(name)s - %(levelname)s: %(message)s'

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: Optional[str] = None,
        console: bool = True
    ) -> Optional[str]:
        """
        Configure logging for the package logger.

        Args:
            debug_mode: If True, sets DEBUG level, otherwise INFO
            log_dir: Directory to store log files; no file handler if None
            console: If True, also log to stdout

        Returns:
            Path to the created log file, or None without a log directory
        """
        level = logging.DEBUG if debug_mode else logging.INFO

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(level)

        # Clear handlers from any previous configure() call
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        log_file = None
        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"medical_gas_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(MedicalGasLogger.FILE_FORMAT))
            file_handler.setLevel(level)
            package_logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(
                logging.Formatter(MedicalGasLogger.CONSOLE_FORMAT)
            )
            console_handler.setLevel(logging.INFO)
            package_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            The logger
        """
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Convenience wrapper around MedicalGasLogger.get_logger."""
    return MedicalGasLogger.get_logger(name, level)

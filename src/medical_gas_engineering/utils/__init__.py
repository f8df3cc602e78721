# File: src/medical_gas_engineering/utils/__init__.py
"""Utility helpers."""

from .logging_config import MedicalGasLogger, get_logger

__all__ = ["MedicalGasLogger", "get_logger"]

# File: src/medical_gas_engineering/config/loader.py
"""
Load configuration overrides from YAML files.

Standards revisions and local cost data are kept in YAML so they can be
updated without touching calculation code. The file holds the same
structure accepted by EngineeringConfig.from_dict().
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from ..core.errors import ConfigurationError
from .engineering_config import EngineeringConfig

logger = logging.getLogger(__name__)


def load_config(
    path: Optional[Union[str, Path]] = None,
    base: Optional[EngineeringConfig] = None
) -> EngineeringConfig:
    """
    Load an EngineeringConfig from a YAML override file.

    Args:
        path: YAML file with overrides; defaults are returned if None
        base: Configuration the overrides are applied to

    Returns:
        EngineeringConfig with overrides applied

    Raises:
        ConfigurationError: If the file is missing, unreadable, or holds an
            invalid configuration
    """
    if path is None:
        return base or EngineeringConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        logger.warning(f"Configuration file {config_path} is empty, using defaults")
        return base or EngineeringConfig()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping"
        )

    logger.info(f"Loaded configuration overrides from {config_path}")
    return EngineeringConfig.from_dict(data, base=base)

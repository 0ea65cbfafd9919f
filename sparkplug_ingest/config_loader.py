"""
Configuration loader utilities for payload formatters.

This module loads formatter definitions from a YAML file. Each definition names
a formatter, its type and the type-specific config dictionary passed to the
formatter constructor.
"""
import logging
from typing import Any, Dict, List, Optional

import yaml

from sparkplug_ingest import config

logger = logging.getLogger(__name__)


def load_formatter_config(path: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Load the formatter configuration from a YAML file (defaults to SPARKPLUG_FORMATTER_CONFIG)."""
    config_path = path or config.SPARKPLUG_FORMATTER_CONFIG
    if not config_path:
        logger.debug("No formatter config file configured")
        return None

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
            logger.debug(f"Successfully loaded formatter config from: {config_path}")
    except FileNotFoundError:
        logger.error(f"Config file not found at: {config_path}")
        return None
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config from {config_path}: {e}")
        return None

    if not isinstance(config_data, dict):
        logger.error(f"Formatter config in {config_path} must be a mapping, got: {type(config_data).__name__}")
        return None
    return config_data


def get_formatter_configs(path: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Get all formatter definitions from the config file.

    Returns:
        List of formatter definitions or empty list if none are configured
    """
    config_data = load_formatter_config(path)
    if not config_data:
        return []

    formatters = config_data.get('formatters') or []
    logger.debug(f"Found {len(formatters)} formatter config(s)")
    return formatters


def get_formatter_config(name: str, path: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Get the definition of a single formatter by name."""
    for formatter in get_formatter_configs(path):
        if formatter.get('name') == name:
            logger.debug(f"Found configuration for formatter: {name}")
            return formatter

    logger.warning(f"Formatter '{name}' not found in configuration")
    return None


def validate_formatter_config(formatter_config: Dict[str, Any]) -> bool:
    """
    Validate a formatter definition dictionary.

    Args:
        formatter_config: Formatter definition with 'type' and 'config' keys

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(formatter_config, dict):
        logger.error(f"Formatter definition must be a dictionary, got: {type(formatter_config)}")
        return False

    required_fields = ['type', 'config']

    for field in required_fields:
        if field not in formatter_config:
            logger.error(f"Missing required field '{field}' in formatter config")
            return False

    formatter_type = formatter_config.get('type')
    if not isinstance(formatter_type, str):
        logger.error(f"Formatter type must be a string, got: {type(formatter_type)}")
        return False

    type_config = formatter_config.get('config')
    if not isinstance(type_config, dict):
        logger.error(f"Formatter config must be a dictionary, got: {type(type_config)}")
        return False

    return True

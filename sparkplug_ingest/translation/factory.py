# sparkplug_ingest/translation/factory.py
import logging
from typing import Any, Dict, Iterable, List, Optional

from sparkplug_ingest.config_loader import get_formatter_configs, validate_formatter_config
from .base import BasePayloadFormatter
from .errors import ConfigurationError
from .sparkplug.constants import FORMATTER_NAME
from .sparkplug.formatter import SparkplugPayloadFormatter

logger = logging.getLogger(__name__)

SPARKPLUG_FORMATTER_TYPES = ('sparkplug_b', 'sparkplugb', FORMATTER_NAME.lower())


class FormatterFactory:
    """Factory for creating payload formatter instances based on configuration."""

    @staticmethod
    def create_formatter(formatter_config: Dict[str, Any]) -> Optional[BasePayloadFormatter]:
        """
        Create a formatter based on the provided configuration.

        Args:
            formatter_config: Configuration dictionary containing type and config

        Returns:
            Formatter instance or None if type is not supported

        Raises:
            ConfigurationError: if the type is supported but its config is invalid
        """
        formatter_type = (formatter_config.get('type') or '').lower()
        config = formatter_config.get('config') or {}

        logger.debug(f"Creating formatter of type: {formatter_type}")

        if formatter_type in SPARKPLUG_FORMATTER_TYPES:
            return SparkplugPayloadFormatter(config)
        else:
            logger.error(f"Unknown formatter type: {formatter_type}")
            return None

    @staticmethod
    def create_formatters(formatter_configs: Iterable[Dict[str, Any]]) -> List[BasePayloadFormatter]:
        """Create every valid formatter from a list of definitions, skipping the invalid ones."""
        formatters = []
        for formatter_config in formatter_configs:
            if not validate_formatter_config(formatter_config):
                continue
            try:
                formatter = FormatterFactory.create_formatter(formatter_config)
            except ConfigurationError as e:
                logger.error(f"Invalid configuration for formatter '{formatter_config.get('name')}': {e}")
                continue
            if formatter is not None:
                formatters.append(formatter)

        logger.debug(f"Created {len(formatters)} formatter(s)")
        return formatters

    @staticmethod
    def create_from_config_file(path: Optional[str] = None) -> List[BasePayloadFormatter]:
        """Create the formatters defined in the YAML config file."""
        return FormatterFactory.create_formatters(get_formatter_configs(path))

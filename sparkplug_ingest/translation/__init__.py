# sparkplug_ingest/translation/__init__.py

"""
Translation layer converting binary telemetry payloads into time-series records.

Formatters implement BasePayloadFormatter and are created from configuration
through FormatterFactory.
"""

from .base import BasePayloadFormatter
from .errors import ConfigurationError, PayloadDecodeError, SparkplugFormatError, ValueMismatchError
from .factory import FormatterFactory
from .sparkplug.formatter import SparkplugPayloadFormatter

__all__ = [
    'BasePayloadFormatter',
    'FormatterFactory',
    'SparkplugPayloadFormatter',
    'SparkplugFormatError',
    'PayloadDecodeError',
    'ValueMismatchError',
    'ConfigurationError'
]

"""
Sparkplug B payload formatting: decoding, device path extraction, value
conversion and record assembly.
"""

from .constants import DEFAULT_DEVICE, FORMATTER_NAME, ROOT_PREFIX, DataType
from .device_path_extractor import SparkplugDevicePathExtractor
from .formatter import SparkplugPayloadFormatter
from .message_parser import SparkplugMessageParser
from .naming import normalize_name, normalize_path_segment, normalize_value
from .value_converter import convert_metric_value

__all__ = [
    'SparkplugPayloadFormatter',
    'SparkplugMessageParser',
    'SparkplugDevicePathExtractor',
    'convert_metric_value',
    'normalize_name',
    'normalize_path_segment',
    'normalize_value',
    'DataType',
    'ROOT_PREFIX',
    'DEFAULT_DEVICE',
    'FORMATTER_NAME'
]

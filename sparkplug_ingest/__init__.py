"""
Sparkplug B to time-series record conversion.

    from sparkplug_ingest import SparkplugPayloadFormatter

    records = SparkplugPayloadFormatter().format(payload_bytes)
"""

__version__ = "0.1.0"

from sparkplug_ingest.models.common import Record
from sparkplug_ingest.translation.sparkplug.formatter import SparkplugPayloadFormatter

__all__ = [
    'Record',
    'SparkplugPayloadFormatter',
]

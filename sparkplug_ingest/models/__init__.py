from .common import Record
from .translation import KIND_DEFAULTS, MetricValue, PropertyEntry, RawMetric, SparkplugEnvelope, ValueKind

__all__ = [
    'Record',
    'MetricValue',
    'PropertyEntry',
    'RawMetric',
    'SparkplugEnvelope',
    'ValueKind',
    'KIND_DEFAULTS'
]

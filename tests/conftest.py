"""
Shared fixtures for building Sparkplug B payloads.
"""

import pytest

from sparkplug_ingest.translation.sparkplug.constants import DataType
from sparkplug_ingest.translation.sparkplug.formatter import SparkplugPayloadFormatter
from sparkplug_ingest.translation.sparkplug.sparkplug_b_pb2 import Payload

# Value slot Sparkplug encoders use for each data type
VALUE_SLOTS = {
    DataType.Unknown: "double_value",
    DataType.Int8: "int_value",
    DataType.Int16: "int_value",
    DataType.Int32: "int_value",
    DataType.UInt8: "int_value",
    DataType.UInt16: "int_value",
    DataType.Int64: "long_value",
    DataType.UInt32: "long_value",
    DataType.UInt64: "long_value",
    DataType.DateTime: "long_value",
    DataType.Float: "float_value",
    DataType.Double: "double_value",
    DataType.Boolean: "boolean_value",
    DataType.String: "string_value",
    DataType.Text: "string_value",
    DataType.UUID: "string_value",
    DataType.Bytes: "bytes_value",
}

_UNSIGNED_MASKS = {"int_value": 0xFFFFFFFF, "long_value": 0xFFFFFFFFFFFFFFFF}


def _add_metric(payload, name, datatype, value=None, timestamp=None, properties=None, slot=None):
    metric = payload.metrics.add()
    if name is not None:
        metric.name = name
    metric.datatype = datatype
    if timestamp is not None:
        metric.timestamp = timestamp

    if value is None:
        metric.is_null = True
    else:
        slot = slot or VALUE_SLOTS.get(datatype, "double_value")
        if slot in _UNSIGNED_MASKS:
            # Signed integers travel as two's complement in the unsigned slots
            value = value & _UNSIGNED_MASKS[slot]
        setattr(metric, slot, value)

    for prop in properties or []:
        key, prop_value = prop[0], prop[1]
        prop_type = prop[2] if len(prop) > 2 else DataType.String
        metric.properties.keys.append(key)
        property_value = metric.properties.values.add()
        property_value.type = prop_type
        if prop_type == DataType.String:
            property_value.string_value = prop_value
        else:
            property_value.int_value = prop_value
    return metric


@pytest.fixture
def build_payload():
    """
    Return a function building serialized payloads from metric definitions.

    Each metric is a dict with keys name, datatype and optionally value,
    timestamp, slot and properties (list of (key, value[, type]) tuples).
    """
    def _build(metrics, timestamp=1700000000000, seq=0):
        payload = Payload()
        payload.timestamp = timestamp
        payload.seq = seq
        for metric in metrics:
            _add_metric(payload, **metric)
        return payload.SerializeToString()
    return _build


@pytest.fixture
def build_metric():
    """Return a function building a single protobuf Payload.Metric."""
    def _build(**kwargs):
        return _add_metric(Payload(), **kwargs)
    return _build


@pytest.fixture
def formatter():
    return SparkplugPayloadFormatter()

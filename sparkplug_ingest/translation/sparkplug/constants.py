# sparkplug_ingest/translation/sparkplug/constants.py
from enum import IntEnum
from typing import Dict, Tuple

FORMATTER_NAME = "CustomizedSparkplugB"

# Every device path starts with this root
ROOT_PREFIX = "root.mqtt.sparkplugb"
# Used when a metric does not carry a full group/edge/device identity
DEFAULT_DEVICE = ROOT_PREFIX

NULL_TOKEN = "null"
NULL_METRIC_NAME = "NullMetric"

FLOAT_PRECISION = 6


class DataType(IntEnum):
    """Sparkplug B metric and property data types."""
    Unknown = 0
    Int8 = 1
    Int16 = 2
    Int32 = 3
    Int64 = 4
    UInt8 = 5
    UInt16 = 6
    UInt32 = 7
    UInt64 = 8
    Float = 9
    Double = 10
    Boolean = 11
    String = 12
    DateTime = 13
    Text = 14
    UUID = 15
    DataSet = 16
    Bytes = 17
    File = 18
    Template = 19
    PropertySet = 20
    PropertySetList = 21


# Identity slot -> accepted property keys (canonical first, then legacy spellings)
DEVICE_PROPERTY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "group": ("group", "GroupID"),
    "edge": ("edge", "EdgeNodeID"),
    "device": ("device", "AgentID"),
}

DEVICE_PATH_SLOTS: Tuple[str, ...] = ("group", "edge", "device")


def data_type_name(tag: int) -> str:
    """Readable name of a wire type tag, tolerant of tags outside the enum."""
    try:
        return DataType(tag).name
    except ValueError:
        return f"Unknown({tag})"

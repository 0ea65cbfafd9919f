# sparkplug_ingest/models/translation.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class ValueKind(Enum):
    """Kinds of value a metric can carry once decoded."""
    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    TEXT = "text"


# Zero value of each kind, used when a metric arrives with an empty value slot
KIND_DEFAULTS = {
    ValueKind.SIGNED_INT: 0,
    ValueKind.UNSIGNED_INT: 0,
    ValueKind.FLOAT: 0.0,
    ValueKind.DOUBLE: 0.0,
    ValueKind.BOOLEAN: False,
    ValueKind.TEXT: "",
}


@dataclass(frozen=True)
class MetricValue:
    """A decoded metric value tagged with its kind."""
    kind: ValueKind
    data: Union[int, float, bool, str]

    @classmethod
    def empty(cls, kind: ValueKind) -> "MetricValue":
        return cls(kind=kind, data=KIND_DEFAULTS[kind])


@dataclass(frozen=True)
class PropertyEntry:
    """One entry of a metric's property set. ``text`` is set only for string-typed properties."""
    key: str
    type: int
    text: Optional[str] = None


@dataclass(frozen=True)
class RawMetric:
    """A metric decoded from a Sparkplug B payload, before formatting."""
    name: str
    datatype: int
    value: Optional[MetricValue]  # None when the value slot could not be read
    timestamp: int = 0
    properties: Tuple[PropertyEntry, ...] = ()


@dataclass
class SparkplugEnvelope:
    """Decoded payload envelope."""
    timestamp: int = 0
    seq: Optional[int] = None
    metrics: List[RawMetric] = field(default_factory=list)

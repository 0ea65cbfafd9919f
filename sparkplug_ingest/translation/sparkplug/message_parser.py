# sparkplug_ingest/translation/sparkplug/message_parser.py
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from google.protobuf.message import DecodeError

from sparkplug_ingest.models.translation import MetricValue, PropertyEntry, RawMetric, SparkplugEnvelope, ValueKind
from sparkplug_ingest.translation.errors import PayloadDecodeError, ValueMismatchError
from .constants import DataType, data_type_name
from .sparkplug_b_pb2 import Payload

logger = logging.getLogger(__name__)

PayloadBytes = Union[bytes, bytearray, memoryview]

# Declared data type -> kind of value it decodes to. Tags missing here decode as DOUBLE.
DATATYPE_VALUE_KINDS: Dict[int, ValueKind] = {
    DataType.Unknown: ValueKind.DOUBLE,
    DataType.Int8: ValueKind.SIGNED_INT,
    DataType.Int16: ValueKind.SIGNED_INT,
    DataType.Int32: ValueKind.SIGNED_INT,
    DataType.Int64: ValueKind.SIGNED_INT,
    DataType.UInt8: ValueKind.UNSIGNED_INT,
    DataType.UInt16: ValueKind.UNSIGNED_INT,
    DataType.UInt32: ValueKind.UNSIGNED_INT,
    DataType.UInt64: ValueKind.UNSIGNED_INT,
    DataType.DateTime: ValueKind.UNSIGNED_INT,
    DataType.Float: ValueKind.FLOAT,
    DataType.Double: ValueKind.DOUBLE,
    DataType.Boolean: ValueKind.BOOLEAN,
    DataType.String: ValueKind.TEXT,
    DataType.Text: ValueKind.TEXT,
    DataType.UUID: ValueKind.TEXT,
}

# Value slots each kind may be read from. Encoders disagree on where small and
# wide integers go, so both integer slots are accepted for integer kinds.
ACCEPTED_VALUE_SLOTS: Dict[ValueKind, Tuple[str, ...]] = {
    ValueKind.SIGNED_INT: ("int_value", "long_value"),
    ValueKind.UNSIGNED_INT: ("int_value", "long_value"),
    ValueKind.FLOAT: ("float_value", "double_value"),
    ValueKind.DOUBLE: ("double_value", "float_value", "int_value", "long_value"),
    ValueKind.BOOLEAN: ("boolean_value",),
    ValueKind.TEXT: ("string_value",),
}

_SLOT_BITS = {"int_value": 32, "long_value": 64}


def _to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned two's complement integer as signed."""
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


def value_kind_for(datatype: int) -> ValueKind:
    return DATATYPE_VALUE_KINDS.get(datatype, ValueKind.DOUBLE)


def build_metric_value(datatype: int, slot: Optional[str], raw: Any) -> MetricValue:
    """
    Build the tagged value for a metric from its declared data type and populated value slot.

    Raises:
        ValueMismatchError: if the populated slot cannot hold a value of the declared type
    """
    kind = value_kind_for(datatype)
    if slot is None:
        return MetricValue.empty(kind)

    if slot not in ACCEPTED_VALUE_SLOTS[kind]:
        raise ValueMismatchError(datatype, slot)

    if kind is ValueKind.SIGNED_INT:
        return MetricValue(kind, _to_signed(int(raw), _SLOT_BITS[slot]))
    if kind is ValueKind.UNSIGNED_INT:
        return MetricValue(kind, int(raw))
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        return MetricValue(kind, float(raw))
    if kind is ValueKind.BOOLEAN:
        return MetricValue(kind, bool(raw))
    return MetricValue(kind, str(raw))


class SparkplugMessageParser:
    """Decodes Sparkplug B payload bytes into RawMetric entries."""

    def parse_payload(self, payload: Optional[PayloadBytes]) -> Optional[Any]:
        """
        Parse payload bytes into a Sparkplug B Payload message.

        Returns:
            The parsed Payload message, or None when the payload is empty

        Raises:
            PayloadDecodeError: if the bytes are not a valid Sparkplug B payload
        """
        if payload is None or len(payload) == 0:
            logger.warning("Received null or empty payload")
            return None

        try:
            data = bytes(payload)
        except TypeError as e:
            raise PayloadDecodeError(f"Payload must be bytes-like, got {type(payload).__name__}") from e

        message = Payload()
        try:
            message.ParseFromString(data)
        except DecodeError as e:
            raise PayloadDecodeError(f"Error parsing Sparkplug B payload of {len(data)} bytes: {e}") from e

        logger.debug(f"Parsed Sparkplug B payload: {len(message.metrics)} metrics, seq={message.seq}")
        return message

    def decode_metric(self, metric: Any) -> RawMetric:
        """Convert a protobuf Payload.Metric into a RawMetric."""
        slot = metric.WhichOneof("value")
        try:
            value = build_metric_value(metric.datatype, slot, getattr(metric, slot) if slot else None)
        except ValueMismatchError as e:
            logger.error(f"Cannot read value of metric '{metric.name}' "
                         f"({data_type_name(metric.datatype)}): {e}")
            value = None

        properties: Tuple[PropertyEntry, ...] = ()
        if metric.HasField("properties"):
            properties = self._decode_properties(metric.properties)

        return RawMetric(
            name=metric.name,
            datatype=metric.datatype,
            value=value,
            timestamp=metric.timestamp,
            properties=properties,
        )

    def _decode_properties(self, property_set: Any) -> Tuple[PropertyEntry, ...]:
        if len(property_set.keys) != len(property_set.values):
            logger.debug(f"Property set has {len(property_set.keys)} keys and "
                         f"{len(property_set.values)} values, ignoring unpaired entries")

        entries = []
        for key, value in zip(property_set.keys, property_set.values):
            text = value.string_value if value.type == DataType.String else None
            entries.append(PropertyEntry(key=key, type=value.type, text=text))
        return tuple(entries)

    def parse_envelope(self, payload: Optional[PayloadBytes]) -> SparkplugEnvelope:
        """
        Decode a whole payload, envelope fields included.

        Raises:
            PayloadDecodeError: if the bytes are not a valid Sparkplug B payload
        """
        message = self.parse_payload(payload)
        if message is None:
            return SparkplugEnvelope()

        return SparkplugEnvelope(
            timestamp=message.timestamp,
            seq=message.seq if message.HasField("seq") else None,
            metrics=[self.decode_metric(metric) for metric in message.metrics],
        )

    def parse_metrics(self, payload: Optional[PayloadBytes]) -> List[RawMetric]:
        """Decode the metrics of a payload, in payload order."""
        return self.parse_envelope(payload).metrics

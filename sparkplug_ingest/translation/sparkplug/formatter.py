# sparkplug_ingest/translation/sparkplug/formatter.py
import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from sparkplug_ingest import config as app_config
from sparkplug_ingest.models.common import Record
from sparkplug_ingest.models.translation import RawMetric
from sparkplug_ingest.translation.base import BasePayloadFormatter
from sparkplug_ingest.translation.errors import ConfigurationError, PayloadDecodeError
from .constants import DEVICE_PATH_SLOTS, DEVICE_PROPERTY_ALIASES, FORMATTER_NAME
from .device_path_extractor import SparkplugDevicePathExtractor
from .message_parser import PayloadBytes, SparkplugMessageParser
from .naming import normalize_name
from .validator import has_root_prefix, is_valid_record
from .value_converter import convert_metric_value

logger = logging.getLogger(__name__)


def current_time_millis() -> int:
    return int(time.time() * 1000)


def resolve_timestamp(metric_timestamp: int, default_timestamp: Optional[int] = None) -> int:
    """Metric timestamp if positive, else the caller's default if positive, else now."""
    if metric_timestamp and metric_timestamp > 0:
        return metric_timestamp
    if default_timestamp is not None and default_timestamp > 0:
        return default_timestamp
    return current_time_millis()


class SparkplugPayloadFormatter(BasePayloadFormatter):
    """
    Converts Sparkplug B payloads into time-series records, one per metric.

    The formatter holds configuration only; each call to format() is independent,
    so one instance can be shared between threads.

    Config keys (all optional):
        root_prefix: root of every device path
        default_device: device path used when a metric carries no full identity
        null_metric_name: metric name treated as "no name"
        device_property_aliases: identity slot -> list of accepted property keys
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.root_prefix = self.config.get('root_prefix', app_config.SPARKPLUG_ROOT_PREFIX)
        self.default_device = self.config.get('default_device', app_config.SPARKPLUG_DEFAULT_DEVICE)
        self.null_metric_name = self.config.get('null_metric_name', app_config.SPARKPLUG_NULL_METRIC_NAME)
        self.aliases = self._resolve_aliases(self.config.get('device_property_aliases'))
        self._validate_settings()

        self.message_parser = SparkplugMessageParser()
        self.device_path_extractor = SparkplugDevicePathExtractor(
            root_prefix=self.root_prefix,
            default_device=self.default_device,
            aliases=self.aliases,
            null_metric_name=self.null_metric_name,
        )
        logger.debug(f"Initialized {FORMATTER_NAME} formatter with root '{self.root_prefix}'")

    @property
    def name(self) -> str:
        return FORMATTER_NAME

    @staticmethod
    def _resolve_aliases(aliases: Optional[Mapping[str, Iterable[str]]]) -> Dict[str, Tuple[str, ...]]:
        if aliases is None:
            return dict(DEVICE_PROPERTY_ALIASES)
        if not isinstance(aliases, Mapping):
            raise ConfigurationError(f"device_property_aliases must be a mapping, got: {type(aliases).__name__}")

        resolved = {}
        for slot, keys in aliases.items():
            if slot not in DEVICE_PATH_SLOTS:
                raise ConfigurationError(f"Unknown device identity slot '{slot}', expected one of {DEVICE_PATH_SLOTS}")
            if isinstance(keys, str):
                keys = [keys]
            keys = tuple(keys or ())
            if not keys:
                raise ConfigurationError(f"No property keys configured for device identity slot '{slot}'")
            resolved[slot] = keys

        missing = [slot for slot in DEVICE_PATH_SLOTS if slot not in resolved]
        if missing:
            raise ConfigurationError(f"No property keys configured for device identity slots {missing}")
        return resolved

    def _validate_settings(self):
        if not self.root_prefix or not isinstance(self.root_prefix, str):
            raise ConfigurationError("root_prefix must be a non-empty string")
        if not has_root_prefix(self.default_device, self.root_prefix):
            raise ConfigurationError(
                f"default_device '{self.default_device}' is not under root prefix '{self.root_prefix}'"
            )

    def format(self, payload: Optional[PayloadBytes], default_timestamp: Optional[int] = None) -> List[Record]:
        """
        Convert a Sparkplug B payload into records, in metric order.

        Args:
            payload: Serialized Sparkplug B Payload
            default_timestamp: Epoch ms used for metrics without their own timestamp

        Returns:
            List of valid records; empty when the payload is empty, malformed or has no usable metric
        """
        try:
            message = self.message_parser.parse_payload(payload)
        except PayloadDecodeError as e:
            logger.error(f"Error parsing Sparkplug B payload: {e}")
            return []
        except Exception as e:
            logger.exception(f"Unexpected error parsing Sparkplug B payload: {e}")
            return []

        if message is None:
            return []

        if not message.metrics:
            logger.warning("Payload contains no metrics")
            return []

        records = []
        for metric in message.metrics:
            record = self._build_valid_record(metric, default_timestamp, decode=self.message_parser.decode_metric)
            if record is not None:
                records.append(record)

        logger.debug(f"Formatted {len(records)} record(s) from {len(message.metrics)} metric(s)")
        return records

    def format_metrics(self, metrics: Iterable[RawMetric], default_timestamp: Optional[int] = None) -> List[Record]:
        """Convert already decoded metrics into records, skipping the ones that fail."""
        records = []
        for metric in metrics:
            record = self._build_valid_record(metric, default_timestamp)
            if record is not None:
                records.append(record)
        return records

    def _build_valid_record(self, metric: Any, default_timestamp: Optional[int],
                            decode: Optional[Callable[[Any], RawMetric]] = None) -> Optional[Record]:
        """Convert one metric, decoding it first when a decoder is given. Failures and invalid records give None."""
        try:
            raw_metric = decode(metric) if decode is not None else metric
            record = self.create_record(raw_metric, default_timestamp)
        except Exception as e:
            logger.error(f"Error processing metric {metric.name}: {e}", exc_info=True)
            return None

        if not is_valid_record(record, self.root_prefix):
            return None
        return record

    def create_record(self, metric: RawMetric, default_timestamp: Optional[int] = None) -> Record:
        """Build the record for one metric. Validity is checked by the caller."""
        device = self.device_path_extractor.extract(metric)
        measurement = normalize_name(metric.name, self.null_metric_name)
        value = convert_metric_value(metric)
        timestamp = resolve_timestamp(metric.timestamp, default_timestamp)

        return Record(
            device=device,
            measurements=(measurement,),
            values=(value,),
            timestamp=timestamp,
        )

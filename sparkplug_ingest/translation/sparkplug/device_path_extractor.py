# sparkplug_ingest/translation/sparkplug/device_path_extractor.py
import logging
from typing import Dict, Iterable, Mapping, Optional

from sparkplug_ingest.models.translation import RawMetric
from .constants import (
    DEFAULT_DEVICE,
    DEVICE_PATH_SLOTS,
    DEVICE_PROPERTY_ALIASES,
    NULL_METRIC_NAME,
    ROOT_PREFIX,
    DataType,
)
from .naming import normalize_path_segment

logger = logging.getLogger(__name__)


class SparkplugDevicePathExtractor:
    """
    Builds the device path of a metric from the group/edge/device identity
    carried in its property set.

    Each identity slot is reachable through several property keys (see
    DEVICE_PROPERTY_ALIASES). Properties are scanned in stored order and a
    later key for the same slot overwrites an earlier one. Only string-typed
    properties count.
    """

    def __init__(self, root_prefix: str = ROOT_PREFIX, default_device: str = DEFAULT_DEVICE,
                 aliases: Optional[Mapping[str, Iterable[str]]] = None,
                 null_metric_name: str = NULL_METRIC_NAME):
        self.root_prefix = root_prefix
        self.default_device = default_device
        self.null_metric_name = null_metric_name

        # Reverse lookup: property key -> identity slot
        self.key_to_slot: Dict[str, str] = {}
        for slot, keys in (aliases or DEVICE_PROPERTY_ALIASES).items():
            for key in keys:
                self.key_to_slot[key] = slot
        logger.debug(f"Initialized device path extractor with {len(self.key_to_slot)} property keys")

    def extract(self, metric: RawMetric) -> str:
        """Return the device path for a metric, or the default device if its identity is incomplete."""
        identity: Dict[str, str] = {}

        for entry in metric.properties:
            slot = self.key_to_slot.get(entry.key)
            if slot is None:
                continue
            if entry.type != DataType.String or entry.text is None:
                logger.debug(f"Ignoring non-string property '{entry.key}' on metric '{metric.name}'")
                continue
            identity[slot] = normalize_path_segment(entry.text, self.null_metric_name)

        if all(slot in identity for slot in DEVICE_PATH_SLOTS):
            device_path = ".".join([self.root_prefix] + [identity[slot] for slot in DEVICE_PATH_SLOTS])
            logger.debug(f"Created device path: {device_path}")
            return device_path

        logger.warning(f"Could not extract device info from properties for metric: {metric.name}, using default")
        return self.default_device

# sparkplug_ingest/translation/sparkplug/naming.py
"""
Normalization of free-form metric names and text values into identifier-safe tokens.

Both transforms are pure and idempotent: normalizing an already normalized
string returns it unchanged.
"""
import re
from typing import Optional

from .constants import NULL_METRIC_NAME, NULL_TOKEN

_CAMEL_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE_RUN = re.compile(r"\s+")


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def normalize_name(name: Optional[str], null_metric_name: str = NULL_METRIC_NAME) -> str:
    """
    Normalize a metric name.

    'DeviceHealth' -> 'device_health', 'Holding Registers Block_0' -> 'holding_registers_block_0'.
    Blank input and the no-name sentinel both map to 'null'.
    """
    if _is_blank(name) or name == null_metric_name:
        return NULL_TOKEN

    normalized = _CAMEL_CASE_BOUNDARY.sub(r"\1_\2", name.strip())
    normalized = _WHITESPACE_RUN.sub("_", normalized)
    return normalized.lower()


def normalize_path_segment(name: Optional[str], null_metric_name: str = NULL_METRIC_NAME) -> str:
    """Normalize one device path segment. Dots become '_' so a segment never splits the path."""
    return normalize_name(name, null_metric_name).replace(".", "_")


def normalize_value(value: Optional[str]) -> str:
    """Normalize a text value: blank -> 'null', whitespace runs -> '_', case kept."""
    if _is_blank(value):
        return NULL_TOKEN
    return _WHITESPACE_RUN.sub("_", value.strip())

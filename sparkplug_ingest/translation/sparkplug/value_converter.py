# sparkplug_ingest/translation/sparkplug/value_converter.py
import logging
import math
from typing import Callable, Dict

from sparkplug_ingest.models.translation import MetricValue, RawMetric
from .constants import FLOAT_PRECISION, NULL_TOKEN, DataType, data_type_name
from .naming import normalize_value

logger = logging.getLogger(__name__)


def format_float(value: MetricValue) -> str:
    number = float(value.data)
    # NaN and infinities have no fixed-point form
    if not math.isfinite(number):
        return NULL_TOKEN
    return f"{number:.{FLOAT_PRECISION}f}"


def format_integer(value: MetricValue) -> str:
    return str(int(value.data))


def format_boolean(value: MetricValue) -> str:
    return "true" if value.data else "false"


def format_text(value: MetricValue) -> str:
    return normalize_value(str(value.data))


ValueFormatter = Callable[[MetricValue], str]

VALUE_FORMATTERS: Dict[int, ValueFormatter] = {
    DataType.Unknown: format_float,
    DataType.Double: format_float,
    DataType.Float: format_float,
    DataType.Int8: format_integer,
    DataType.Int16: format_integer,
    DataType.Int32: format_integer,
    DataType.Int64: format_integer,
    DataType.UInt8: format_integer,
    DataType.UInt16: format_integer,
    DataType.UInt32: format_integer,
    DataType.UInt64: format_integer,
    DataType.DateTime: format_integer,
    DataType.Boolean: format_boolean,
    DataType.String: format_text,
    DataType.Text: format_text,
    DataType.UUID: format_text,
}

# Data types without a dedicated rule are formatted like doubles
FALLBACK_FORMATTER: ValueFormatter = format_float


def convert_metric_value(metric: RawMetric) -> str:
    """
    Convert a metric's value to its string form according to its declared data type.

    Unsupported data types fall back to double formatting. An unreadable value
    yields 'null'; the metric itself stays usable.
    """
    formatter = VALUE_FORMATTERS.get(metric.datatype)
    if formatter is None:
        logger.warning(f"Unexpected datatype {data_type_name(metric.datatype)} for metric {metric.name}, "
                       f"defaulting to double")
        formatter = FALLBACK_FORMATTER

    if metric.value is None:
        logger.debug(f"Metric {metric.name} has no readable value")
        return NULL_TOKEN

    try:
        return formatter(metric.value)
    except (TypeError, ValueError, OverflowError) as e:
        logger.error(f"Error converting value for metric {metric.name}: {e}")
        return NULL_TOKEN

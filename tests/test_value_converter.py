"""
Tests for value conversion by declared data type.
"""

import logging

import pytest

from sparkplug_ingest.models.translation import MetricValue, RawMetric, ValueKind
from sparkplug_ingest.translation.sparkplug.constants import DataType
from sparkplug_ingest.translation.sparkplug.value_converter import (
    FALLBACK_FORMATTER,
    VALUE_FORMATTERS,
    convert_metric_value,
    format_float,
)


def make_metric(datatype, kind, data, name="metric"):
    return RawMetric(name=name, datatype=datatype, value=MetricValue(kind, data))


@pytest.mark.parametrize("datatype, kind, data, expected", [
    (DataType.Float, ValueKind.FLOAT, 23.5, "23.500000"),
    (DataType.Float, ValueKind.FLOAT, 9.0, "9.000000"),
    (DataType.Double, ValueKind.DOUBLE, 10.0, "10.000000"),
    (DataType.Double, ValueKind.DOUBLE, 0.0, "0.000000"),
    (DataType.Double, ValueKind.DOUBLE, -1.25, "-1.250000"),
    (DataType.Unknown, ValueKind.DOUBLE, 3.1415926, "3.141593"),
    (DataType.Int8, ValueKind.SIGNED_INT, -1, "-1"),
    (DataType.Int16, ValueKind.SIGNED_INT, 2, "2"),
    (DataType.Int32, ValueKind.SIGNED_INT, 45, "45"),
    (DataType.Int64, ValueKind.SIGNED_INT, -9223372036854775808, "-9223372036854775808"),
    (DataType.UInt8, ValueKind.UNSIGNED_INT, 255, "255"),
    (DataType.UInt16, ValueKind.UNSIGNED_INT, 6, "6"),
    (DataType.UInt32, ValueKind.UNSIGNED_INT, 4294967295, "4294967295"),
    (DataType.UInt64, ValueKind.UNSIGNED_INT, 18446744073709551615, "18446744073709551615"),
    (DataType.DateTime, ValueKind.UNSIGNED_INT, 1700000000000, "1700000000000"),
    (DataType.Boolean, ValueKind.BOOLEAN, True, "true"),
    (DataType.Boolean, ValueKind.BOOLEAN, False, "false"),
    (DataType.String, ValueKind.TEXT, "custom value", "custom_value"),
    (DataType.Text, ValueKind.TEXT, "1.0", "1.0"),
    (DataType.UUID, ValueKind.TEXT, "", "null"),
])
def test_convert_supported_types(datatype, kind, data, expected):
    assert convert_metric_value(make_metric(datatype, kind, data)) == expected


def test_float_values_have_six_decimals():
    for data in (0.1, 1e6, 123.456789123, -0.5):
        text = convert_metric_value(make_metric(DataType.Double, ValueKind.DOUBLE, data))
        integer_part, decimals = text.split(".")
        assert len(decimals) == 6
        assert float(text) == pytest.approx(data, abs=1e-6)


def test_unknown_datatype_falls_back_to_double(caplog):
    metric = make_metric(99, ValueKind.DOUBLE, 1.5, name="Mystery")

    with caplog.at_level(logging.WARNING):
        assert convert_metric_value(metric) == "1.500000"

    assert "Unexpected datatype" in caplog.text
    assert "Mystery" in caplog.text


def test_unsupported_known_datatype_falls_back_to_double():
    assert DataType.DataSet not in VALUE_FORMATTERS
    assert FALLBACK_FORMATTER is format_float
    assert convert_metric_value(make_metric(DataType.DataSet, ValueKind.DOUBLE, 2.0)) == "2.000000"


def test_unreadable_value_is_null():
    metric = RawMetric(name="broken", datatype=DataType.Int32, value=None)
    assert convert_metric_value(metric) == "null"


def test_formatting_failure_is_null(caplog):
    metric = make_metric(DataType.Int32, ValueKind.TEXT, "not a number")

    with caplog.at_level(logging.ERROR):
        assert convert_metric_value(metric) == "null"

    assert "Error converting value" in caplog.text


@pytest.mark.parametrize("datatype, kind, data", [
    (DataType.Double, ValueKind.DOUBLE, float("nan")),
    (DataType.Double, ValueKind.DOUBLE, float("inf")),
    (DataType.Float, ValueKind.FLOAT, float("-inf")),
    (99, ValueKind.DOUBLE, float("nan")),
])
def test_non_finite_floats_are_null(datatype, kind, data):
    assert convert_metric_value(make_metric(datatype, kind, data)) == "null"

"""
Tests for metric name and value normalization.
"""

import pytest

from sparkplug_ingest.translation.sparkplug.naming import normalize_name, normalize_path_segment, normalize_value


@pytest.mark.parametrize("name, expected", [
    ("DeviceHealth", "device_health"),
    ("AnalogInput", "analog_input"),
    ("CustomMetric", "custom_metric"),
    ("Holding Registers Block_0", "holding_registers_block_0"),
    ("Coils Block_1", "coils_block_1"),
    ("Temperature", "temperature"),
    ("UInt8", "uint8"),
    ("  Tank   Level\tHigh ", "tank_level_high"),
    ("TestGroup", "test_group"),
])
def test_normalize_name(name, expected):
    assert normalize_name(name) == expected


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n", "NullMetric"])
def test_normalize_name_null_inputs(name):
    assert normalize_name(name) == "null"


def test_normalize_name_custom_null_sentinel():
    assert normalize_name("NoName", null_metric_name="NoName") == "null"
    assert normalize_name("NullMetric", null_metric_name="NoName") == "null_metric"


@pytest.mark.parametrize("value, expected", [
    ("custom value", "custom_value"),
    ("1.0", "1.0"),
    ("test", "test"),
    ("  Mixed Case  Value ", "Mixed_Case_Value"),
    ("0x00000000", "0x00000000"),
])
def test_normalize_value(value, expected):
    assert normalize_value(value) == expected


@pytest.mark.parametrize("value", [None, "", "    "])
def test_normalize_value_null_inputs(value):
    assert normalize_value(value) == "null"


@pytest.mark.parametrize("text", [
    "DeviceHealth",
    "Holding Registers Block_0",
    "  spaced   Out CamelCase ",
    "already_normalized",
    "NullMetric",
    "null",
    "",
    "ABCDef gHI",
    "a b",
])
def test_normalization_is_idempotent(text):
    once = normalize_name(text)
    assert normalize_name(once) == once

    once = normalize_value(text)
    assert normalize_value(once) == once


@pytest.mark.parametrize("segment, expected", [
    ("a.b", "a_b"),
    ("Plant.North", "plant_north"),
    ("Edge Node 1", "edge_node_1"),
    ("NullMetric", "null"),
    ("..", "__"),
])
def test_normalize_path_segment(segment, expected):
    assert normalize_path_segment(segment) == expected


@pytest.mark.parametrize("segment", ["a.b", "x.Y z", "aB.c", "plant_north"])
def test_normalize_path_segment_is_idempotent(segment):
    once = normalize_path_segment(segment)
    assert normalize_path_segment(once) == once
    assert "." not in once

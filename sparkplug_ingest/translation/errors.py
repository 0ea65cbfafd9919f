# sparkplug_ingest/translation/errors.py


class SparkplugFormatError(Exception):
    """Base class for errors raised while formatting Sparkplug B payloads."""


class PayloadDecodeError(SparkplugFormatError):
    """The buffer is not a valid Sparkplug B payload."""


class ValueMismatchError(SparkplugFormatError):
    """The populated value slot does not match the metric's declared data type."""

    def __init__(self, datatype: int, slot: str):
        self.datatype = datatype
        self.slot = slot
        super().__init__(f"Value slot '{slot}' does not match data type {datatype}")


class ConfigurationError(SparkplugFormatError):
    """The formatter configuration is invalid."""

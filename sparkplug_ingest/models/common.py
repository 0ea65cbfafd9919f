# sparkplug_ingest/models/common.py
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    One time-series point produced from a Sparkplug B metric:
    device path, measurement name, stringified value and epoch-millisecond timestamp.
    Measurements and values are parallel tuples holding exactly one entry each.
    """
    model_config = ConfigDict(frozen=True)

    device: str = Field(..., description="Hierarchical device path, e.g. root.mqtt.sparkplugb.group.edge.device")
    measurements: Tuple[str, ...] = Field(..., description="Normalized measurement names")
    values: Tuple[str, ...] = Field(..., description="Stringified values, parallel to measurements")
    timestamp: int = Field(..., description="Epoch milliseconds")

    @property
    def measurement(self) -> str:
        return self.measurements[0]

    @property
    def value(self) -> str:
        return self.values[0]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict in the shape the time-series insert call expects."""
        return self.model_dump()

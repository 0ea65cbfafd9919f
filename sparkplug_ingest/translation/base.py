from abc import ABC, abstractmethod
from typing import List, Optional, Union

from sparkplug_ingest.models.common import Record


class BasePayloadFormatter(ABC):
    """Base class for all payload formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the hosting layer registers this formatter under."""
        pass

    @abstractmethod
    def format(self, payload: Optional[Union[bytes, bytearray, memoryview]]) -> List[Record]:
        """Convert a raw payload into records. Never raises; returns [] when nothing is usable."""
        pass

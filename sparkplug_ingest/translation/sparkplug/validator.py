# sparkplug_ingest/translation/sparkplug/validator.py
import logging
from typing import Optional

from sparkplug_ingest.models.common import Record
from .constants import ROOT_PREFIX

logger = logging.getLogger(__name__)


def has_root_prefix(device: Optional[str], root_prefix: str = ROOT_PREFIX) -> bool:
    """True if the device path is the root itself or a path below it."""
    if not device:
        return False
    return device == root_prefix or device.startswith(root_prefix + ".")


def is_valid_record(record: Optional[Record], root_prefix: str = ROOT_PREFIX) -> bool:
    """
    Check the structural rules a record must satisfy before it is emitted:
    rooted device path, exactly one measurement paired with one value, positive timestamp.
    """
    if record is None:
        return False

    if not has_root_prefix(record.device, root_prefix):
        logger.warning(f"Invalid device path: {record.device}")
        return False

    if (not record.measurements or not record.values
            or len(record.measurements) != 1 or len(record.values) != 1):
        logger.warning(f"Invalid measurements or values for device: {record.device}")
        return False

    if record.timestamp <= 0:
        logger.warning(f"Invalid timestamp for device: {record.device}")
        return False

    return True

# sparkplug_ingest/config.py
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from sparkplug_ingest.translation.sparkplug.constants import NULL_METRIC_NAME, ROOT_PREFIX

load_dotenv()

# Formatter Config
SPARKPLUG_ROOT_PREFIX = os.getenv("SPARKPLUG_ROOT_PREFIX", ROOT_PREFIX)
SPARKPLUG_DEFAULT_DEVICE = os.getenv("SPARKPLUG_DEFAULT_DEVICE", SPARKPLUG_ROOT_PREFIX)
SPARKPLUG_NULL_METRIC_NAME = os.getenv("SPARKPLUG_NULL_METRIC_NAME", NULL_METRIC_NAME)
# Optional YAML file with formatter definitions (see config/formatters.example.yaml)
SPARKPLUG_FORMATTER_CONFIG = os.getenv("SPARKPLUG_FORMATTER_CONFIG", "")

# Service Config
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for a host process embedding the formatter."""
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Suppress overly verbose library logs
    logging.getLogger("google.protobuf").setLevel(logging.WARNING)

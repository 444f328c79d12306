"""
Timezone-aware logging configuration for the notification examples
"""

import sys
import logging
from datetime import datetime

import pytz

logger = logging.getLogger(__name__)

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_TIMEZONE = "Europe/Warsaw"


class TzFormatter(logging.Formatter):
    """Logging formatter that uses a configured timezone for timestamps"""

    def __init__(self, fmt=None, datefmt=None, tz=None):
        super().__init__(fmt, datefmt)
        self.tz = tz

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.strftime("%Y-%m-%d %H:%M:%S,%f")[:-3]


def setup_logging():
    """Initial logging setup with default (system) timezone"""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def apply_config(config):
    """
    Reconfigure logging from config: timezone and logging level.

    Args:
        config: ConfigManager instance
    """
    level = config.get("logging", "level", default="INFO") or "INFO"
    level_name = level.upper() if isinstance(level, str) else str(level)
    if level_name not in VALID_LEVELS:
        logger.warning(f"Invalid logging level '{level_name}', using INFO")
        level_name = "INFO"
    logging.root.setLevel(getattr(logging, level_name))
    logger.info(f"Logging level set to {level_name}")

    tz_name = config.get("logging", "timezone", default=DEFAULT_TIMEZONE)
    try:
        tz = pytz.timezone(tz_name)
    except pytz.exceptions.UnknownTimeZoneError:
        logger.warning(f"Invalid timezone '{tz_name}' - logging uses system timezone")
        return

    formatter = TzFormatter(LOG_FORMAT, tz=tz)
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)
    logger.info(f"Logging timezone set to {tz_name}")

"""Logging setup for the home control service"""

import logging
import sys
from typing import Optional

from home_control.core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: Optional[str] = None) -> None:
    """Setup logging configuration"""
    level = (level or get_settings().log_level).upper()

    root = logging.getLogger()
    root.setLevel(level)

    # Avoid stacking handlers when the app factory runs more than once
    if any(getattr(h, "_home_control", False) for h in root.handlers):
        return

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler._home_control = True
    root.addHandler(console_handler)

    logging.getLogger(__name__).info(f"Logging configured at level {level}")

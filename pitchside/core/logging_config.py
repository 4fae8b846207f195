"""Process-wide logging setup."""

import logging
from typing import Optional

from pitchside.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL), format=LOG_FORMAT)


__all__ = ["configure_logging"]

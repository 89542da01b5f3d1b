# solkit/utils/logger.py

import logging
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Returns the package logger for a module (use __name__)."""
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
) -> None:
    """
    Configures root logging for command line use.
    Library code never calls this; it only asks for loggers.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        # getLevelName returns "Level X" for unknown names
        level = resolved if isinstance(resolved, int) else logging.INFO
    logging.basicConfig(
        level=level,
        format=fmt or DEFAULT_LOG_FORMAT,
        datefmt=datefmt or DEFAULT_DATE_FORMAT,
    )

# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

logger.remove() # remove default stuff

_stderr_sink = logger.add(
    sys.stderr,
    format=LOG_FORMAT,
    level="INFO",
    colorize=True,
)


# Function to get logger with context
def get_logger(name: Optional[str] = None):
    if name:
        return logger.bind(name=name)
    return logger


def add_log_file(filepath: str, level: str = "INFO", **kwargs) -> int:
    return logger.add(filepath, level=level, **kwargs)


def set_log_level(level: str):
    global _stderr_sink
    logger.remove(_stderr_sink)
    _stderr_sink = logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper(), colorize=True)

# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

logger.remove() # remove default stuff

logger.add(
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


def add_log_file(filepath: Union[str, Path], level: str = "INFO", **kwargs) -> int:
    return logger.add(filepath, level=level, format=FILE_FORMAT, **kwargs)


def add_error_log(log_dir: Union[str, Path]) -> int:
    """store error log files under `log_dir`, one per day."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return add_log_file(
        log_dir / "errors_{time:YYYY-MM-DD}.log",
        level="ERROR",
        rotation="5 MB",
        retention="90 days",
    )


def set_log_level(level: str):
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)

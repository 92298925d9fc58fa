import logging
from logging import Logger
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
        name: Optional[str] = "viteioc",
        level: int = logging.INFO,
        fmt: str = DEFAULT_FORMAT
) -> Logger:
    """
    Set up and configure a logger.

    :param name: Name for the logger. If None, returns root logger.
    :param level: Logging level.
    :param fmt: Format string of the installed handler.
    :return: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger

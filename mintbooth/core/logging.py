"""
Provides support for logging
"""

import logging
import time
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def configure_logging(
    level: int | str = logging.WARNING,
    handlers: list[logging.Handler] | None = None,
):
    """
    Configures logging format and log level.

    :param level: default = logging.WARNING. Level names, e.g. "INFO", are also accepted.
    :return: None

    - log format: %(asctime)s [%(levelname)s] [%(name)s] %(message)s
    - timestamps are UTC
    - loggers are retrieved by class name, see :func:`get_logger`

    >>> configure_logging(level="DEBUG")
    >>> logger = logging.getLogger('BuildSponsoredMintGroup')
    >>> logger.info('free mint group built') # doctest: +SKIP
    2026-10-18 14:48:20,594 [INFO] [BuildSponsoredMintGroup] free mint group built

    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"invalid log level: {level}")

    logging.Formatter.converter = time.gmtime
    logging.basicConfig(
        format=LOG_FORMAT,
        level=level,
        handlers=handlers,
        force=True,
    )
    logging.captureWarnings(True)


def get_logger(obj: Any, name: str | None = None) -> logging.Logger:
    """
    Returns a logger using the class name as the logger name.
    If `name` is specified, then it is appended to the class name: `{self.__class__.__name__}.{name}`
    """
    logger = logging.getLogger(obj.__class__.__name__)
    if name is None:
        return logger

    return logger.getChild(name)

import logging
from typing import Union

from utm.constants import LOG_LEVEL

# ANSI escape codes for colors
RESET = "\033[0m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"


class ColoredFormatter(logging.Formatter):
    def format(self, record):
        if record.levelno == logging.INFO:
            color = GREEN
        elif record.levelno == logging.ERROR:
            color = RED
        elif record.levelno == logging.WARNING:
            color = YELLOW
        else:
            color = RESET

        record.msg = f"{color}{record.levelname}{RESET}: {record.msg}"
        return super().format(record)


def setup_logging(level: Union[int, str] = LOG_LEVEL) -> logging.Logger:
    """
    Sends records from the utm loggers to stderr with colored level names.
    Calling it again only changes the level.
    """
    logger = logging.getLogger("utm")
    logger.setLevel(level)
    if not any(isinstance(h.formatter, ColoredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter("%(message)s"))
        logger.addHandler(handler)
    return logger

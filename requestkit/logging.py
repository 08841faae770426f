import enum
import logging
from logging import getLogger as _getLogger
import logging.config
from typing import Any, Optional

from requestkit.conf import settings


class LogLevel(int, enum.Enum):
    """A convient namespaced list of possible log levels.

    An nicer alternative to doing something like:

    .. code-block:: python

       from requestkit.logging import DEBUG
       from requestkit.logging import DEBUG as LOG_LEVEL_DEBUG
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    WARN = logging.WARN
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


LOG_FORMAT: str = "%(levelname)s | %(asctime)s | %(name)s | %(message)s"


class ColorizedFormatter(logging.Formatter):
    """A simple log formatter with colors."""

    COLOR_RESET = "\u001b[0m"

    @staticmethod
    def get_level_color(levelno: int) -> str:
        """Calculate the color based on the log level.

        Args:
            levelno: the log level number.

        Returns:
            A terminal escape sequence for the color.
        """
        if levelno <= LogLevel.DEBUG:
            return "\u001b[38;5;14m"
        elif levelno <= LogLevel.INFO:
            return "\u001b[38;5;27m"
        elif levelno <= LogLevel.WARNING:
            return "\u001b[38;5;214m"
        elif levelno <= LogLevel.ERROR:
            return "\u001b[38;5;9m"
        else:
            return "\u001b[38;5;124m"

    def format(self, record):
        """Format the record based on color preferences.

        Args:
            record: The log record to format.
        """
        if not settings.NO_COLOR:
            # Work on a copy so other handlers see the plain level name.
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = "{}{:8}{}".format(
                self.get_level_color(record.levelno),
                record.levelname,
                self.COLOR_RESET,
            )

        return super().format(record)


# Only the requestkit logger is configured. Applications embedding the library keep
# control over the root logger.
config: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "colorized": {
            "format": LOG_FORMAT,
            "()": ColorizedFormatter,
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "colorized",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "requestkit": {
            "level": settings.LOG_LEVEL,
            "handlers": [
                "console",
            ],
            "propagate": False,
        },
    },
}

logging.config.dictConfig(config)

logger = _getLogger("requestkit")


def getLogger(name: Optional[str]) -> logging.Logger:
    """Create and return a logger.

    This function will copy the log level set on the main logger.

    Args:
        name: The name of the logger.

    Returns:
        An object suitable for logging
    """
    new_logger = _getLogger(name)
    new_logger.setLevel(logger.getEffectiveLevel())
    return new_logger

"""
Logger configuration.

Process-wide logging setup used by the API and the pipeline. Context passed
through `extra=` is appended to each line as key=value pairs.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from repository_ai.observability.log_utils import RESERVED_KEYS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

NOISY_LOGGERS = {
    "urllib3": logging.WARNING,
    "botocore": logging.WARNING,
    "httpx": logging.WARNING,
    "pypdf": logging.ERROR,
}


class ContextFormatter(logging.Formatter):
    """Formatter that renders record extras after the message."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = {k: v for k, v in vars(record).items() if k not in RESERVED_KEYS}
        if not context:
            return line
        return line + " | " + " ".join(f"{key}={context[key]}" for key in sorted(context))


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stdout handler on the root logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)

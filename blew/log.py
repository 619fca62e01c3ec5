"""File logging for the engine."""

import logging
from pathlib import Path

LOGGER_NAME = "blew_logger"
LOG_FILE_NAME = "app.log"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")

_MESSAGE_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger: logging.Logger | None = None


class _LowercaseLevelFormatter(logging.Formatter):
    """Formatter that writes level names in lower case."""

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        record.levelname = original.lower()
        try:
            return super().format(record)
        finally:
            record.levelname = original


def init_logger(directory: str | Path = "logs") -> logging.Logger:
    """Create the log directory and route the engine logger to ``app.log`` in it."""
    global _logger
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(path / LOG_FILE_NAME, encoding="utf-8")
    handler.setFormatter(_LowercaseLevelFormatter(_MESSAGE_FORMAT, _DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the engine logger set up by :func:`init_logger`."""
    if _logger is None:
        raise RuntimeError("logger has not been initialised; call init_logger() first")
    return _logger
"""File logging for terminal applications.

The terminal belongs to the UI while it runs, so log records go to a file
(or nowhere) rather than to the console.
"""

import logging
from typing import Optional

_LOGGER_NAME = 'term_modal'
_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def configure_logging(path: Optional[str] = None, level='INFO') -> logging.Logger:
    """Attach a handler to the package logger.

    Calling this again once a handler is installed is a no-op.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if path is None:
        logger.addHandler(logging.NullHandler())
        return logger

    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.info("logging configured")
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)

"""Logging configuration for Tracy.

Library modules only create loggers with ``logging.getLogger(__name__)``;
applications call :func:`setup_logging` once to get console output.
"""

import logging
from typing import Optional

from tracy.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """Attach a console handler to the ``tracy`` logger.

    Calling this more than once only updates the level and format of the
    handler installed the first time.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``TRACY_LOG_LEVEL``.
        fmt: Log record format. Defaults to ``TRACY_LOG_FORMAT``.

    Returns:
        The configured ``tracy`` logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("tracy")
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt or LOG_FORMAT)

    handler = next(
        (h for h in logger.handlers if getattr(h, "_tracy_console", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._tracy_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)

    return logger

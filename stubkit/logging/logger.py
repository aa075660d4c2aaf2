# stubkit/logging/logger.py
"""
Logging for stubkit.

Modules log under their own path (``stubkit.repository.walker``,
``stubkit.core.registry``, ...):

    from stubkit.logging.logger import get_logger
    logger = get_logger(__name__)

What a scan reports:
    INFO     stubkit.repository.repository   stub/contract counts per repository
    WARNING  stubkit.repository.walker       traversal failures (partial results)
    WARNING  stubkit.core.registry           converter plugins that failed to import
    DEBUG    everything else (scope decisions, converter choice per file)

The library never installs handlers on import. A test harness that wants to
see why a file was or was not picked up calls:

    configure_logging(logging.DEBUG, logger_name=LIBRARY_LOGGER)
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"
LIBRARY_LOGGER = "stubkit"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stdout,
    logger_name: Optional[str] = None,
):
    """
    Attach a stream handler and set the level.

    Args:
        level: Level applied to the target logger.
        fmt: Format of the installed handler.
        stream: Where records are written.
        logger_name: Logger to configure; the root logger when None. Pass
            LIBRARY_LOGGER to limit output to stubkit.

    A logger that already has handlers only gets its level updated.
    """
    target = logging.getLogger(logger_name)
    if not target.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        target.addHandler(handler)

    target.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a stubkit module; handlers come from configure_logging()."""
    return logging.getLogger(name)


__all__ = ["DEFAULT_FORMAT", "LIBRARY_LOGGER", "configure_logging", "get_logger"]

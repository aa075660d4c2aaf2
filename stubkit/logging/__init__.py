# stubkit/logging/__init__.py
from stubkit.logging.logger import LIBRARY_LOGGER, configure_logging, get_logger

__all__ = ["LIBRARY_LOGGER", "configure_logging", "get_logger"]

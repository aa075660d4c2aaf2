# stubkit/core/exceptions.py
"""
Exception hierarchy for stubkit.

Two families matter to callers:
- Configuration problems (ConfigError and subclasses) are raised eagerly,
  before any file is visited.
- ContractConversionError is raised when a converter claimed a file and then
  failed to turn it into contracts. It always carries the offending path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class StubkitError(Exception):
    """Base error for all stubkit failures."""

    pass


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(StubkitError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


class RepositoryConfigError(ConfigError):
    """Raised when a stub repository root is missing or not a directory."""

    pass


# =============================================================================
# Plugin registry
# =============================================================================


class PluginRegistryError(StubkitError):
    """Base error for plugin registry operations."""

    pass


class PluginNotFoundError(PluginRegistryError):
    """Raised when requested plugin doesn't exist."""

    pass


class DuplicatePluginError(PluginRegistryError):
    """Raised when two plugins have the same name."""

    pass


# =============================================================================
# Conversion
# =============================================================================


class ContractConversionError(StubkitError):
    """Raised when an accepted descriptor cannot be converted into contracts."""

    def __init__(
        self,
        message: str,
        source: Union[str, Path],
        cause: BaseException | None = None,
    ):
        super().__init__(f"{message} (file: {source})")
        self.source = Path(source)
        self.cause = cause


__all__ = [
    "StubkitError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "RepositoryConfigError",
    "PluginRegistryError",
    "PluginNotFoundError",
    "DuplicatePluginError",
    "ContractConversionError",
]

# stubkit/core/config.py
"""
Configuration loading for stubkit.

Usage:
    from stubkit.core.config import load_yaml, load_options

    data = load_yaml("stubrunner.yaml")
    options = load_options("stubrunner.yaml")

Options may sit at the document root or under a ``stubrunner:`` key, so a
shared application config file can be pointed at directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

import yaml
from pydantic import ValidationError

from stubkit.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from stubkit.core.options import StubRunnerOptions
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

OPTIONS_SECTION = "stubrunner"


# =============================================================================
# Core Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return as dictionary.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary of config data

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"Loaded config from {p}")
    return data


def load_options(path: Union[str, Path]) -> StubRunnerOptions:
    """
    Load StubRunnerOptions from a YAML file.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If the options don't validate
    """
    p = Path(path)
    data = load_yaml(p)

    section = data.get(OPTIONS_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigParseError(f"'{OPTIONS_SECTION}' section must be a mapping", path=p)

    return _validate_config(section, StubRunnerOptions, p)


# =============================================================================
# Schema Validation
# =============================================================================


def _validate_config(
    data: Dict[str, Any],
    schema: Type[T],
    path: Path,
) -> T:
    """Validate config data against a pydantic schema."""
    try:
        return schema.model_validate(data)  # type: ignore[attr-defined]
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigValidationError(f"Invalid configuration: {errors}", path=path) from e


__all__ = [
    "load_yaml",
    "load_options",
    "OPTIONS_SECTION",
]

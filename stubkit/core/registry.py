# stubkit/core/registry.py
"""
Contract converter registry.

Discovers converter plugins once and hands them out as an ordered tuple.
Discovery order is the precedence order used during conversion:

1. Entry points in the ``stubkit.contract_converters`` group, sorted by name
2. Modules of each scanned package, sorted by module name; within a module,
   classes in name order

Third-party packages register converters in their packaging metadata:

    [project.entry-points."stubkit.contract_converters"]
    protobuf = "my_package.converters:ProtobufContractConverter"
"""

from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass, field
from importlib.metadata import entry_points
from typing import Any, Dict, List, Optional, Tuple

from stubkit.core.exceptions import (
    DuplicatePluginError,
    PluginNotFoundError,
    PluginRegistryError,
)
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)

ENTRY_POINT_GROUP = "stubkit.contract_converters"
DEFAULT_SCAN_PACKAGES = ["stubkit.converter.plugins"]


# =============================================================================
# ConverterRegistry Class
# =============================================================================


@dataclass
class ConverterRegistry:
    """
    Converter registry with lazy, one-time auto-discovery.

    Args:
        name: Registry name (for error messages)
        scan_packages: Package names to scan for converter classes
        entry_point_group: Entry point group to load, or None to skip
        required_method: Method name that plugins must have
        plugin_name_attr: Attribute containing the plugin name
    """

    name: str = "converter"
    scan_packages: List[str] = field(default_factory=lambda: list(DEFAULT_SCAN_PACKAGES))
    entry_point_group: Optional[str] = ENTRY_POINT_GROUP
    required_method: str = "convert_from"
    plugin_name_attr: str = "plugin_name"
    _plugins: Dict[str, Any] = field(default_factory=dict, repr=False)
    _converters: Optional[Tuple[Any, ...]] = field(default=None, repr=False)
    _discovered: bool = field(default=False, repr=False)

    @property
    def converters(self) -> Tuple[Any, ...]:
        """Converter instances in precedence order, created once."""
        if self._converters is None:
            self._ensure_discovered()
            self._converters = tuple(
                plugin() if isinstance(plugin, type) else plugin
                for plugin in self._plugins.values()
            )
            logger.debug(
                f"Using {len(self._converters)} {self.name} plugin(s): "
                f"{[getattr(c, self.plugin_name_attr) for c in self._converters]}"
            )
        return self._converters

    def get(self, plugin_name: str) -> Any:
        """Get a converter instance by name."""
        for converter in self.converters:
            if getattr(converter, self.plugin_name_attr) == plugin_name:
                return converter

        raise PluginNotFoundError(
            f"Unknown {self.name} plugin: {plugin_name!r}. Available: {self.list_available()}"
        )

    def list_available(self) -> List[str]:
        """List all available plugin names, in precedence order."""
        self._ensure_discovered()
        return list(self._plugins.keys())

    def register(self, plugin: Any) -> None:
        """Manually register a converter class or instance."""
        if self._converters is not None:
            raise PluginRegistryError(
                f"{self.name} registry is frozen; register plugins before first use"
            )

        label = plugin.__name__ if isinstance(plugin, type) else type(plugin).__name__

        if not callable(getattr(plugin, self.required_method, None)):
            raise PluginRegistryError(
                f"{self.name} plugin {label} missing required method {self.required_method!r}"
            )

        if not callable(getattr(plugin, "is_accepted", None)):
            raise PluginRegistryError(
                f"{self.name} plugin {label} missing required method 'is_accepted'"
            )

        name = getattr(plugin, self.plugin_name_attr, None)
        if not isinstance(name, str) or not name:
            raise PluginRegistryError(
                f"{self.name} plugin {label} missing required attribute {self.plugin_name_attr!r}"
            )

        if name in self._plugins:
            existing = self._plugins[name]
            if existing is not plugin:
                raise DuplicatePluginError(
                    f"Duplicate {self.name} plugin: {name!r}. "
                    f"Found {existing!r} and {plugin!r}"
                )
            return

        self._plugins[name] = plugin
        logger.debug(f"Registered {self.name} plugin: {name!r}")

    def _ensure_discovered(self) -> None:
        """Run auto-discovery if not already done."""
        if self._discovered:
            return

        # Mark first so a plugin module importing the registry can't recurse
        self._discovered = True

        if self.entry_point_group:
            self._load_entry_points(self.entry_point_group)

        for package_name in self.scan_packages:
            try:
                package = importlib.import_module(package_name)
            except ImportError as e:
                logger.warning(f"Could not import {package_name}: {e}")
                continue

            self._scan_package(package)

        logger.debug(
            f"Discovered {len(self._plugins)} {self.name} plugin(s): {list(self._plugins)}"
        )

    def _load_entry_points(self, group: str) -> None:
        for ep in sorted(entry_points(group=group), key=lambda e: e.name):
            try:
                plugin = ep.load()
            except Exception as e:
                logger.warning(f"Could not load {self.name} entry point {ep.name!r}: {e}")
                continue

            self._try_register(plugin, ep.name)

    def _scan_package(self, package: Any) -> None:
        """Scan a package for plugin classes (non-recursive)."""
        package_path = getattr(package, "__path__", None)
        if not package_path:
            return

        modules = sorted(
            pkgutil.iter_modules(package_path, prefix=f"{package.__name__}."),
            key=lambda info: info.name,
        )
        for _importer, modname, ispkg in modules:
            if ispkg:
                continue

            try:
                module = importlib.import_module(modname)
            except Exception as e:
                logger.warning(f"Could not import {modname}: {e}")
                continue

            self._scan_module(module)

    def _scan_module(self, module: Any) -> None:
        """Scan a module for plugin classes defined in it."""
        for name in dir(module):
            if name.startswith("_"):
                continue

            obj = getattr(module, name)

            if not isinstance(obj, type):
                continue

            if not hasattr(obj, self.required_method):
                continue

            if not hasattr(obj, self.plugin_name_attr):
                continue

            if obj.__module__ != module.__name__:
                continue

            self._try_register(obj, name)

    def _try_register(self, plugin: Any, label: str) -> None:
        try:
            self.register(plugin)
        except PluginRegistryError as e:
            logger.debug(f"Skipping {label}: {e}")


# =============================================================================
# Process-wide default registry
# =============================================================================


CONVERTER_REGISTRY = ConverterRegistry()


def get_contract_converters() -> Tuple[Any, ...]:
    """Converters from the process-wide registry (discovered on first call)."""
    return CONVERTER_REGISTRY.converters


def available_converter_plugins() -> List[str]:
    """List available converter plugin names, in precedence order."""
    return CONVERTER_REGISTRY.list_available()


__all__ = [
    "ConverterRegistry",
    "CONVERTER_REGISTRY",
    "ENTRY_POINT_GROUP",
    "DEFAULT_SCAN_PACKAGES",
    "get_contract_converters",
    "available_converter_plugins",
]

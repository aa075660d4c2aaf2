# tests/unit/test_registry.py
"""
Tests for the converter registry.

Architecture:
- Converters are discovered from entry points first, then scanned packages
- Discovery runs once; instances are cached in precedence order
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from stubkit.converter.plugins.pact import PactContractConverter
from stubkit.core.exceptions import (
    DuplicatePluginError,
    PluginNotFoundError,
    PluginRegistryError,
)
from stubkit.core.registry import (
    CONVERTER_REGISTRY,
    ENTRY_POINT_GROUP,
    ConverterRegistry,
    available_converter_plugins,
    get_contract_converters,
)

from .fakes import FakeConverter

PLUGIN_MODULE = """\
from dataclasses import dataclass, field


@dataclass
class {cls}:
    plugin_name: str = field(default="{name}")

    def is_accepted(self, file):
        return False

    def convert_from(self, file):
        return []
"""


def _entry_point(name: str, loaded) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.load.return_value = loaded
    return ep


def _registry(**kwargs) -> ConverterRegistry:
    kwargs.setdefault("scan_packages", [])
    kwargs.setdefault("entry_point_group", None)
    return ConverterRegistry(**kwargs)


class TestDefaultRegistry:
    def test_builtin_pact_converter_discovered(self):
        assert "pact" in available_converter_plugins()

    def test_converters_are_instances(self):
        assert any(isinstance(c, PactContractConverter) for c in get_contract_converters())

    def test_converters_are_cached(self):
        assert get_contract_converters() is get_contract_converters()
        assert CONVERTER_REGISTRY.get("pact") is CONVERTER_REGISTRY.get("pact")

    def test_default_converter_is_not_registered(self):
        # The YAML converter is the fallback tier, never a registered plugin
        assert "yaml" not in available_converter_plugins()


class TestPackageScanning:
    def test_scans_modules_in_name_order(self, tmp_path: Path, monkeypatch):
        package = tmp_path / "scan_order_plugins"
        package.mkdir()
        (package / "__init__.py").write_text("")
        (package / "b_second.py").write_text(PLUGIN_MODULE.format(cls="Second", name="second"))
        (package / "a_first.py").write_text(PLUGIN_MODULE.format(cls="First", name="first"))
        monkeypatch.syspath_prepend(str(tmp_path))

        registry = _registry(scan_packages=["scan_order_plugins"])

        assert registry.list_available() == ["first", "second"]
        assert [c.plugin_name for c in registry.converters] == ["first", "second"]

    def test_broken_module_is_skipped(self, tmp_path: Path, monkeypatch, caplog):
        package = tmp_path / "broken_scan_plugins"
        package.mkdir()
        (package / "__init__.py").write_text("")
        (package / "bad.py").write_text("raise ImportError('missing optional dep')\n")
        (package / "good.py").write_text(PLUGIN_MODULE.format(cls="Good", name="good"))
        monkeypatch.syspath_prepend(str(tmp_path))

        registry = _registry(scan_packages=["broken_scan_plugins"])

        assert registry.list_available() == ["good"]
        assert "Could not import broken_scan_plugins.bad" in caplog.text

    def test_missing_package_is_skipped(self):
        registry = _registry(scan_packages=["stubkit_no_such_package"])

        assert registry.converters == ()


class TestEntryPoints:
    def test_entry_points_come_first_sorted_by_name(self):
        eps = [
            _entry_point("zeta", FakeConverter(plugin_name="zeta")),
            _entry_point("alpha", FakeConverter(plugin_name="alpha")),
        ]
        with patch("stubkit.core.registry.entry_points", return_value=eps) as mocked:
            registry = _registry(
                entry_point_group=ENTRY_POINT_GROUP,
                scan_packages=["stubkit.converter.plugins"],
            )
            names = registry.list_available()

        mocked.assert_called_once_with(group=ENTRY_POINT_GROUP)
        assert names == ["alpha", "zeta", "pact"]

    def test_entry_point_class_is_instantiated(self):
        eps = [_entry_point("pact", PactContractConverter)]
        with patch("stubkit.core.registry.entry_points", return_value=eps):
            registry = _registry(entry_point_group=ENTRY_POINT_GROUP)
            converters = registry.converters

        assert len(converters) == 1
        assert isinstance(converters[0], PactContractConverter)

    def test_failing_entry_point_is_skipped(self, caplog):
        bad = MagicMock()
        bad.name = "bad"
        bad.load.side_effect = ImportError("nope")
        eps = [bad, _entry_point("good", FakeConverter(plugin_name="good"))]

        with patch("stubkit.core.registry.entry_points", return_value=eps):
            registry = _registry(entry_point_group=ENTRY_POINT_GROUP)
            names = registry.list_available()

        assert names == ["good"]
        assert "Could not load converter entry point 'bad'" in caplog.text

    def test_discovery_runs_once(self):
        with patch("stubkit.core.registry.entry_points", return_value=[]) as mocked:
            registry = _registry(entry_point_group=ENTRY_POINT_GROUP)
            registry.converters
            registry.converters
            registry.list_available()

        assert mocked.call_count == 1


class TestRegister:
    def test_manual_registration(self):
        registry = _registry()
        converter = FakeConverter()

        registry.register(converter)

        assert registry.converters == (converter,)
        assert registry.get("fake") is converter

    def test_missing_convert_method_rejected(self):
        class NoConvert:
            plugin_name = "none"

            def is_accepted(self, file):
                return True

        with pytest.raises(PluginRegistryError, match="convert_from"):
            _registry().register(NoConvert)

    def test_missing_acceptance_method_rejected(self):
        class NoAccept:
            plugin_name = "none"

            def convert_from(self, file):
                return []

        with pytest.raises(PluginRegistryError, match="is_accepted"):
            _registry().register(NoAccept)

    def test_missing_name_rejected(self):
        class NoName:
            def is_accepted(self, file):
                return True

            def convert_from(self, file):
                return []

        with pytest.raises(PluginRegistryError, match="plugin_name"):
            _registry().register(NoName)

    def test_duplicate_name_rejected(self):
        registry = _registry()
        registry.register(FakeConverter(plugin_name="dup"))

        with pytest.raises(DuplicatePluginError, match="dup"):
            registry.register(FakeConverter(plugin_name="dup"))

    def test_same_plugin_registered_twice_is_ignored(self):
        registry = _registry()
        converter = FakeConverter()

        registry.register(converter)
        registry.register(converter)

        assert registry.list_available() == ["fake"]

    def test_registry_frozen_after_first_use(self):
        registry = _registry()
        registry.converters

        with pytest.raises(PluginRegistryError, match="frozen"):
            registry.register(FakeConverter())

    def test_unknown_plugin_error_lists_available(self):
        registry = _registry()
        registry.register(FakeConverter())

        with pytest.raises(PluginNotFoundError) as exc_info:
            registry.get("nonexistent_plugin")

        error_msg = str(exc_info.value)
        assert "nonexistent_plugin" in error_msg
        assert "Available" in error_msg

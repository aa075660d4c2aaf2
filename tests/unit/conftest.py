# tests/unit/conftest.py
"""
Test fixtures for unit tests.

Provides a stub-tree writer on top of tmp_path and a fake converter whose
acceptance is controlled by file suffix.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from .fakes import FakeConverter


def pytest_collection_modifyitems(items):
    """Mark pure discovery tests tier1, everything else tier2."""
    TIER1_PATTERNS = [
        "test_scope",
        "test_walker",
        "test_server_stub_acceptance",
        "test_contract_model",
        "test_options",
    ]

    for item in items:
        fspath = str(item.fspath)

        if "/unit/" not in fspath and "\\unit\\" not in fspath:
            continue

        has_tier = any(marker.name.startswith("tier") for marker in item.iter_markers())
        if has_tier:
            continue

        if any(pattern in fspath for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a file relative to tmp_path, creating parent directories."""

    def _write(relative: str, content: Any = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_converter() -> FakeConverter:
    return FakeConverter()

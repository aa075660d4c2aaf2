# stubkit/stubs/wiremock.py
"""
Default WireMock-style server stub.

WireMock mappings are JSON documents, so any .json file is claimed. Content
is not inspected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

MAPPING_SUFFIX = ".json"


@dataclass(frozen=True)
class WireMockHttpServerStub:
    """Accepts WireMock JSON stub mappings."""

    plugin_name: str = field(default="wiremock", repr=False)

    def is_accepted(self, file: Path) -> bool:
        return Path(file).name.endswith(MAPPING_SUFFIX)


__all__ = ["WireMockHttpServerStub", "MAPPING_SUFFIX"]

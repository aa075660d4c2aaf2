# stubkit/stubs/base.py
"""
HTTP server stub protocol.

A server stub is a mock HTTP server implementation. For discovery only its
acceptance check matters: which files it can load as stub mappings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class HttpServerStub(Protocol):
    """
    Protocol for mock HTTP server implementations.

    Example implementations:
    - WireMockHttpServerStub: WireMock JSON mappings (the built-in default)
    """

    def is_accepted(self, file: Path) -> bool:
        """Check if the file is a stub mapping this server can load."""
        ...


__all__ = ["HttpServerStub"]

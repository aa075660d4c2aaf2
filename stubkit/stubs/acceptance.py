# stubkit/stubs/acceptance.py
"""
Stub mapping acceptance.

Configured server stubs are asked in order and the first that accepts wins.
When none does, the built-in WireMock stub has the final say, so a caller
can extend acceptance without losing the default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

from stubkit.stubs.base import HttpServerStub
from stubkit.stubs.wiremock import WireMockHttpServerStub


class ServerStubAcceptance:
    """
    Decides whether a file is a stub mapping.

    Usage:
        acceptance = ServerStubAcceptance([MyServerStub()])
        if acceptance.accepts(path):
            ...
    """

    def __init__(
        self,
        http_server_stubs: Sequence[HttpServerStub] = (),
        default_stub: Optional[HttpServerStub] = None,
    ) -> None:
        self._stubs: Tuple[HttpServerStub, ...] = tuple(http_server_stubs)
        self._default = default_stub if default_stub is not None else WireMockHttpServerStub()

    @property
    def http_server_stubs(self) -> Tuple[HttpServerStub, ...]:
        return self._stubs

    def accepts(self, file: Path) -> bool:
        for stub in self._stubs:
            if stub.is_accepted(file):
                return True
        return self._default.is_accepted(file)


__all__ = ["ServerStubAcceptance"]

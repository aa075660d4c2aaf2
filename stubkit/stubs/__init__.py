# stubkit/stubs/__init__.py
"""Mock HTTP server stubs and stub mapping acceptance."""

from stubkit.stubs.acceptance import ServerStubAcceptance
from stubkit.stubs.base import HttpServerStub
from stubkit.stubs.wiremock import WireMockHttpServerStub

__all__ = [
    "HttpServerStub",
    "ServerStubAcceptance",
    "WireMockHttpServerStub",
]

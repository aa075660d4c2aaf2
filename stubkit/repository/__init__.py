# stubkit/repository/__init__.py
"""
Stub repository discovery.

The repository handles the "where" - walking a stub directory, scoping it to
a consumer and splitting it into stub mappings and contracts.
"""

from stubkit.repository.repository import StubRepository
from stubkit.repository.scope import ConsumerScopeFilter
from stubkit.repository.walker import DirectoryWalker

__all__ = [
    "ConsumerScopeFilter",
    "DirectoryWalker",
    "StubRepository",
]

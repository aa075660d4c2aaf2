# stubkit/repository/scope.py
"""
Consumer scoping for stub discovery.

With scoping enabled, a file belongs to a consumer when its absolute path
contains ``<sep><consumer_name><sep>``. The separators on both sides mean a
directory called ``billing-extra`` never matches consumer ``billing``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from stubkit.core.options import StubRunnerOptions
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)


class ConsumerScopeFilter:
    """Restricts discovery to the configured consumer's directory."""

    def __init__(self, options: Optional[StubRunnerOptions] = None) -> None:
        self._options = options or StubRunnerOptions()

    @property
    def options(self) -> StubRunnerOptions:
        return self._options

    @property
    def enabled(self) -> bool:
        return self._options.stubs_per_consumer

    @property
    def searched_segment(self) -> Optional[str]:
        if not self.enabled:
            return None
        return f"{os.sep}{self._options.consumer_name}{os.sep}"

    def matches(self, file: Path) -> bool:
        if not self.enabled:
            return True

        segment = self.searched_segment
        absolute_path = os.path.abspath(file)
        matching = segment in absolute_path
        logger.debug(
            f"Absolute path [{absolute_path}] contains [{segment}] in its path [{matching}]"
        )
        return matching


def matches(file: Path, options: Optional[StubRunnerOptions]) -> bool:
    """Convenience function for a one-off scope check."""
    return ConsumerScopeFilter(options).matches(file)


__all__ = ["ConsumerScopeFilter", "matches"]

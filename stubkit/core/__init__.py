# stubkit/core/__init__.py
"""
Core types shared across stubkit: the contract model, options, errors
and the converter registry.
"""

from stubkit.core.contract import (
    Contract,
    ContractRequest,
    ContractResponse,
    MessageInput,
    OutputMessage,
)
from stubkit.core.exceptions import (
    ConfigError,
    ContractConversionError,
    RepositoryConfigError,
    StubkitError,
)
from stubkit.core.options import StubRunnerOptions

__all__ = [
    "ConfigError",
    "Contract",
    "ContractConversionError",
    "ContractRequest",
    "ContractResponse",
    "MessageInput",
    "OutputMessage",
    "RepositoryConfigError",
    "StubRunnerOptions",
    "StubkitError",
]

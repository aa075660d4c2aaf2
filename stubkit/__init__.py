"""
stubkit - stub discovery for contract-driven testing.

Given a directory of recorded interactions, stubkit finds the files a mock
HTTP server needs and converts contract descriptors into canonical Contract
objects for verification and generation tooling.

Quick Start:
    >>> from stubkit import StubRepository, StubRunnerOptions
    >>> repo = StubRepository("target/stubs")
    >>> repo.stubs        # stub mapping files for the mock server
    >>> repo.contracts    # Contract objects

    Consumer scoping:
    >>> options = StubRunnerOptions(stubs_per_consumer=True, consumer_name="billing")
    >>> repo = StubRepository("target/stubs", options=options)

Architecture:
    stubkit/
    ├── core/          # Contract model, options, config, errors, registry
    ├── converter/     # Converter protocol, resolver, built-in converters
    │   └── plugins/   # Registered converters (Pact)
    ├── stubs/         # Mock server stub acceptance
    ├── repository/    # Walker, consumer scope, StubRepository
    └── logging/       # get_logger / configure_logging
"""

from stubkit.converter import ContractConverter, ConverterResolver, YamlContractConverter
from stubkit.core.config import load_options
from stubkit.core.contract import Contract
from stubkit.core.exceptions import (
    ConfigError,
    ContractConversionError,
    RepositoryConfigError,
    StubkitError,
)
from stubkit.core.options import StubRunnerOptions
from stubkit.core.registry import ConverterRegistry, get_contract_converters
from stubkit.repository import StubRepository
from stubkit.stubs import HttpServerStub, WireMockHttpServerStub

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Contract",
    "ContractConversionError",
    "ContractConverter",
    "ConverterRegistry",
    "ConverterResolver",
    "HttpServerStub",
    "RepositoryConfigError",
    "StubRepository",
    "StubRunnerOptions",
    "StubkitError",
    "WireMockHttpServerStub",
    "YamlContractConverter",
    "get_contract_converters",
    "load_options",
]

# stubkit/repository/repository.py
"""
StubRepository - wraps a folder of stub mappings and contract descriptors.

Construction does all the work, synchronously and exactly once:

1. Validate the root is an existing directory (RepositoryConfigError if not)
2. Walk the tree for stub mapping files: scope filter + server stub acceptance
3. Walk the tree again for contracts: scope filter + converter resolution

The two walks are independent; a file may end up in either output, both,
or neither. Results never change after construction.

Usage:
    repository = StubRepository(Path("target/stubs"))
    for mapping in repository.stubs:
        server.register(mapping)
    verifier.check(repository.contracts)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from stubkit.converter.router import ConverterResolver
from stubkit.core.contract import Contract
from stubkit.core.exceptions import RepositoryConfigError
from stubkit.core.options import StubRunnerOptions
from stubkit.core.registry import get_contract_converters
from stubkit.logging.logger import get_logger
from stubkit.repository.scope import ConsumerScopeFilter
from stubkit.repository.walker import DirectoryWalker
from stubkit.stubs.acceptance import ServerStubAcceptance
from stubkit.stubs.base import HttpServerStub

logger = get_logger(__name__)


class StubRepository:
    """
    Immutable view of the stubs and contracts stored under a directory.

    Args:
        path: Root directory holding stub mappings and contract descriptors.
        http_server_stubs: Server stubs consulted, in order, before the
            built-in WireMock stub.
        options: Consumer scoping options. Defaults to no scoping.
        contract_converters: Registered converters in precedence order.
            Defaults to the process-wide registry.
    """

    def __init__(
        self,
        path: Union[str, Path],
        http_server_stubs: Optional[Sequence[HttpServerStub]] = None,
        options: Optional[StubRunnerOptions] = None,
        contract_converters: Optional[Sequence[Any]] = None,
    ) -> None:
        root = Path(path)
        if not root.is_dir():
            raise RepositoryConfigError(
                f"Missing descriptor repository under path [{root}]", path=root
            )

        if contract_converters is None:
            contract_converters = get_contract_converters()

        self._path = root
        self._options = options or StubRunnerOptions()
        self._scope = ConsumerScopeFilter(self._options)
        self._acceptance = ServerStubAcceptance(http_server_stubs or ())
        self._resolver = ConverterResolver(contract_converters)
        self._walker = DirectoryWalker()
        logger.debug(f"Found the following contract converters {self._resolver!r}")

        self._stubs: Tuple[Path, ...] = self._collect_stubs()
        self._contracts: Tuple[Contract, ...] = self._collect_contracts()

        logger.info(
            f"Stub repository {root}: {len(self._stubs)} stub mapping(s), "
            f"{len(self._contracts)} contract(s)"
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    @property
    def stubs(self) -> Tuple[Path, ...]:
        return self._stubs

    @property
    def contracts(self) -> Tuple[Contract, ...]:
        return self._contracts

    @property
    def options(self) -> StubRunnerOptions:
        return self._options

    def get_path(self) -> Path:
        return self._path

    def get_stubs(self) -> Tuple[Path, ...]:
        return self._stubs

    def get_contracts(self) -> Tuple[Contract, ...]:
        return self._contracts

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    def _collect_stubs(self) -> Tuple[Path, ...]:
        return tuple(self._walker.collect(self._path, self._is_stub_mapping))

    def _collect_contracts(self) -> Tuple[Contract, ...]:
        return tuple(self._walker.flat_map(self._path, self._convert))

    def _is_stub_mapping(self, file: Path) -> bool:
        return self._scope.matches(file) and self._acceptance.accepts(file)

    def _convert(self, file: Path) -> Tuple[Contract, ...]:
        if not self._scope.matches(file):
            return ()
        # Failed outcomes raise ContractConversionError here
        return self._resolver.resolve(file).unwrap()

    def __repr__(self) -> str:
        return (
            f"StubRepository(path={str(self._path)!r}, stubs={len(self._stubs)}, "
            f"contracts={len(self._contracts)})"
        )


__all__ = ["StubRepository"]

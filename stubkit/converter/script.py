# stubkit/converter/script.py
"""
Script contract descriptors.

A script descriptor is a Python file that builds contracts in code. It is
executed with its parent directory on ``sys.path`` so it can import shared
definitions stored next to it, then the module-level names are inspected:

    contracts = [Contract(...), {...}]   # any iterable
    contract = Contract(...)             # a single contract

Items may be Contract instances or plain mappings in the descriptor
vocabulary. A script defining neither name yields no contracts.
"""

from __future__ import annotations

import importlib
import runpy
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Set

from pydantic import ValidationError

from stubkit.core.contract import Contract, name_contracts
from stubkit.core.exceptions import ContractConversionError
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)

SCRIPT_EXTENSIONS: Set[str] = {".py"}


def is_contract_script(file: Path) -> bool:
    """Check if a file is a script contract descriptor."""
    file = Path(file)
    return file.is_file() and file.suffix in SCRIPT_EXTENSIONS


@contextmanager
def _script_import_scope(directory: Path) -> Iterator[None]:
    """
    Make ``directory`` importable while a script descriptor runs.

    Modules imported from ``directory`` are dropped from ``sys.modules`` on
    exit, so a sibling directory's helper of the same name is loaded fresh.
    """
    entry = str(directory)
    added = entry not in sys.path
    if added:
        sys.path.insert(0, entry)
    importlib.invalidate_caches()
    before = set(sys.modules)
    try:
        yield
    finally:
        if added and entry in sys.path:
            sys.path.remove(entry)
        for name in _modules_loaded_from(directory, set(sys.modules) - before):
            del sys.modules[name]


def _modules_loaded_from(directory: Path, names: Set[str]) -> List[str]:
    root = directory.resolve()
    loaded = []
    for name in names:
        location = getattr(sys.modules.get(name), "__file__", None)
        if location and Path(location).resolve().is_relative_to(root):
            loaded.append(name)
    return loaded


class ContractScriptInterpreter:
    """
    Executes script descriptors and collects the contracts they define.

    Usage:
        interpreter = ContractScriptInterpreter()
        contracts = interpreter.convert_as_collection(path.parent, path)
    """

    def convert_as_collection(self, root_dir: Path, file: Path) -> List[Contract]:
        """
        Run a script descriptor and return its contracts.

        Args:
            root_dir: Directory holding definitions shared by the script.
            file: The script descriptor.

        Raises:
            ContractConversionError: If the script fails or defines invalid contracts.
        """
        file = Path(file)
        root_dir = Path(root_dir)

        try:
            with _script_import_scope(root_dir):
                namespace = runpy.run_path(str(file), run_name=f"stubkit_contract_{file.stem}")
        except (Exception, SystemExit) as e:
            raise ContractConversionError(
                f"Contract script failed: {type(e).__name__}: {e}",
                source=file,
                cause=e,
            ) from e

        items = self._collect(namespace, file)
        contracts: List[Contract] = []
        for position, item in enumerate(items):
            if isinstance(item, Contract):
                contracts.append(item)
                continue
            try:
                contracts.append(Contract.model_validate(item))
            except ValidationError as e:
                raise ContractConversionError(
                    f"Invalid contract at position {position}: {e}",
                    source=file,
                    cause=e,
                ) from e

        logger.debug(f"Script {file.name} defined {len(contracts)} contract(s)")
        return name_contracts(contracts, file)

    def _collect(self, namespace: dict, file: Path) -> List[Any]:
        if namespace.get("contracts") is not None:
            value = namespace["contracts"]
            if isinstance(value, (Contract, dict, str, bytes)):
                raise ContractConversionError(
                    "'contracts' must be an iterable of contracts", source=file
                )
            try:
                return list(value)
            except TypeError as e:
                raise ContractConversionError(
                    "'contracts' must be an iterable of contracts", source=file, cause=e
                ) from e

        if namespace.get("contract") is not None:
            return [namespace["contract"]]

        return []


__all__ = [
    "ContractScriptInterpreter",
    "SCRIPT_EXTENSIONS",
    "is_contract_script",
]

# stubkit/converter/base.py
"""
Converter protocol for contract descriptor formats.

Converters handle the "how" of contract loading - recognising a descriptor
file format and turning it into canonical Contract objects.

Flow: file → ContractConverter.is_accepted() → convert_from() → [Contract, ...]
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from stubkit.core.contract import Contract


@runtime_checkable
class ContractConverter(Protocol):
    """
    Protocol for contract converters.

    Example implementations:
    - YamlContractConverter: the default structured format (.yml/.yaml/.json)
    - PactContractConverter: Pact interaction files
    """

    plugin_name: str

    def is_accepted(self, file: Path) -> bool:
        """
        Check if this converter understands the given file.

        Must not raise for files of a foreign format - return False instead.
        """
        ...

    def convert_from(self, file: Path) -> Sequence[Contract]:
        """
        Convert an accepted file into contracts.

        Returns:
            Zero or more contracts.

        Raises:
            ContractConversionError: If the file is accepted but malformed.
        """
        ...


__all__ = ["ContractConverter"]

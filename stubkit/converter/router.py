# stubkit/converter/router.py
"""
ConverterResolver - Routes descriptor files to the converter that understands them.

Architecture:
    ┌──────────────────────────────────────────┐
    │            ConverterResolver             │
    │  Decides how a file becomes contracts    │
    └──────────────────────────────────────────┘
                        │
       ┌────────────────┼─────────────────┐
       │                │                 │
       ▼                ▼                 ▼
  script (.py)   registered plugins   YamlContractConverter
  (always wins)  (first match wins)   (default fallback)

A file no converter claims is NotApplicable and contributes nothing. A file
that was claimed but could not be converted is Failed; callers are expected
to raise its error rather than skip the file.

Usage:
    resolver = ConverterResolver(converters=get_contract_converters())
    outcome = resolver.resolve(path)
    contracts = outcome.unwrap()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from stubkit.converter.script import ContractScriptInterpreter, is_contract_script
from stubkit.converter.yaml_contract import YamlContractConverter
from stubkit.core.contract import Contract
from stubkit.core.exceptions import ContractConversionError
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Outcomes
# =============================================================================


@dataclass(frozen=True)
class NotApplicable:
    """No converter claimed the file."""

    file: Path

    def unwrap(self) -> Tuple[Contract, ...]:
        return ()


@dataclass(frozen=True)
class Converted:
    """A converter claimed the file and produced contracts (possibly none)."""

    file: Path
    converter: str
    contracts: Tuple[Contract, ...]

    def unwrap(self) -> Tuple[Contract, ...]:
        return self.contracts


@dataclass(frozen=True)
class Failed:
    """A converter claimed the file but could not convert it."""

    file: Path
    converter: str
    error: ContractConversionError

    def unwrap(self) -> Tuple[Contract, ...]:
        raise self.error


ConversionOutcome = Union[NotApplicable, Converted, Failed]


# =============================================================================
# Resolver
# =============================================================================


class ConverterResolver:
    """
    Resolves the converter for a file in strict precedence order.

    1. Script descriptor (by extension), regardless of registered converters
    2. First registered converter whose is_accepted() returns True
    3. Default structured-format converter
    """

    SCRIPT_CONVERTER = "script"

    def __init__(
        self,
        converters: Sequence[Any] = (),
        default_converter: Optional[Any] = None,
        script_interpreter: Optional[ContractScriptInterpreter] = None,
    ) -> None:
        self._converters: Tuple[Any, ...] = tuple(converters)
        self._default = (
            default_converter if default_converter is not None else YamlContractConverter.INSTANCE
        )
        self._scripts = (
            script_interpreter if script_interpreter is not None else ContractScriptInterpreter()
        )

    @property
    def converters(self) -> Tuple[Any, ...]:
        return self._converters

    def find_converter(self, file: Path) -> Optional[Any]:
        """First registered converter accepting the file, or None."""
        for converter in self._converters:
            if converter.is_accepted(file):
                return converter
        return None

    def resolve(self, file: Path) -> ConversionOutcome:
        """Convert a single file, reporting the outcome instead of raising."""
        file = Path(file)

        if is_contract_script(file):
            return self._run(
                file,
                self.SCRIPT_CONVERTER,
                lambda: self._scripts.convert_as_collection(file.parent, file),
            )

        converter = self.find_converter(file)
        if converter is None and self._default.is_accepted(file):
            converter = self._default

        if converter is None:
            return NotApplicable(file)

        name = getattr(converter, "plugin_name", type(converter).__name__)
        return self._run(file, name, lambda: converter.convert_from(file))

    def _run(self, file: Path, name: str, convert) -> ConversionOutcome:
        logger.debug(f"Converting {file} with {name!r}")
        try:
            contracts = tuple(convert())
        except ContractConversionError as e:
            return Failed(file, name, e)
        except Exception as e:
            return Failed(
                file,
                name,
                ContractConversionError(
                    f"Converter {name!r} failed: {type(e).__name__}: {e}",
                    source=file,
                    cause=e,
                ),
            )
        return Converted(file, name, contracts)

    def __repr__(self) -> str:
        names = [getattr(c, "plugin_name", type(c).__name__) for c in self._converters]
        return f"ConverterResolver(converters={names})"


__all__ = [
    "ConverterResolver",
    "ConversionOutcome",
    "NotApplicable",
    "Converted",
    "Failed",
]

# stubkit/converter/__init__.py
"""
Contract converters.

Converters handle the "how" of contract loading - recognising a descriptor
format and turning files into canonical Contract objects.
"""

from stubkit.converter.base import ContractConverter
from stubkit.converter.router import (
    ConversionOutcome,
    Converted,
    ConverterResolver,
    Failed,
    NotApplicable,
)
from stubkit.converter.script import ContractScriptInterpreter
from stubkit.converter.yaml_contract import YamlContractConverter

__all__ = [
    "ContractConverter",
    "ContractScriptInterpreter",
    "ConversionOutcome",
    "Converted",
    "ConverterResolver",
    "Failed",
    "NotApplicable",
    "YamlContractConverter",
]

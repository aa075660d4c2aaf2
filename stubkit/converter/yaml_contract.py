# stubkit/converter/yaml_contract.py
"""
Default structured-format converter.

Handles YAML contract descriptors, and JSON files that carry the same
structure (JSON being a subset of YAML). A file may hold a single contract,
a list of contracts, or several YAML documents separated by ``---``.

YAML files are accepted by extension alone, so a broken .yml file fails
loudly during conversion. JSON files are only accepted when their content
looks like a contract, because most .json files in a stub tree are mock
server mappings rather than contracts.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, List, Set

import yaml
from pydantic import ValidationError

from stubkit.core.contract import Contract, name_contracts
from stubkit.core.exceptions import ContractConversionError
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)

YAML_EXTENSIONS: Set[str] = {".yml", ".yaml"}
JSON_EXTENSIONS: Set[str] = {".json"}


def looks_like_contract(document: Any) -> bool:
    """Check whether a parsed document has the shape of one or more contracts."""
    if isinstance(document, list):
        return bool(document) and all(looks_like_contract(item) for item in document)

    if not isinstance(document, dict):
        return False

    request = document.get("request")
    if isinstance(request, dict):
        return "url" in request or "urlPath" in request or "url_path" in request

    return "input" in document or "outputMessage" in document


@dataclass
class YamlContractConverter:
    """
    Converter for the default structured contract format.

    Example:
        converter = YamlContractConverter.INSTANCE
        if converter.is_accepted(path):
            contracts = converter.convert_from(path)
    """

    INSTANCE: ClassVar["YamlContractConverter"]

    plugin_name: str = field(default="yaml", repr=False)

    def is_accepted(self, file: Path) -> bool:
        file = Path(file)
        if not file.is_file():
            return False

        ext = file.suffix.lower()
        if ext in YAML_EXTENSIONS:
            return True
        if ext not in JSON_EXTENSIONS:
            return False

        try:
            document = json.loads(file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            return False
        return looks_like_contract(document)

    def convert_from(self, file: Path) -> List[Contract]:
        file = Path(file)
        documents = self._load_documents(file)

        contracts: List[Contract] = []
        for position, document in enumerate(documents):
            try:
                contracts.append(Contract.model_validate(document))
            except ValidationError as e:
                raise ContractConversionError(
                    f"Invalid contract at position {position}: {e}",
                    source=file,
                    cause=e,
                ) from e

        logger.debug(f"Converted {len(contracts)} contract(s) from {file.name}")
        return name_contracts(contracts, file)

    def _load_documents(self, file: Path) -> List[Any]:
        """Read a file and flatten it into a list of raw contract documents."""
        try:
            text = file.read_text(encoding="utf-8")
            if file.suffix.lower() in JSON_EXTENSIONS:
                raw = [json.loads(text)]
            else:
                raw = list(yaml.safe_load_all(text))
        except (OSError, UnicodeDecodeError) as e:
            raise ContractConversionError(
                f"Failed to read contract file: {e}", source=file, cause=e
            ) from e
        except (yaml.YAMLError, ValueError) as e:
            raise ContractConversionError(
                f"Invalid contract syntax: {e}", source=file, cause=e
            ) from e

        documents: List[Any] = []
        for item in raw:
            if item is None:
                continue
            if isinstance(item, list):
                documents.extend(item)
            else:
                documents.append(item)
        return documents


YamlContractConverter.INSTANCE = YamlContractConverter()


__all__ = [
    "YamlContractConverter",
    "YAML_EXTENSIONS",
    "JSON_EXTENSIONS",
    "looks_like_contract",
]

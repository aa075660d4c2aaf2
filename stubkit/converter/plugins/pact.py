# stubkit/converter/plugins/pact.py
"""
Pact file converter.

Converts Pact interaction files (Pact v2 and v3 formats) into contracts:
one HTTP contract per interaction. Consumer, provider and provider states
are kept under ``metadata["pact"]``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import parse_qs

from pydantic import ValidationError

from stubkit.core.contract import Contract, ContractRequest, ContractResponse
from stubkit.core.exceptions import ContractConversionError
from stubkit.logging.logger import get_logger

logger = get_logger(__name__)

_NAME_PATTERN = re.compile(r"[^a-z0-9]+")


def _participant(document: Dict[str, Any], key: str) -> str:
    value = document.get(key)
    if isinstance(value, dict):
        return str(value.get("name", ""))
    return str(value or "")


def _query_parameters(query: Any) -> Dict[str, Any]:
    """Normalise v2 (string) and v3 (mapping of lists) query encodings."""
    if not query:
        return {}

    if isinstance(query, str):
        parsed: Dict[str, Any] = parse_qs(query, keep_blank_values=True)
    elif isinstance(query, dict):
        parsed = dict(query)
    else:
        raise ValueError(f"unsupported query encoding: {type(query).__name__}")

    return {
        key: values[0] if isinstance(values, list) and len(values) == 1 else values
        for key, values in parsed.items()
    }


@dataclass
class PactContractConverter:
    """
    Converter for Pact JSON files.

    Example:
        converter = PactContractConverter()
        if converter.is_accepted(path):
            contracts = converter.convert_from(path)
    """

    plugin_name: str = field(default="pact", repr=False)

    def is_accepted(self, file: Path) -> bool:
        file = Path(file)
        if not file.is_file() or file.suffix.lower() != ".json":
            return False

        try:
            document = json.loads(file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            return False

        return (
            isinstance(document, dict)
            and "consumer" in document
            and "provider" in document
            and isinstance(document.get("interactions"), list)
        )

    def convert_from(self, file: Path) -> List[Contract]:
        file = Path(file)
        try:
            document = json.loads(file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise ContractConversionError(
                f"Failed to read Pact file: {e}", source=file, cause=e
            ) from e

        consumer = _participant(document, "consumer")
        provider = _participant(document, "provider")

        contracts: List[Contract] = []
        for index, interaction in enumerate(document.get("interactions", [])):
            try:
                contracts.append(
                    self._convert_interaction(interaction, index, consumer, provider, file)
                )
            except (KeyError, ValidationError, ValueError, TypeError, AttributeError) as e:
                raise ContractConversionError(
                    f"Invalid Pact interaction at position {index}: {e}",
                    source=file,
                    cause=e,
                ) from e

        logger.debug(
            f"Converted {len(contracts)} Pact interaction(s) between "
            f"{consumer!r} and {provider!r} from {file.name}"
        )
        return contracts

    def _convert_interaction(
        self,
        interaction: Dict[str, Any],
        index: int,
        consumer: str,
        provider: str,
        file: Path,
    ) -> Contract:
        description = interaction.get("description") or f"interaction {index}"
        request = interaction["request"]
        response = interaction["response"]

        states = interaction.get("providerStates")
        if states is None and interaction.get("providerState"):
            states = [{"name": interaction["providerState"]}]

        return Contract(
            name=_NAME_PATTERN.sub("_", description.lower()).strip("_") or f"interaction_{index}",
            description=description,
            request=ContractRequest(
                method=str(request["method"]).upper(),
                url_path=request["path"],
                headers=request.get("headers") or {},
                query_parameters=_query_parameters(request.get("query")),
                body=request.get("body"),
            ),
            response=ContractResponse(
                status=response["status"],
                headers=response.get("headers") or {},
                body=response.get("body"),
            ),
            metadata={
                "pact": {
                    "consumer": consumer,
                    "provider": provider,
                    "providerStates": states or [],
                }
            },
            source_file=file,
        )


__all__ = ["PactContractConverter"]

# stubkit/core/contract.py
"""
Canonical contract model.

A Contract describes one recorded interaction with a collaborating service:
either an HTTP request/response pair or a messaging input/output pair.
Contracts are only ever produced by converters; the discovery core passes
them through untouched.

Field names follow the descriptor vocabulary (urlPath, queryParameters,
outputMessage, ...) through aliases, so a parsed YAML or JSON document can be
validated directly with Contract.model_validate().
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ContractRequest(BaseModel):
    """HTTP request side of a contract."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    method: str = Field(..., description="HTTP method (GET, POST, ...)")
    url: Optional[str] = Field(default=None, description="Exact URL, including query string")
    url_path: Optional[str] = Field(
        default=None, alias="urlPath", description="URL path without query string"
    )
    headers: Dict[str, Any] = Field(default_factory=dict)
    query_parameters: Dict[str, Any] = Field(default_factory=dict, alias="queryParameters")
    body: Any = None

    @model_validator(mode="after")
    def _require_target(self) -> "ContractRequest":
        if not self.url and not self.url_path:
            raise ValueError("request must define either 'url' or 'urlPath'")
        return self

    @property
    def target(self) -> str:
        """URL or URL path the request is matched against."""
        return self.url or self.url_path or ""


class ContractResponse(BaseModel):
    """HTTP response side of a contract."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    status: int = Field(..., ge=100, le=599, description="HTTP status code")
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: Any = None


class MessageInput(BaseModel):
    """What triggers a messaging contract."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    triggered_by: Optional[str] = Field(default=None, alias="triggeredBy")
    message_from: Optional[str] = Field(default=None, alias="messageFrom")
    message_body: Any = Field(default=None, alias="messageBody")
    message_headers: Dict[str, Any] = Field(default_factory=dict, alias="messageHeaders")


class OutputMessage(BaseModel):
    """Message expected to be sent by a messaging contract."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    sent_to: str = Field(..., alias="sentTo", description="Destination channel")
    body: Any = None
    headers: Dict[str, Any] = Field(default_factory=dict)


class Contract(BaseModel):
    """
    One request/response (or message) interaction.

    Exactly one shape must be present: request + response for HTTP, or
    input and/or outputMessage for messaging.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    label: Optional[str] = None
    priority: Optional[int] = None
    ignored: bool = False
    metadata: Dict[str, Any] = Field(default_factory=dict)

    request: Optional[ContractRequest] = None
    response: Optional[ContractResponse] = None
    input: Optional[MessageInput] = None
    output_message: Optional[OutputMessage] = Field(default=None, alias="outputMessage")

    source_file: Optional[Path] = Field(
        default=None,
        alias="sourceFile",
        description="Descriptor file this contract was converted from",
    )

    @model_validator(mode="after")
    def _require_interaction(self) -> "Contract":
        is_http = self.request is not None or self.response is not None
        is_messaging = self.input is not None or self.output_message is not None

        if is_http and is_messaging:
            raise ValueError("contract cannot mix HTTP and messaging sections")
        if is_http and (self.request is None or self.response is None):
            raise ValueError("HTTP contract requires both 'request' and 'response'")
        if not is_http and not is_messaging:
            raise ValueError(
                "contract requires 'request'/'response' or 'input'/'outputMessage'"
            )
        return self

    @property
    def is_messaging(self) -> bool:
        return self.request is None


def name_contracts(contracts: List[Contract], source: Path) -> List[Contract]:
    """
    Fill in missing names and provenance for contracts converted from one file.

    A single unnamed contract takes the file stem; several unnamed contracts
    take ``<stem>_<index>`` by position in the file.
    """
    stem = source.name.split(".", 1)[0] or source.name
    named: List[Contract] = []

    for index, contract in enumerate(contracts):
        updates: Dict[str, Any] = {}
        if not contract.name:
            updates["name"] = stem if len(contracts) == 1 else f"{stem}_{index}"
        if contract.source_file is None:
            updates["source_file"] = source
        named.append(contract.model_copy(update=updates) if updates else contract)

    return named


__all__ = [
    "Contract",
    "ContractRequest",
    "ContractResponse",
    "MessageInput",
    "OutputMessage",
    "name_contracts",
]

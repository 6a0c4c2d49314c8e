"""Shared pieces for Apollo tool modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type

from ..schemas import ToolParams
from ..transport.contract import MCP_OPERATIONS

Handler = Callable[[Any, Any], Awaitable[Any]]


@dataclass(frozen=True)
class OperationDefinition:
    """One named Apollo capability: its input contract plus the handler."""

    name: str
    description: str
    params_model: Type[ToolParams]
    handler: Handler

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.params_model.model_json_schema()

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


async def send(
    client,
    tool: str,
    body: Optional[Mapping[str, Any]] = None,
    query: Optional[Mapping[str, Optional[str]]] = None,
    **ids: str,
) -> Any:
    """Issue the HTTP call registered for ``tool`` in the route table."""
    contract = MCP_OPERATIONS[tool]
    return await client.request(contract.http_method, contract.path(**ids), body=body, query_params=query)

"""
Apollo Tools Registration

Builds the operation registry: every tool's name, description, input contract
and handler, in a stable people → usage grouping.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from ..errors import ApolloValidationError, OperationNotFoundError
from .base import OperationDefinition

logger = logging.getLogger("apollo.tools")


class OperationRegistry:
    """Name → operation catalog. Populated once at startup, read-only afterwards."""

    def __init__(self, definitions: Iterable[OperationDefinition] = ()):
        self._operations: Dict[str, OperationDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: OperationDefinition) -> None:
        if definition.name in self._operations:
            raise ValueError(f"Duplicate tool name: {definition.name}")
        self._operations[definition.name] = definition

    def __contains__(self, name: str) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def names(self) -> List[str]:
        return list(self._operations)

    def list(self) -> List[OperationDefinition]:
        return list(self._operations.values())

    def describe(self) -> List[Dict[str, Any]]:
        return [definition.describe() for definition in self._operations.values()]

    def get(self, name: str) -> OperationDefinition:
        try:
            return self._operations[name]
        except KeyError:
            raise OperationNotFoundError(name) from None

    def validate(self, name: str, raw_args: Optional[Mapping[str, Any]]):
        """Validate raw arguments against the named tool's contract."""
        definition = self.get(name)
        try:
            return definition.params_model.model_validate(dict(raw_args or {}))
        except ValidationError as exc:
            raise ApolloValidationError(
                f"Invalid arguments for {name}",
                details=exc.errors(include_url=False, include_context=False),
            ) from exc

    async def invoke(self, name: str, raw_args: Optional[Mapping[str, Any]], client) -> Any:
        """Validate and run one tool, returning Apollo's result."""
        params = self.validate(name, raw_args)
        logger.debug(f"Invoking {name}")
        return await self.get(name).handler(client, params)


def get_operation_definitions() -> List[OperationDefinition]:
    """Get all Apollo tool definitions in registration order."""
    from . import accounts, contacts, emails, fields, organizations, people, sequences, usage

    return [
        *people.OPERATIONS,
        *organizations.OPERATIONS,
        *contacts.OPERATIONS,
        *accounts.OPERATIONS,
        *sequences.OPERATIONS,
        *emails.OPERATIONS,
        *fields.OPERATIONS,
        *usage.OPERATIONS,
    ]


def build_registry() -> OperationRegistry:
    return OperationRegistry(get_operation_definitions())


_registry: Optional[OperationRegistry] = None


def get_registry() -> OperationRegistry:
    """Get the process-wide registry, building it on first use."""
    global _registry
    if _registry is None:
        _registry = build_registry()
    return _registry


def get_tool_names() -> List[str]:
    """Get list of available tool names."""
    return get_registry().names()


__all__ = [
    "OperationDefinition",
    "OperationRegistry",
    "build_registry",
    "get_operation_definitions",
    "get_registry",
    "get_tool_names",
]

"""MCP server exposing the Apollo.io REST API as schema-validated tools."""

from .client import ApolloClient
from .errors import (
    ApolloError,
    ApolloValidationError,
    ConfigurationError,
    OperationNotFoundError,
    TransportFault,
)
from .invocation import ToolResponse, call_operation
from .normalizers import clean_domain, strip_undefined
from .tools import OperationDefinition, OperationRegistry, build_registry, get_registry

__version__ = "1.0.0"

__all__ = [
    "ApolloClient",
    "ApolloError",
    "ApolloValidationError",
    "ConfigurationError",
    "OperationNotFoundError",
    "TransportFault",
    "ToolResponse",
    "call_operation",
    "clean_domain",
    "strip_undefined",
    "OperationDefinition",
    "OperationRegistry",
    "build_registry",
    "get_registry",
]

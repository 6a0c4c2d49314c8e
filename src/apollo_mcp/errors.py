"""Error taxonomy and uniform error payloads for the Apollo MCP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ErrorPayload:
    """Structured error payload returned to MCP clients."""

    message: str
    status: Optional[int] = None
    details: Any = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": True}
        if self.status is not None:
            payload["status"] = self.status
        payload["message"] = self.message
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ApolloError(Exception):
    """Base exception for all Apollo MCP failures."""

    code: str = "APOLLO_ERROR"

    def __init__(self, message: str, *, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> Dict[str, Any]:
        return ErrorPayload(self.message, details=self.details).to_dict()


class ConfigurationError(ApolloError):
    code = "CONFIGURATION_ERROR"


class ApolloValidationError(ApolloError):
    """Raw arguments were rejected by an operation's input contract."""

    code = "VALIDATION_ERROR"


class OperationNotFoundError(ApolloError):
    code = "OPERATION_NOT_FOUND"

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", details={"name": name})
        self.name = name


class TransportFault(ApolloError):
    """Network-level failure while talking to Apollo. Carries no status code."""

    code = "TRANSPORT_FAULT"


def error_result(status: int, message: Any, details: Any) -> Dict[str, Any]:
    """Return the uniform error Result for a failed upstream response."""
    return {
        "error": True,
        "status": status,
        "message": message,
        "details": details,
    }


def is_error_result(result: Any) -> bool:
    return isinstance(result, dict) and result.get("error") is True


__all__ = [
    "ErrorPayload",
    "ApolloError",
    "ConfigurationError",
    "ApolloValidationError",
    "OperationNotFoundError",
    "TransportFault",
    "error_result",
    "is_error_result",
]

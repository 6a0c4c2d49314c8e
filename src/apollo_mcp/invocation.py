"""Invocation wrapper: run one tool and turn any outcome into a text payload."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import ApolloError, ErrorPayload, is_error_result

logger = logging.getLogger("apollo.invocation")


@dataclass(frozen=True)
class ToolResponse:
    content: str
    is_error: bool = False


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


async def call_operation(
    registry,
    name: str,
    raw_args: Optional[Mapping[str, Any]],
    client,
) -> ToolResponse:
    """
    Validate and run ``name``. Never raises.

    Upstream error results are returned by the client rather than raised, so
    they come back as ordinary content with ``is_error`` unset.
    """
    try:
        result = await registry.invoke(name, raw_args, client)
    except ApolloError as exc:
        logger.warning(f"{name} failed: {exc.message}")
        return ToolResponse(_dump(exc.to_payload()), is_error=True)
    except Exception as exc:
        logger.exception(f"Unexpected error calling tool {name}")
        return ToolResponse(_dump(ErrorPayload(str(exc) or type(exc).__name__).to_dict()), is_error=True)

    if is_error_result(result):
        logger.warning(f"{name}: Apollo returned {result.get('status')}: {result.get('message')}")
    return ToolResponse(_dump(result))


__all__ = ["ToolResponse", "call_operation"]

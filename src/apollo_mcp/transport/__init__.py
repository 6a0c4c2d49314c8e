"""Transport contract definitions for Apollo operations."""

from .contract import API_PREFIX, MCP_OPERATIONS, TOOL_CONTRACTS, ToolContract

__all__ = ["API_PREFIX", "ToolContract", "TOOL_CONTRACTS", "MCP_OPERATIONS"]

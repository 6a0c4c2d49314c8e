"""
Apollo Stdio Server

Creates and configures the MCP stdio server exposing the Apollo tool registry.
"""

import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.types import CallToolResult, TextContent, Tool

from .config import config
from .invocation import call_operation
from .tools import OperationRegistry, get_registry

logger = logging.getLogger("apollo.server")


def build_tool_list(registry: OperationRegistry) -> List[Tool]:
    """Describe every registered operation as an MCP tool."""
    return [
        Tool(name=definition.name, description=definition.description, inputSchema=definition.input_schema)
        for definition in registry.list()
    ]


async def run_tool(
    registry: OperationRegistry,
    client,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> CallToolResult:
    response = await call_operation(registry, name, arguments, client)
    return CallToolResult(
        content=[TextContent(type="text", text=response.content)],
        isError=response.is_error,
    )


def create_stdio_server(client, registry: Optional[OperationRegistry] = None) -> Server:
    """Create and configure the Apollo stdio server."""
    registry = registry or get_registry()
    server = Server(config.server_name)

    @server.list_tools()
    async def handle_list_tools() -> List[Tool]:
        """List available Apollo tools."""
        return build_tool_list(registry)

    # Arguments are validated by each tool's own contract.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict) -> CallToolResult:
        logger.info(f"Calling tool: {name}")
        logger.debug(f"Arguments for {name}: {arguments}")
        return await run_tool(registry, client, name, arguments)

    return server

#!/usr/bin/env python3
"""
Apollo.io MCP Server (Stdio)

Exposes Apollo people/company search, enrichment, CRM and sequence
operations as MCP tools over the stdio transport.
"""

import asyncio
import logging
import sys

from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import ServerCapabilities, ToolsCapability

from .client import close_client, get_client, initialize_client
from .config import MISSING_API_KEY, config
from .logging_setup import setup_logging
from .server_stdio import create_stdio_server
from .tools import get_registry

logger = logging.getLogger("apollo")


async def main():
    """Serve the Apollo tools until stdin closes."""
    await initialize_client()

    registry = get_registry()
    server = create_stdio_server(get_client(), registry)
    logger.info(f"Apollo MCP Server ready with {len(registry)} tools")

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=config.server_name,
                    server_version=config.server_version,
                    capabilities=ServerCapabilities(
                        tools=ToolsCapability(listChanged=False)
                    )
                )
            )
    finally:
        await close_client()
        logger.info("Apollo MCP Server shutdown complete")


def run():
    """Console entry point. Refuses to start without an API key."""
    secrets = [config.api_key] if config.has_api_key else []
    setup_logging('apollo', level=config.log_level, secrets=secrets)

    if not config.has_api_key:
        logger.error(f"ERROR: {MISSING_API_KEY}")
        sys.exit(1)

    logger.info("Starting Apollo.io MCP Server (Stdio)")
    asyncio.run(main())


if __name__ == "__main__":
    run()

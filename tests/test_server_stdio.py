import asyncio
import json

from mcp.types import CallToolRequest, CallToolResult, ListToolsRequest

from apollo_mcp.server_stdio import build_tool_list, create_stdio_server, run_tool


def test_tool_list_mirrors_registry(registry):
    tools = build_tool_list(registry)

    assert [tool.name for tool in tools] == registry.names()
    enrich = next(tool for tool in tools if tool.name == "enrich_organization")
    assert enrich.inputSchema["required"] == ["domain"]
    assert "1 CREDIT" in enrich.description


def test_run_tool_wraps_result_as_text(registry, client):
    client.response = {"credits": 42}

    result = asyncio.run(run_tool(registry, client, "get_api_usage_stats", {}))

    assert isinstance(result, CallToolResult)
    assert result.isError is False
    assert result.content[0].type == "text"
    assert json.loads(result.content[0].text) == {"credits": 42}


def test_run_tool_flags_failures(registry, client):
    result = asyncio.run(run_tool(registry, client, "get_contact", {}))

    assert result.isError is True
    assert json.loads(result.content[0].text)["message"] == "Invalid arguments for get_contact"


def test_server_registers_tool_handlers(registry, client):
    server = create_stdio_server(client, registry)

    assert server.name == "apollo-io"
    assert ListToolsRequest in server.request_handlers
    assert CallToolRequest in server.request_handlers

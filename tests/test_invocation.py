import asyncio
import json

from apollo_mcp.errors import TransportFault
from apollo_mcp.invocation import call_operation


def _call(registry, client, name, args=None):
    response = asyncio.run(call_operation(registry, name, args, client))
    return response, json.loads(response.content)


def test_success_is_pretty_printed_json(registry, client):
    client.response = {"people": [{"name": "Zoë"}]}

    response, payload = _call(registry, client, "search_people", {})

    assert response.is_error is False
    assert payload == {"people": [{"name": "Zoë"}]}
    assert "\n  " in response.content
    assert "Zoë" in response.content


def test_upstream_error_result_is_passed_through(registry, client):
    client.response = {"error": True, "status": 404, "message": "Not found", "details": {"id": "x"}}

    response, payload = _call(registry, client, "get_contact", {"contact_id": "x"})

    assert response.is_error is False
    assert payload == client.response


def test_handler_exception_becomes_error_payload(registry, client):
    client.exc = RuntimeError("boom")

    response, payload = _call(registry, client, "list_email_accounts", {})

    assert response.is_error is True
    assert payload == {"error": True, "message": "boom"}


def test_exception_without_message_uses_type_name(registry, client):
    client.exc = KeyError()

    response, payload = _call(registry, client, "list_email_accounts")

    assert response.is_error is True
    assert payload["message"] == "KeyError"


def test_transport_fault_has_no_status(registry, client):
    client.exc = TransportFault("Connection error: refused", details={"method": "GET", "path": "/api/v1/fields"})

    response, payload = _call(registry, client, "list_fields")

    assert response.is_error is True
    assert "status" not in payload
    assert payload["message"] == "Connection error: refused"


def test_invalid_arguments_never_reach_apollo(registry, client):
    response, payload = _call(registry, client, "search_people", {"per_page": 500})

    assert response.is_error is True
    assert payload["message"] == "Invalid arguments for search_people"
    assert payload["details"][0]["loc"] == ["per_page"]
    assert client.requests == []


def test_unknown_tool(registry, client):
    response, payload = _call(registry, client, "nope")

    assert response.is_error is True
    assert payload == {"error": True, "message": "Unknown tool: nope", "details": {"name": "nope"}}


def test_missing_arguments_treated_as_empty(registry, client):
    response, _ = _call(registry, client, "get_api_usage_stats", None)

    assert response.is_error is False
    assert client.last.body == {}

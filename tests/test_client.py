import asyncio
import json

import pytest
from aiohttp import web
from aiohttp import test_utils

from apollo_mcp.client import ApolloClient, build_request, decode_body
from apollo_mcp.errors import TransportFault


class _Recorder:
    """aiohttp handler that records the incoming request and replies as told."""

    def __init__(self, reply):
        self.reply = reply
        self.seen = []

    async def __call__(self, request: web.Request) -> web.StreamResponse:
        self.seen.append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "headers": request.headers.copy(),
            "body": await request.text(),
        })
        return self.reply()


def _serve(reply, scenario):
    recorder = _Recorder(reply)

    async def _run():
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", recorder)
        server = test_utils.TestServer(app)
        await server.start_server()
        try:
            async with ApolloClient("secret-key", base_url=f"http://{server.host}:{server.port}") as client:
                return await scenario(client)
        finally:
            await server.close()

    return asyncio.run(_run()), recorder.seen


def test_success_returns_decoded_body_verbatim():
    result, seen = _serve(
        lambda: web.json_response({"people": [{"id": "p1"}]}),
        lambda c: c.post("/api/v1/mixed_people/search", {"page": 1}),
    )

    assert result == {"people": [{"id": "p1"}]}
    assert seen[0]["method"] == "POST"
    assert seen[0]["path"] == "/api/v1/mixed_people/search"
    assert json.loads(seen[0]["body"]) == {"page": 1}


def test_every_request_carries_key_and_content_type():
    _, seen = _serve(lambda: web.json_response({}), lambda c: c.get("/api/v1/email_accounts"))

    headers = seen[0]["headers"]
    assert headers["X-Api-Key"] == "secret-key"
    assert headers["Content-Type"] == "application/json"


def test_get_never_sends_a_body():
    _, seen = _serve(
        lambda: web.json_response({}),
        lambda c: c.request("GET", "/api/v1/fields", body={"ignored": True}),
    )

    assert seen[0]["body"] == ""


def test_query_params_skip_empty_and_missing_values():
    _, seen = _serve(
        lambda: web.json_response({}),
        lambda c: c.get("/api/v1/emailer_messages/search", {
            "contact_id": "",
            "emailer_campaign_id": None,
            "page": "2",
            "per_page": "25",
        }),
    )

    assert seen[0]["query"] == {"page": "2", "per_page": "25"}


def test_error_prefers_message_field():
    result, _ = _serve(
        lambda: web.json_response({"message": "Invalid request", "error": "bad"}, status=422),
        lambda c: c.post("/api/v1/contacts", {"first_name": "A"}),
    )

    assert result == {
        "error": True,
        "status": 422,
        "message": "Invalid request",
        "details": {"message": "Invalid request", "error": "bad"},
    }


def test_error_falls_back_to_error_field():
    result, _ = _serve(
        lambda: web.json_response({"error": "Unauthorized key"}, status=401),
        lambda c: c.get("/api/v1/email_accounts"),
    )

    assert result["status"] == 401
    assert result["message"] == "Unauthorized key"


def test_error_with_plain_text_body_uses_status_text():
    result, _ = _serve(
        lambda: web.Response(status=503, text="Service Unavailable"),
        lambda c: c.get("/api/v1/organizations/o1"),
    )

    assert result == {
        "error": True,
        "status": 503,
        "message": "Service Unavailable",
        "details": {"raw_response": "Service Unavailable"},
    }


def test_non_json_success_is_wrapped():
    result, _ = _serve(
        lambda: web.Response(status=200, text="OK"),
        lambda c: c.post("/api/v1/usage_stats/api_usage_stats", {}),
    )

    assert result == {"raw_response": "OK"}


def test_empty_success_body_is_wrapped():
    result, _ = _serve(
        lambda: web.Response(status=204),
        lambda c: c.patch("/api/v1/contacts/1", {"email": "a@b.com"}),
    )

    assert result == {"raw_response": ""}


def test_connection_failure_raises_transport_fault():
    async def _run():
        server = test_utils.TestServer(web.Application())
        await server.start_server()
        base_url = f"http://{server.host}:{server.port}"
        await server.close()

        async with ApolloClient("secret-key", base_url=base_url) as client:
            await client.get("/api/v1/email_accounts")

    with pytest.raises(TransportFault) as info:
        asyncio.run(_run())

    assert info.value.details == {"method": "GET", "path": "/api/v1/email_accounts"}
    assert "secret-key" not in str(info.value)


class TestBuildRequest:
    def test_body_only_for_payload_methods(self):
        assert build_request("GET", "/x", body={"a": 1}).body is None
        for method in ("POST", "PATCH", "PUT"):
            assert build_request(method, "/x", body={"a": 1}).body == {"a": 1}

    def test_url_joins_base_path_and_query(self):
        req = build_request("GET", "/api/v1/organizations/enrich", query_params={"domain": "acme.io", "x": ""})

        assert req.url("https://api.apollo.io") == "https://api.apollo.io/api/v1/organizations/enrich?domain=acme.io"

    def test_url_without_query_has_no_question_mark(self):
        req = build_request("GET", "/api/v1/fields", query_params={"entity_type": None})

        assert req.url("https://api.apollo.io") == "https://api.apollo.io/api/v1/fields"

    def test_rejects_unknown_method_and_relative_path(self):
        with pytest.raises(ValueError):
            build_request("DELETE", "/api/v1/contacts/1")
        with pytest.raises(ValueError):
            build_request("GET", "")
        with pytest.raises(ValueError):
            build_request("GET", "api/v1/fields")


def test_decode_body_wraps_invalid_json():
    assert decode_body('{"a": 1}') == {"a": 1}
    assert decode_body("<html>502</html>") == {"raw_response": "<html>502</html>"}


def test_repr_hides_api_key():
    assert "secret-key" not in repr(ApolloClient("secret-key"))

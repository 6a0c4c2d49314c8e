import logging

import pytest

from apollo_mcp import main as main_module
from apollo_mcp.config import DEFAULT_BASE_URL, MISSING_API_KEY, ApolloConfig
from apollo_mcp.errors import ConfigurationError
from apollo_mcp.logging_setup import _RedactFilter


class TestApolloConfig:
    def test_missing_key_raises(self):
        cfg = ApolloConfig(environ={})

        assert cfg.has_api_key is False
        with pytest.raises(ConfigurationError, match=MISSING_API_KEY):
            cfg.api_key

    def test_blank_key_counts_as_missing(self):
        assert ApolloConfig(environ={"APOLLO_API_KEY": "   "}).has_api_key is False

    def test_key_and_defaults(self):
        cfg = ApolloConfig(environ={"APOLLO_API_KEY": "k1"})

        assert cfg.api_key == "k1"
        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.log_level == "INFO"
        assert cfg.server_name == "apollo-io"

    def test_base_url_override_drops_trailing_slash(self):
        cfg = ApolloConfig(environ={"APOLLO_API_BASE_URL": "http://localhost:8080/"})

        assert cfg.base_url == "http://localhost:8080"


def _record(msg, *args):
    return logging.LogRecord("apollo.client", logging.INFO, __file__, 1, msg, args, None)


class TestRedactFilter:
    def test_masks_secret_in_arguments(self):
        record = _record("using key %s", "sk-live-123")

        assert _RedactFilter(["sk-live-123"]).filter(record) is True
        assert record.getMessage() == "using key ***"

    def test_leaves_other_records_untouched(self):
        record = _record("GET %s", "/api/v1/fields")

        _RedactFilter(["sk-live-123"]).filter(record)

        assert record.args == ("/api/v1/fields",)

    def test_no_secrets_is_a_passthrough(self):
        record = _record("plain")

        assert _RedactFilter([""]).filter(record) is True
        assert record.getMessage() == "plain"


def test_run_exits_without_api_key(monkeypatch, caplog):
    monkeypatch.delenv("APOLLO_API_KEY", raising=False)
    monkeypatch.setattr(main_module, "setup_logging", lambda *args, **kwargs: None)

    with caplog.at_level(logging.ERROR, logger="apollo"):
        with pytest.raises(SystemExit) as info:
            main_module.run()

    assert info.value.code == 1
    assert MISSING_API_KEY in caplog.text

import pytest

from apollo_mcp.normalizers import clean_domain, clean_domains, strip_undefined


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://www.Example.com/path", "Example.com"),
        ("http://acme.io", "acme.io"),
        ("www.acme.io", "acme.io"),
        ("@acme.io", "acme.io"),
        ("acme.io/careers?ref=x", "acme.io"),
        ("acme.io", "acme.io"),
        ("", ""),
        ("@www.acme.io", "acme.io"),
    ],
)
def test_clean_domain(raw, expected):
    assert clean_domain(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["https://www.Example.com/path", "@www.acme.io", "www.www.acme.io", "https://https://x.com", "ftp://a/b", "/"],
)
def test_clean_domain_is_idempotent(raw):
    once = clean_domain(raw)
    assert clean_domain(once) == once


def test_clean_domain_keeps_case_and_subdomains():
    assert clean_domain("https://Mail.Google.com") == "Mail.Google.com"


def test_clean_domains_handles_missing_list():
    assert clean_domains(None) is None
    assert clean_domains(["https://a.com/", "www.b.com"]) == ["a.com", "b.com"]


def test_strip_undefined_preserves_order():
    result = strip_undefined({"a": 1, "b": None, "c": "x"})

    assert result == {"a": 1, "c": "x"}
    assert list(result) == ["a", "c"]


def test_strip_undefined_keeps_falsy_values():
    source = {"flag": False, "count": 0, "name": "", "items": [], "gone": None}

    assert strip_undefined(source) == {"flag": False, "count": 0, "name": "", "items": []}
    assert "gone" in source

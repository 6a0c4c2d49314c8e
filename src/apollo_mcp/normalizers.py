"""Pure string/mapping transforms applied before request payloads are built."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

_SCHEME = re.compile(r"^https?://")
_WWW = re.compile(r"^www\.")
_AT = re.compile(r"^@")
_SUFFIX = re.compile(r"/.*$", re.DOTALL)


def _strip_once(domain: str) -> str:
    domain = _SCHEME.sub("", domain, count=1)
    domain = _WWW.sub("", domain, count=1)
    domain = _AT.sub("", domain, count=1)
    return _SUFFIX.sub("", domain, count=1)


def clean_domain(domain: str) -> str:
    """Strip protocol, ``www.``, a leading ``@`` and any path from a domain string.

    >>> clean_domain("https://www.Example.com/path")
    'Example.com'

    Inputs with stacked prefixes such as ``@www.acme.io`` are reduced until
    stable so the result is always idempotent.
    """
    cleaned = _strip_once(domain)
    while cleaned != domain:
        domain, cleaned = cleaned, _strip_once(cleaned)
    return cleaned


def clean_domains(domains: Optional[Iterable[str]]) -> Optional[List[str]]:
    if domains is None:
        return None
    return [clean_domain(d) for d in domains]


def strip_undefined(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is ``None``, keeping the order of the rest."""
    return {key: value for key, value in mapping.items() if value is not None}


__all__ = ["clean_domain", "clean_domains", "strip_undefined"]

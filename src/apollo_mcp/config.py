"""
Apollo MCP Configuration

Handles environment variables and configuration for the Apollo MCP server.
"""

import os
from typing import Optional

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.apollo.io"
MISSING_API_KEY = "APOLLO_API_KEY environment variable is required."


class ApolloConfig:
    """Configuration manager for the Apollo MCP server."""

    def __init__(self, environ: Optional[dict] = None):
        self._environ = environ if environ is not None else os.environ

    @property
    def api_key(self) -> str:
        """Get the Apollo API key. Required."""
        value = self._environ.get("APOLLO_API_KEY", "").strip()
        if not value:
            raise ConfigurationError(MISSING_API_KEY)
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self._environ.get("APOLLO_API_KEY", "").strip())

    @property
    def base_url(self) -> str:
        """Get the Apollo REST API origin."""
        return (self._environ.get("APOLLO_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")

    @property
    def log_level(self) -> str:
        """Get the logging level."""
        return self._environ.get("APOLLO_LOG_LEVEL", "INFO").upper()

    @property
    def server_name(self) -> str:
        return "apollo-io"

    @property
    def server_version(self) -> str:
        return "1.0.0"


# Global config instance
config = ApolloConfig()

from __future__ import annotations

from setuptools import find_packages, setup


def load_dependencies() -> list[str]:
    """Assemble install_requires for the Apollo MCP server."""
    return [
        # Core MCP and HTTP
        "mcp>=1.20.0,<2",
        "aiohttp>=3.8.0",
        # Data handling
        "pydantic>=2.0.0",
    ]


setup(
    name="apollo-mcp",
    version="1.0.0",
    description="MCP server exposing Apollo.io search, enrichment and CRM operations",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=load_dependencies(),
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["apollo-mcp = apollo_mcp.main:run"]},
)

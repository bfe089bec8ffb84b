"""Minimal MCP server exposing a clock tool, an echo tool and a greeting resource."""

from simple_mcp_server.config import SERVER_VERSION as __version__

__all__ = ["__version__"]

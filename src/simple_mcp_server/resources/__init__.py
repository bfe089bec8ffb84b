"""MCP resources for the simple MCP server."""

from fastmcp import FastMCP

from simple_mcp_server.dispatcher import Dispatcher
from simple_mcp_server.resources.greeting_resources import register_greeting_resources


def register_all_resources(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    """Register all resources with the MCP server."""
    register_greeting_resources(mcp, dispatcher)


__all__ = ["register_all_resources"]

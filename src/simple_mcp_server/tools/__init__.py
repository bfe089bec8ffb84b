"""MCP tools for the simple MCP server."""

from fastmcp import FastMCP

from simple_mcp_server.dispatcher import Dispatcher
from simple_mcp_server.tools.basic_tools import register_basic_tools


def register_all_tools(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    """Register all tools with the MCP server."""
    register_basic_tools(mcp, dispatcher)


__all__ = ["register_all_tools"]

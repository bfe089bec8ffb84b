"""Clock and echo tools for the simple MCP server."""

from typing import Any, Callable, Dict, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as FastMCPToolResult
from pydantic import Field

from simple_mcp_server.dispatcher import Dispatcher
from simple_mcp_server.models import ToolResult


class DispatchedTool(Tool):
    """
    FastMCP tool that forwards the raw call arguments to the dispatcher.

    The advertised input schema is taken verbatim from the tool descriptor;
    argument validation happens in Dispatcher.execute_tool.
    """
    execute: Callable[[str, Optional[Dict[str, Any]]], ToolResult] = Field(exclude=True)

    async def run(self, arguments: Dict[str, Any]) -> FastMCPToolResult:
        # Delegate to the dispatcher to enable unit testing without FastMCP server setup
        result = self.execute(self.name, arguments)
        return FastMCPToolResult(content=result.text)


def register_basic_tools(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    """Register the clock and echo tools with the MCP server, in listing order."""
    for descriptor in dispatcher.list_tools():
        mcp.add_tool(
            DispatchedTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.input_schema,
                execute=dispatcher.execute_tool,
            )
        )

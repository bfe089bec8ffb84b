"""Greeting resource for the simple MCP server."""

from typing import Callable

from fastmcp import FastMCP

from simple_mcp_server.dispatcher import Dispatcher


def register_greeting_resources(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    """Register every resource the dispatcher lists with the MCP server."""
    for descriptor in dispatcher.list_resources():
        mcp.resource(
            descriptor.uri,
            name=descriptor.name,
            description=descriptor.description,
            mime_type=descriptor.mime_type,
        )(_make_reader(dispatcher, descriptor.uri))


def _make_reader(dispatcher: Dispatcher, uri: str) -> Callable[[], str]:
    def read() -> str:
        """
        Read the resource through the dispatcher.

        Raises:
            ConfigurationError: If the greeting is read while SAMPLE_ENV is not set
        """
        return dispatcher.read_resource(uri).text

    return read

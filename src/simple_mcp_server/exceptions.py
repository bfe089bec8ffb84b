"""Exceptions raised by the simple MCP server."""


class SimpleServerError(Exception):
    """Base exception for simple MCP server errors."""


class ConfigurationError(SimpleServerError, ValueError):
    """Raised when a required environment variable is missing or empty."""


class NotFoundError(SimpleServerError, LookupError):
    """Raised when a resource URI is not known to the server."""


class UnknownToolError(SimpleServerError, LookupError):
    """Raised when a tool name is not known to the server."""


class ToolInputError(SimpleServerError, ValueError):
    """Raised when tool arguments fail Pydantic validation."""

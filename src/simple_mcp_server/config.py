"""Configuration for the simple MCP server.

This module contains the server identity, the fixed tool and resource
definitions, the message templates, and the runtime settings read from
the environment.
"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from simple_mcp_server.exceptions import ConfigurationError

# =============================================================================
# Server Identity
# =============================================================================

SERVER_NAME = "simple-mcp-server"
"""Name advertised to MCP clients."""

SERVER_VERSION = "0.1.0"
"""Version advertised to MCP clients."""


# =============================================================================
# Environment
# =============================================================================

SAMPLE_ENV_VAR = "SAMPLE_ENV"
"""Required environment variable, checked at startup and on greeting reads."""

LOG_LEVEL_VAR = "LOG_LEVEL"
"""Environment variable controlling the diagnostic log level."""

DEFAULT_LOG_LEVEL = "INFO"


# =============================================================================
# Tools
# =============================================================================

GET_CURRENT_TIME = "get_current_time"
ECHO_MESSAGE = "echo_message"

GET_CURRENT_TIME_DESCRIPTION = "Get the current time."
ECHO_MESSAGE_DESCRIPTION = "Return the given message as-is."

GET_CURRENT_TIME_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {},
    "required": [],
}

ECHO_MESSAGE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "message": {
            "type": "string",
            "description": "The message to echo",
        }
    },
    "required": ["message"],
}

CURRENT_TIME_TEMPLATE = "current time: {now}"
ECHO_TEMPLATE = "your message: {message}"

NO_MESSAGE_PLACEHOLDER = "no message provided"
"""Substituted when echo_message is called without a message."""


# =============================================================================
# Resources
# =============================================================================

GREETING_URI = "simple://greeting"
GREETING_MIME_TYPE = "text/plain"
GREETING_NAME = "Greeting"
GREETING_DESCRIPTION = "A simple greeting message."

GREETING_TEMPLATE = (
    "Hello! Welcome to the simple MCP server.\n"
    "SAMPLE_ENV: {sample_env}"
)


# =============================================================================
# Runtime Settings
# =============================================================================

class Settings(BaseModel):
    """Runtime settings read from the process environment.

    Passed explicitly into the dispatcher so tests can inject values
    without touching the real environment.
    """
    model_config = ConfigDict(frozen=True)

    sample_env: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from `environ`, defaulting to os.environ."""
        if environ is None:
            environ = os.environ
        return cls(
            sample_env=environ.get(SAMPLE_ENV_VAR),
            log_level=environ.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL,
        )

    def require_sample_env(self) -> str:
        """
        Return the SAMPLE_ENV value.

        Raises:
            ConfigurationError: If SAMPLE_ENV is absent or empty
        """
        if not self.sample_env:
            raise ConfigurationError(f"environment variable {SAMPLE_ENV_VAR} not set")
        return self.sample_env

"""Request dispatcher for the simple MCP server.

Holds the four operations bound to the protocol server: listing tools,
listing resources, reading a resource and executing a tool. Each call is
independent; the only input besides its arguments is the injected Settings.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from simple_mcp_server.config import (
    CURRENT_TIME_TEMPLATE,
    ECHO_MESSAGE,
    ECHO_MESSAGE_DESCRIPTION,
    ECHO_MESSAGE_SCHEMA,
    ECHO_TEMPLATE,
    GET_CURRENT_TIME,
    GET_CURRENT_TIME_DESCRIPTION,
    GET_CURRENT_TIME_SCHEMA,
    GREETING_DESCRIPTION,
    GREETING_MIME_TYPE,
    GREETING_NAME,
    GREETING_TEMPLATE,
    GREETING_URI,
    NO_MESSAGE_PLACEHOLDER,
    Settings,
)
from simple_mcp_server.exceptions import (
    ConfigurationError,
    NotFoundError,
    ToolInputError,
    UnknownToolError,
)
from simple_mcp_server.models import (
    EchoMessageInput,
    GetCurrentTimeInput,
    ResourceContent,
    ResourceDescriptor,
    ResourceTextContent,
    TextContent,
    ToolDescriptor,
    ToolResult,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format an aware datetime as ISO-8601 UTC with milliseconds and a Z suffix."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class Dispatcher:
    """Dispatches protocol requests to the fixed tools and resources."""

    def __init__(self, settings: Settings, clock: Optional[Clock] = None) -> None:
        self.settings = settings
        self.clock = clock or utc_now
        self._tools: Dict[str, Tuple[Type[BaseModel], Callable[[Any], ToolResult]]] = {
            GET_CURRENT_TIME: (GetCurrentTimeInput, self._get_current_time),
            ECHO_MESSAGE: (EchoMessageInput, self._echo_message),
        }

    def list_tools(self) -> List[ToolDescriptor]:
        """Return the tool descriptors, get_current_time first."""
        return [
            ToolDescriptor(
                name=GET_CURRENT_TIME,
                description=GET_CURRENT_TIME_DESCRIPTION,
                input_schema=dict(GET_CURRENT_TIME_SCHEMA),
            ),
            ToolDescriptor(
                name=ECHO_MESSAGE,
                description=ECHO_MESSAGE_DESCRIPTION,
                input_schema=dict(ECHO_MESSAGE_SCHEMA),
            ),
        ]

    def list_resources(self) -> List[ResourceDescriptor]:
        """Return the resource descriptors."""
        return [
            ResourceDescriptor(
                uri=GREETING_URI,
                mime_type=GREETING_MIME_TYPE,
                name=GREETING_NAME,
                description=GREETING_DESCRIPTION,
            )
        ]

    def read_resource(self, uri: str) -> ResourceContent:
        """
        Read a resource by exact URI.

        Args:
            uri: The resource URI, e.g. "simple://greeting"

        Returns:
            ResourceContent with a single text entry.

        Raises:
            ConfigurationError: If the greeting is read while SAMPLE_ENV is not set
            NotFoundError: If the URI is not a known resource
        """
        if uri != GREETING_URI:
            logger.warning("Rejected read of unknown resource %s", uri)
            raise NotFoundError(f"unknown resource: {uri}")

        # Checked again here even though startup already required it
        try:
            sample_env = self.settings.require_sample_env()
        except ConfigurationError as e:
            logger.warning("Cannot read %s: %s", uri, e)
            raise

        return ResourceContent(
            contents=[
                ResourceTextContent(
                    uri=uri,
                    mime_type=GREETING_MIME_TYPE,
                    text=GREETING_TEMPLATE.format(sample_env=sample_env),
                )
            ]
        )

    def execute_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """
        Validate arguments against the tool's input model and run it.

        Args:
            name: The tool name
            arguments: Tool arguments; None is treated as no arguments

        Returns:
            ToolResult with a single text entry.

        Raises:
            UnknownToolError: If no tool is registered under `name`
            ToolInputError: If the arguments fail validation
        """
        try:
            input_model, handler = self._tools[name]
        except KeyError:
            logger.warning("Rejected call to unknown tool %s", name)
            raise UnknownToolError(f"unknown tool: {name}") from None

        try:
            params = input_model.model_validate(dict(arguments or {}))
        except ValidationError as e:
            logger.warning("Rejected arguments for tool %s: %d validation error(s)", name, e.error_count())
            raise ToolInputError(f"invalid arguments for {name}: {e}") from e

        logger.debug("Executing tool %s", name)
        return handler(params)

    def _get_current_time(self, params: GetCurrentTimeInput) -> ToolResult:
        now = format_timestamp(self.clock())
        return _text_result(CURRENT_TIME_TEMPLATE.format(now=now))

    def _echo_message(self, params: EchoMessageInput) -> ToolResult:
        message = params.message or NO_MESSAGE_PLACEHOLDER
        return _text_result(ECHO_TEMPLATE.format(message=message))


def _text_result(text: str) -> ToolResult:
    return ToolResult(content=[TextContent(text=text)])

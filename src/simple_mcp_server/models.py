"""Pydantic models for tool/resource descriptors, results and tool inputs."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ToolDescriptor(_Frozen):
    """A named, invokable tool with an input schema."""
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class ResourceDescriptor(_Frozen):
    """A readable resource addressed by URI."""
    uri: str
    mime_type: str = Field(alias="mimeType")
    name: str
    description: str


class TextContent(_Frozen):
    type: Literal["text"] = "text"
    text: str


class ToolResult(_Frozen):
    """Result of a tool call: an ordered list of text entries."""
    content: List[TextContent]

    @property
    def text(self) -> str:
        """Text entries joined by newlines."""
        return "\n".join(item.text for item in self.content)


class ResourceTextContent(_Frozen):
    uri: str
    mime_type: str = Field(alias="mimeType")
    text: str


class ResourceContent(_Frozen):
    """Contents of a resource read."""
    contents: List[ResourceTextContent]

    @property
    def text(self) -> str:
        """Text entries joined by newlines."""
        return "\n".join(item.text for item in self.contents)


# =============================================================================
# Tool Inputs
# =============================================================================
# Arguments are validated against these models before dispatch. Unknown keys
# are ignored.

class GetCurrentTimeInput(BaseModel):
    """get_current_time takes no arguments."""


class EchoMessageInput(BaseModel):
    """Arguments for echo_message."""
    message: Optional[StrictStr] = None

"""Tool descriptors as seen by the prompt composer.

A tool is either built into the agent (``LocalTool``) or registered by an
external MCP server (``RemoteTool``). The two render differently, so they
are separate types rather than one type with an optional server field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from langchain_core.tools import BaseTool

from ..errors import MalformedToolError
from .capabilities import tool_origin_server


@dataclass(frozen=True)
class LocalTool:
    """A tool built into the agent."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise MalformedToolError("Tool name cannot be empty")


@dataclass(frozen=True)
class RemoteTool:
    """A tool registered by an external MCP server."""

    name: str
    server: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise MalformedToolError("Tool name cannot be empty")
        if not isinstance(self.server, str) or not self.server.strip():
            raise MalformedToolError(
                f"Remote tool '{self.name}' has no origin server"
            )


ToolDescriptor = Union[LocalTool, RemoteTool]


def to_descriptor(tool: Any) -> ToolDescriptor:
    """Coerce a registry entry into a ``ToolDescriptor``.

    Accepts descriptors as-is, otherwise reads ``name`` and an optional
    ``server_name`` attribute. LangChain tools without ``server_name`` take
    their server from provenance metadata.
    """
    if isinstance(tool, (LocalTool, RemoteTool)):
        return tool
    name = getattr(tool, "name", None)
    if not isinstance(name, str) or not name.strip():
        raise MalformedToolError(f"Tool {tool!r} has no name")
    server = getattr(tool, "server_name", None)
    if not (isinstance(server, str) and server.strip()) and isinstance(tool, BaseTool):
        server = tool_origin_server(tool)
    if isinstance(server, str) and server.strip():
        return RemoteTool(name=name, server=server.strip())
    return LocalTool(name=name)

"""Tool descriptors and the LangChain-backed tool registry."""

from .capabilities import (
    annotate_builtin_tools,
    annotate_mcp_tools,
    set_tool_capabilities,
    tool_origin_server,
)
from .descriptors import LocalTool, RemoteTool, ToolDescriptor, to_descriptor
from .registry import ToolRegistry

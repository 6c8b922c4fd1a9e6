"""External tool server section."""

from __future__ import annotations

from ..snapshot import ContextSnapshot
from ..tools.descriptors import RemoteTool
from .formatting import EnumerationMode, format_enumeration


def render_external_servers(snapshot: ContextSnapshot) -> str | None:
    """Describe the MCP servers that contributed tools, if any."""
    servers: list[str] = []
    for tool in snapshot.tools:
        if isinstance(tool, RemoteTool) and tool.server not in servers:
            servers.append(tool.server)
    if not servers:
        return None

    noun = "server" if len(servers) == 1 else "servers"
    names = format_enumeration(servers, EnumerationMode.PROSE_OR, quote=True)
    return "\n".join([
        "# MCP Server Tools",
        "",
        f"Some tools are provided by the {names} MCP {noun} and use the "
        "original names defined by each server.",
        "- Check the tool's input schema before calling it to ensure correct parameters.",
        "- If an MCP tool call fails, report the error clearly and do not retry "
        "with the same parameters.",
        "- When both a built-in tool and an MCP tool can accomplish a task, "
        "prefer the built-in tool unless the MCP tool offers specific advantages.",
    ])

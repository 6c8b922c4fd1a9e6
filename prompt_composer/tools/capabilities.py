"""Tool provenance metadata stored on LangChain tools."""

from __future__ import annotations

from typing import Any

from langchain_core.tools import BaseTool

_SERVER_KEYS = ("mcp_server", "server_name", "server", "mcpServer")


def _tool_metadata(tool: BaseTool) -> dict[str, Any]:
    meta = getattr(tool, "metadata", None)
    if isinstance(meta, dict):
        return dict(meta)
    return {}


def set_tool_capabilities(
    tool: BaseTool,
    *,
    source: str,
    mcp_server: str | None = None,
) -> None:
    meta = _tool_metadata(tool)
    meta["tool_source"] = source
    if mcp_server:
        meta["mcp_server"] = mcp_server
    else:
        meta.pop("mcp_server", None)
    tool.metadata = meta


def annotate_builtin_tools(tools: list[BaseTool]) -> None:
    for tool in tools:
        set_tool_capabilities(tool, source="builtin")


def annotate_mcp_tools(tools: list[BaseTool], *, server: str) -> None:
    for tool in tools:
        set_tool_capabilities(tool, source="mcp", mcp_server=server)


def _first_string(mapping: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = mapping.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def tool_origin_server(tool: BaseTool) -> str | None:
    """Return the MCP server that registered ``tool``, or None for builtins.

    Looks at the metadata keys different MCP bridges use, then at nested
    ``annotations`` and ``mcp`` dicts.
    """
    meta = _tool_metadata(tool)
    if meta.get("tool_source") == "builtin":
        return None

    server = _first_string(meta, _SERVER_KEYS)
    if server:
        return server

    annotations = meta.get("annotations")
    if isinstance(annotations, dict):
        server = _first_string(annotations, _SERVER_KEYS)
        if server:
            return server

    mcp_meta = meta.get("mcp")
    if isinstance(mcp_meta, dict):
        server = _first_string(mcp_meta, ("server", "name", "server_name", "mcp_server"))
        if server:
            return server
    return None

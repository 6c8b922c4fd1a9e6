"""Tool registry backed by LangChain tools."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from langchain_core.tools import BaseTool

from ..errors import MalformedToolError
from .capabilities import tool_origin_server
from .descriptors import LocalTool, RemoteTool, ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Ordered collection of the tools exposed to the agent.

    Registration order is preserved; registering a name again replaces the
    earlier tool in place.
    """

    def __init__(self, tools: Iterable[BaseTool] | None = None) -> None:
        self._tools: dict[str, BaseTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        name = str(getattr(tool, "name", "") or "").strip()
        if not name:
            raise MalformedToolError(f"Cannot register tool without a name: {tool!r}")
        if name in self._tools:
            logger.warning("Tool '%s' registered twice, replacing", name)
        self._tools[name] = tool
        logger.debug("Registered tool '%s'", name)

    def unregister(self, name: str) -> None:
        self._tools.pop(name, None)

    def get_tool(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def get_all_tool_names(self) -> list[str]:
        return list(self._tools)

    def get_all_tools(self) -> list[ToolDescriptor]:
        """Return descriptors for every registered tool in registration order."""
        descriptors: list[ToolDescriptor] = []
        for name, tool in self._tools.items():
            server = tool_origin_server(tool)
            if server:
                descriptors.append(RemoteTool(name=name, server=server))
            else:
                descriptors.append(LocalTool(name=name))
        return descriptors

    def __len__(self) -> int:
        return len(self._tools)

"""Importable helpers for prompt composer tests."""

from __future__ import annotations

from typing import Any

from langchain_core.tools import BaseTool

from prompt_composer.context_files import DEFAULT_CONTEXT_FILENAME
from prompt_composer.snapshot import ContextSnapshot


class StubTool(BaseTool):
    """Minimal LangChain tool used to populate registries."""

    name: str = "stub"
    description: str = "Stub tool for tests"

    def _run(self, *args: Any, **kwargs: Any) -> str:
        return ""


def make_tool(name: str, metadata: dict[str, Any] | None = None) -> StubTool:
    return StubTool(name=name, description=f"{name} tool", metadata=metadata)


def make_snapshot(**overrides: Any) -> ContextSnapshot:
    """Create a ContextSnapshot with sensible test defaults."""
    values: dict[str, Any] = {
        "model": "gemini-3-pro-preview",
        "interactive": True,
        "interactive_shell": True,
        "shell_output_efficiency": True,
        "project_temp_dir": "/tmp/project-temp",
        "plans_dir": "/tmp/project-temp/plans",
        "context_filenames": (DEFAULT_CONTEXT_FILENAME,),
        **overrides,
    }
    return ContextSnapshot(**values)

"""Immutable view of the agent configuration at prompt-build time."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from .catalog import (
    AgentDefinition,
    SkillDefinition,
    to_agent_definition,
    to_skill_definition,
)
from .tools.descriptors import ToolDescriptor, to_descriptor

PLAN_MODE_EXCLUDED_TOOLS: frozenset[str] = frozenset({"write_file", "replace"})


class ApprovalMode(str, Enum):
    DEFAULT = "default"
    AUTO_EDIT = "autoEdit"
    YOLO = "yolo"
    PLAN = "plan"

    @classmethod
    def parse(cls, value: Any) -> ApprovalMode | None:
        """Return the matching mode, or None if ``value`` is not one."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for mode in cls:
                if key == mode.value or key.lower() == mode.value.lower():
                    return mode
        return None


class ToolRegistryLike(Protocol):
    def get_all_tool_names(self) -> Sequence[str]: ...

    def get_all_tools(self) -> Sequence[Any]: ...


class StorageLike(Protocol):
    def get_project_temp_dir(self) -> str: ...

    def get_plans_dir(self) -> str: ...


class ConfigSource(Protocol):
    """Query interface of the agent configuration consumed by the composer."""

    storage: StorageLike

    def get_tool_registry(self) -> ToolRegistryLike: ...

    def get_approval_mode(self) -> Any: ...

    def is_interactive(self) -> bool: ...

    def is_interactive_shell_enabled(self) -> bool: ...

    def get_enable_shell_output_efficiency(self) -> bool: ...

    def get_active_model(self) -> str: ...

    def get_approved_plan_path(self) -> str | None: ...

    def get_skill_manager(self) -> Any: ...

    def get_agent_registry(self) -> Any: ...


@dataclass(frozen=True)
class ContextSnapshot:
    """Everything a section renderer may read, resolved up front."""

    model: str = ""
    approval_mode: ApprovalMode = ApprovalMode.DEFAULT
    interactive: bool = True
    interactive_shell: bool = False
    shell_output_efficiency: bool = False
    project_temp_dir: str | None = None
    plans_dir: str | None = None
    approved_plan_path: str | None = None
    context_filenames: tuple[str, ...] = ()
    tools: tuple[ToolDescriptor, ...] = ()
    skills: tuple[SkillDefinition, ...] = ()
    agents: tuple[AgentDefinition, ...] = ()
    is_git_repository: bool = False
    excluded_tools: frozenset[str] = field(default=PLAN_MODE_EXCLUDED_TOOLS)


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def take_snapshot(
    config: ConfigSource,
    context_filenames: Callable[[], Sequence[str]],
    *,
    excluded_tools: frozenset[str] | None = None,
) -> ContextSnapshot:
    """Query ``config`` once and freeze the answers into a snapshot.

    Unknown approval modes are treated as ``DEFAULT``. Tools, skills and
    agents are converted to the composer's own types, reading only the
    fields the sections render.
    """
    mode = ApprovalMode.parse(config.get_approval_mode()) or ApprovalMode.DEFAULT

    tools = tuple(
        to_descriptor(tool) for tool in config.get_tool_registry().get_all_tools() or []
    )
    skills = tuple(
        to_skill_definition(skill)
        for skill in config.get_skill_manager().get_skills() or []
    )
    agents = tuple(
        to_agent_definition(agent)
        for agent in config.get_agent_registry().get_all_definitions() or []
    )

    is_git = False
    git_check = getattr(config, "is_git_repository", None)
    if callable(git_check):
        is_git = git_check() is True

    if excluded_tools is None:
        excluded_tools = getattr(config, "plan_mode_excluded_tools", None)
        if not isinstance(excluded_tools, frozenset):
            excluded_tools = PLAN_MODE_EXCLUDED_TOOLS

    return ContextSnapshot(
        model=str(config.get_active_model() or ""),
        approval_mode=mode,
        interactive=bool(config.is_interactive()),
        interactive_shell=bool(config.is_interactive_shell_enabled()),
        shell_output_efficiency=bool(config.get_enable_shell_output_efficiency()),
        project_temp_dir=_optional_str(config.storage.get_project_temp_dir()),
        plans_dir=_optional_str(config.storage.get_plans_dir()),
        approved_plan_path=_optional_str(config.get_approved_plan_path()),
        context_filenames=tuple(context_filenames()),
        tools=tools,
        skills=skills,
        agents=agents,
        is_git_repository=is_git,
        excluded_tools=excluded_tools,
    )

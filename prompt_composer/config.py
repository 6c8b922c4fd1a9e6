"""Agent configuration as consumed by the prompt composer."""

from __future__ import annotations

import logging
import os
from typing import Any, Sequence

from langchain_core.tools import BaseTool

from .catalog import AgentDefinition, AgentRegistry, SkillDefinition, SkillManager
from .snapshot import PLAN_MODE_EXCLUDED_TOOLS, ApprovalMode
from .tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-pro"


def _load_plan_excluded_tools() -> frozenset[str]:
    """Load the plan-mode excluded tools from the environment.

    ``PROMPT_PLAN_EXCLUDED_TOOLS`` is a comma-separated list; an explicitly
    empty value excludes nothing.
    """
    raw = os.getenv("PROMPT_PLAN_EXCLUDED_TOOLS")
    if raw is None:
        return PLAN_MODE_EXCLUDED_TOOLS
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def _resolve_approval_mode(value: Any) -> ApprovalMode:
    if value is None or value == "":
        return ApprovalMode.DEFAULT
    mode = ApprovalMode.parse(value)
    if mode is None:
        logger.warning(
            "Invalid approval_mode=%r; falling back to %s",
            value,
            ApprovalMode.DEFAULT.value,
        )
        return ApprovalMode.DEFAULT
    return mode


def _skills_from(raw: Any) -> list[SkillDefinition]:
    skills: list[SkillDefinition] = []
    for entry in raw or []:
        if isinstance(entry, SkillDefinition):
            skills.append(entry)
            continue
        if not isinstance(entry, dict) or not str(entry.get("name", "")).strip():
            logger.warning("Skipping malformed skill entry: %r", entry)
            continue
        skills.append(SkillDefinition(
            name=str(entry["name"]),
            description=str(entry.get("description", "")),
            location=entry.get("location"),
        ))
    return skills


def _agents_from(raw: Any) -> list[AgentDefinition]:
    agents: list[AgentDefinition] = []
    for entry in raw or []:
        if isinstance(entry, AgentDefinition):
            agents.append(entry)
            continue
        if not isinstance(entry, dict) or not str(entry.get("name", "")).strip():
            logger.warning("Skipping malformed agent entry: %r", entry)
            continue
        agents.append(AgentDefinition(
            name=str(entry["name"]),
            description=str(entry.get("description", "")),
        ))
    return agents


class Storage:
    """Project storage paths."""

    def __init__(self, project_temp_dir: str, plans_dir: str | None = None) -> None:
        self.project_temp_dir = project_temp_dir
        self.plans_dir = plans_dir or os.path.join(project_temp_dir, "plans")

    def get_project_temp_dir(self) -> str:
        return self.project_temp_dir

    def get_plans_dir(self) -> str:
        return self.plans_dir


class PromptConfig:
    """Configuration received from the init message, plus the live tools."""

    def __init__(
        self,
        init_data: dict[str, Any],
        tools: Sequence[BaseTool] | None = None,
    ) -> None:
        self.model: str = init_data.get("model", "") or DEFAULT_MODEL
        self.approval_mode: ApprovalMode = _resolve_approval_mode(
            init_data.get("approval_mode")
        )
        self.interactive: bool = bool(init_data.get("interactive", True))
        self.interactive_shell: bool = bool(init_data.get("interactive_shell", False))
        self.shell_output_efficiency: bool = bool(
            init_data.get("shell_output_efficiency", True)
        )
        self.approved_plan_path: str | None = init_data.get("approved_plan_path") or None
        self.git_repository: bool = bool(init_data.get("is_git_repository", False))
        self.plan_mode_excluded_tools: frozenset[str] = _load_plan_excluded_tools()
        self.storage = Storage(
            init_data.get("project_temp_dir", "") or os.path.join(os.getcwd(), ".gemini", "tmp"),
            init_data.get("plans_dir") or None,
        )
        self._tool_registry = ToolRegistry(tools)
        self._skill_manager = SkillManager(_skills_from(init_data.get("skills")))
        self._agent_registry = AgentRegistry(_agents_from(init_data.get("agents")))

    def get_tool_registry(self) -> ToolRegistry:
        return self._tool_registry

    def get_approval_mode(self) -> ApprovalMode:
        return self.approval_mode

    def set_approval_mode(self, mode: ApprovalMode | str) -> None:
        self.approval_mode = _resolve_approval_mode(mode)

    def is_interactive(self) -> bool:
        return self.interactive

    def is_interactive_shell_enabled(self) -> bool:
        return self.interactive_shell

    def get_enable_shell_output_efficiency(self) -> bool:
        return self.shell_output_efficiency

    def get_active_model(self) -> str:
        return self.model

    def get_approved_plan_path(self) -> str | None:
        return self.approved_plan_path

    def get_skill_manager(self) -> SkillManager:
        return self._skill_manager

    def get_agent_registry(self) -> AgentRegistry:
        return self._agent_registry

    def is_git_repository(self) -> bool:
        return self.git_repository

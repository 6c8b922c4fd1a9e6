"""Skill and sub-agent definitions with simple in-memory registries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SkillDefinition:
    """A skill the agent can activate on demand."""

    name: str
    description: str
    location: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Skill name cannot be empty")


@dataclass(frozen=True)
class AgentDefinition:
    """A sub-agent the main agent can delegate to."""

    name: str
    description: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Agent name cannot be empty")


def to_skill_definition(skill: Any) -> SkillDefinition:
    """Coerce a skill manager entry into a ``SkillDefinition``.

    Only ``name`` and ``description`` are required; ``location`` is optional.
    """
    if isinstance(skill, SkillDefinition):
        return skill
    location = getattr(skill, "location", None)
    return SkillDefinition(
        name=str(getattr(skill, "name", "") or ""),
        description=str(getattr(skill, "description", "") or ""),
        location=location if isinstance(location, str) and location else None,
    )


def to_agent_definition(agent: Any) -> AgentDefinition:
    if isinstance(agent, AgentDefinition):
        return agent
    return AgentDefinition(
        name=str(getattr(agent, "name", "") or ""),
        description=str(getattr(agent, "description", "") or ""),
    )


class SkillManager:
    def __init__(self, skills: list[SkillDefinition] | None = None) -> None:
        self._skills: dict[str, SkillDefinition] = {}
        for skill in skills or []:
            self.add(skill)

    def add(self, skill: SkillDefinition) -> None:
        self._skills[skill.name] = skill

    def get_skills(self) -> list[SkillDefinition]:
        return list(self._skills.values())


class AgentRegistry:
    def __init__(self, definitions: list[AgentDefinition] | None = None) -> None:
        self._definitions: dict[str, AgentDefinition] = {}
        for definition in definitions or []:
            self.add(definition)

    def add(self, definition: AgentDefinition) -> None:
        self._definitions[definition.name] = definition

    def get_all_definitions(self) -> list[AgentDefinition]:
        return list(self._definitions.values())

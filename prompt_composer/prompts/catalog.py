"""Sub-agent and skill sections."""

from __future__ import annotations

from ..snapshot import ContextSnapshot


def render_sub_agents(snapshot: ContextSnapshot) -> str | None:
    if not snapshot.agents:
        return None
    lines = [
        "# Available Sub-Agents",
        "",
        "Delegate work to a sub-agent when the task matches its specialty. "
        "Sub-agents run with their own context and return a summary.",
        "",
        "<available_subagents>",
    ]
    for agent in snapshot.agents:
        lines.append(f"  <subagent name=\"{agent.name}\">{agent.description}</subagent>")
    lines.append("</available_subagents>")
    return "\n".join(lines)


def render_skills(snapshot: ContextSnapshot) -> str | None:
    """List skills with their descriptions, and locations when known."""
    if not snapshot.skills:
        return None
    lines = [
        "# Available Agent Skills",
        "",
        "Activate a skill when the request matches its description. "
        "Follow the skill's instructions once activated.",
        "",
        "<available_skills>",
    ]
    for skill in snapshot.skills:
        lines.append("  <skill>")
        lines.append(f"    <name>{skill.name}</name>")
        lines.append(f"    <description>{skill.description}</description>")
        if skill.location:
            lines.append(f"    <location>{skill.location}</location>")
        lines.append("  </skill>")
    lines.append("</available_skills>")
    return "\n".join(lines)

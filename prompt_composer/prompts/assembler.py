"""Runtime system prompt assembler."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial

from ..snapshot import ContextSnapshot
from .base import render_preamble
from .catalog import render_skills, render_sub_agents
from .environment import (
    render_git_repository,
    render_model_identity,
    render_operational_guidelines,
)
from .mandates import render_core_mandates, render_user_memory
from .mcp import render_external_servers
from .plan_mode import render_approval_mode

SectionRenderer = Callable[[ContextSnapshot], "str | None"]

SECTION_SEPARATOR = "\n\n"


def default_sections(
    user_memory: str | None = None,
) -> list[tuple[str, SectionRenderer]]:
    """Return the ordered section renderers.

    Order: preamble → core mandates → sub-agents → skills → approval mode →
    operational guidelines → MCP servers → git → model → user memory.
    """
    return [
        ("preamble", render_preamble),
        ("core_mandates", render_core_mandates),
        ("sub_agents", render_sub_agents),
        ("skills", render_skills),
        ("approval_mode", render_approval_mode),
        ("operational_guidelines", render_operational_guidelines),
        ("external_servers", render_external_servers),
        ("git_repository", render_git_repository),
        ("model_identity", render_model_identity),
        ("user_memory", partial(render_user_memory, user_memory=user_memory)),
    ]


def build_system_prompt(
    snapshot: ContextSnapshot,
    user_memory: str | None = None,
    *,
    sections: Sequence[tuple[str, SectionRenderer]] | None = None,
) -> str:
    """Assemble the system prompt from the sections active for ``snapshot``.

    Sections that render nothing are skipped; the rest are separated by
    exactly one blank line.
    """
    if sections is None:
        sections = default_sections(user_memory)

    parts: list[str] = []
    for _name, render in sections:
        text = render(snapshot)
        if not text:
            continue
        text = text.strip("\n")
        if text.strip():
            parts.append(text)
    return SECTION_SEPARATOR.join(parts)

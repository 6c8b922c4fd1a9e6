"""Approval-mode section.

Only plan mode adds instructions. The tool list it renders skips tools
whose use in plan mode is governed by a dedicated sentence instead (the
write tools that may only target the plans directory).
"""

from __future__ import annotations

from collections.abc import Iterable

from ..snapshot import ApprovalMode, ContextSnapshot
from ..tools.descriptors import LocalTool, RemoteTool, ToolDescriptor
from .formatting import EnumerationMode, format_enumeration

PLAN_MODE_BANNER = "# Active Approval Mode: Plan"

PLAN_MODE_INTRO = """\
You are operating in **Plan Mode**. Your job is to research the request and \
produce a detailed implementation plan. Do not modify source code, run \
commands that change system state, or otherwise implement the plan until \
the user approves it."""


def filter_plan_mode_tools(
    tools: Iterable[ToolDescriptor], excluded: frozenset[str]
) -> list[ToolDescriptor]:
    """Drop tools whose name is excluded, whatever server they come from."""
    return [tool for tool in tools if tool.name not in excluded]


def format_tool_entry(tool: ToolDescriptor) -> str:
    if isinstance(tool, RemoteTool):
        return f"<tool>`{tool.name}` ({tool.server})</tool>"
    if isinstance(tool, LocalTool):
        return f"<tool>`{tool.name}`</tool>"
    raise TypeError(f"Unsupported tool descriptor: {tool!r}")


def format_plan_mode_tools(tools: Iterable[ToolDescriptor]) -> str:
    entries = [f"  {format_tool_entry(tool)}" for tool in tools]
    if not entries:
        return "No tools are available in Plan Mode."
    return "\n".join(["<available_tools>", *entries, "</available_tools>"])


def _plan_storage_lines(snapshot: ContextSnapshot) -> list[str]:
    lines = ["## Writing Plans"]
    target = f"`{snapshot.plans_dir}`" if snapshot.plans_dir else "the plans directory"
    # Only excluded tools that are actually registered get named.
    registered = {tool.name for tool in snapshot.tools}
    withheld = sorted(snapshot.excluded_tools & registered)
    if withheld:
        writers = format_enumeration(withheld, EnumerationMode.PROSE_OR, quote=True)
        lines.append(
            f"The only files you may create or modify are Markdown plan files in "
            f"{target}. Use {writers} only on files in {target}."
        )
    else:
        lines.append(
            f"The only files you may create or modify are Markdown plan files in {target}."
        )
    if snapshot.approved_plan_path:
        lines.extend([
            "",
            "## Approved Plan",
            f"An approved plan is available at `{snapshot.approved_plan_path}`. "
            "Read it before continuing and keep your work consistent with it.",
        ])
    return lines


def render_approval_mode(snapshot: ContextSnapshot) -> str | None:
    if snapshot.approval_mode is not ApprovalMode.PLAN:
        return None
    allowed = filter_plan_mode_tools(snapshot.tools, snapshot.excluded_tools)
    return "\n".join([
        PLAN_MODE_BANNER,
        "",
        PLAN_MODE_INTRO,
        "",
        "## Available Tools",
        "The following tools are available in Plan Mode:",
        format_plan_mode_tools(allowed),
        "",
        *_plan_storage_lines(snapshot),
    ])

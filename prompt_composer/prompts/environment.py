"""Sections describing the runtime environment."""

from __future__ import annotations

from ..snapshot import ContextSnapshot
from .base import OPERATIONAL_GUIDELINES

SHELL_EFFICIENCY_GUIDELINE = """\
- **Command Output Efficiency:** Prefer quiet or silent flags for shell \
commands and pipe long output through `head`, `tail` or `grep` to keep \
results short."""

INTERACTIVE_SHELL_GUIDELINE = """\
- **Interactive Commands:** Interactive shell commands are supported; the \
user can respond to prompts directly in the terminal."""

NON_INTERACTIVE_SHELL_GUIDELINE = """\
- **Interactive Commands:** Avoid shell commands that require user \
interaction (e.g. `git rebase -i`). Use non-interactive flags such as \
`npm init -y` instead."""

GIT_REPOSITORY_SECTION = """\
# Git Repository

- The current working directory is managed by a git repository.
- Before committing, gather information with `git status`, `git diff HEAD` \
and `git log -n 3`.
- Always propose a draft commit message; prefer messages that explain why \
the change was made.
- Never push changes to a remote repository without being asked explicitly."""


def render_operational_guidelines(snapshot: ContextSnapshot) -> str:
    lines = [OPERATIONAL_GUIDELINES]
    if snapshot.shell_output_efficiency:
        lines.append(SHELL_EFFICIENCY_GUIDELINE)
    lines.append(
        INTERACTIVE_SHELL_GUIDELINE
        if snapshot.interactive_shell
        else NON_INTERACTIVE_SHELL_GUIDELINE
    )
    if snapshot.project_temp_dir:
        lines.append(
            f"- **Temporary Files:** Write scratch files to `{snapshot.project_temp_dir}` "
            "instead of the project tree."
        )
    return "\n".join(lines)


def render_git_repository(snapshot: ContextSnapshot) -> str | None:
    return GIT_REPOSITORY_SECTION if snapshot.is_git_repository else None


def render_model_identity(snapshot: ContextSnapshot) -> str | None:
    model = snapshot.model.strip()
    if not model:
        return None
    return f"# Active Model\n\nYou are running on the `{model}` model."

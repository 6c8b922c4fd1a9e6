"""Sections that cite the discovered context files.

Both sections enumerate the same filenames but in different styles: the
mandates sentence reads as prose (`A`, `B` or `C`) while the memory header
is a plain parenthetical list (A, B, C).
"""

from __future__ import annotations

from ..context_files import DEFAULT_CONTEXT_FILENAME
from ..snapshot import ContextSnapshot
from .base import (
    AUTONOMOUS_MANDATE,
    CORE_MANDATES_BODY,
    CORE_MANDATES_HEADER,
    INTERACTIVE_MANDATE,
)
from .formatting import EnumerationMode, format_enumeration


def _filenames(snapshot: ContextSnapshot) -> tuple[str, ...]:
    return snapshot.context_filenames or (DEFAULT_CONTEXT_FILENAME,)


def render_core_mandates(snapshot: ContextSnapshot) -> str:
    files = format_enumeration(
        _filenames(snapshot), EnumerationMode.PROSE_OR, quote=True
    )
    mandate = INTERACTIVE_MANDATE if snapshot.interactive else AUTONOMOUS_MANDATE
    return "\n".join([
        CORE_MANDATES_HEADER,
        "",
        f"- **Contextual Precedence:** Instructions found in {files} files are "
        "foundational mandates. They take precedence over the general workflows "
        "described in this prompt.",
        CORE_MANDATES_BODY,
        mandate,
    ])


def render_user_memory(snapshot: ContextSnapshot, user_memory: str | None) -> str | None:
    """Render the per-call memory blob under a header naming its sources."""
    if not user_memory or not user_memory.strip():
        return None
    files = format_enumeration(_filenames(snapshot), EnumerationMode.PLAIN_COMMA)
    return f"# Contextual Instructions ({files})\n{user_memory.strip()}"

"""Builds the core system prompt straight from the agent configuration."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..context_files import get_all_context_filenames
from ..snapshot import ConfigSource, take_snapshot
from .assembler import build_system_prompt


class PromptProvider:
    """Snapshot the configuration and assemble the prompt for it."""

    def __init__(
        self,
        context_filenames: Callable[[], Sequence[str]] | None = None,
    ) -> None:
        self._context_filenames = context_filenames

    def get_core_system_prompt(
        self,
        config: ConfigSource,
        user_memory: str | None = None,
    ) -> str:
        # Resolved per call so later changes to the discovery state apply.
        source = self._context_filenames or get_all_context_filenames
        snapshot = take_snapshot(config, source)
        return build_system_prompt(snapshot, user_memory)

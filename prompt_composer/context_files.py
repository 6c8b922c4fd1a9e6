"""Context filename discovery state.

Holds the names of the context files (``GEMINI.md`` and any custom ones)
that the agent loads as foundational instructions. Discovery of the files
themselves happens elsewhere; this module only tracks their names.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_FILENAME = "GEMINI.md"


def _load_context_filenames() -> list[str]:
    """Seed filenames from ``CONTEXT_FILENAMES`` (comma-separated)."""
    raw = (os.getenv("CONTEXT_FILENAMES", "") or "").strip()
    if not raw:
        return [DEFAULT_CONTEXT_FILENAME]
    names = [part.strip() for part in raw.split(",") if part.strip()]
    if not names:
        logger.warning(
            "Invalid CONTEXT_FILENAMES=%r, defaulting to %s",
            raw,
            DEFAULT_CONTEXT_FILENAME,
        )
        return [DEFAULT_CONTEXT_FILENAME]
    return names


_current_filenames: list[str] = _load_context_filenames()


def set_context_filename(names: str | Iterable[str]) -> None:
    """Replace the configured context filenames.

    Blank entries are ignored; an empty result resets to the default.
    """
    if isinstance(names, str):
        names = [names]
    cleaned = [name.strip() for name in names if name and name.strip()]
    global _current_filenames
    _current_filenames = cleaned or [DEFAULT_CONTEXT_FILENAME]
    logger.debug("Context filenames set to %s", _current_filenames)


def reset_context_filenames() -> None:
    global _current_filenames
    _current_filenames = _load_context_filenames()


def get_current_context_filename() -> str:
    return _current_filenames[0]


def get_all_context_filenames() -> list[str]:
    """Return the configured filenames in discovery order (never empty)."""
    return list(_current_filenames)

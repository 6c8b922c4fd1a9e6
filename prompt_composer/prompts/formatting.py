"""Render lists of names as prose."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from ..errors import EmptyEnumerationError


class EnumerationMode(str, Enum):
    PROSE_OR = "prose_or"  # `A`, `B` or `C`
    PLAIN_COMMA = "plain_comma"  # A, B, C


def format_enumeration(
    items: Sequence[str],
    mode: EnumerationMode,
    *,
    quote: bool = False,
) -> str:
    """Join ``items`` into a phrase using ``mode``.

    Items keep their order and are not de-duplicated. ``quote`` wraps each
    item in backticks.

    Raises:
        EmptyEnumerationError: if ``items`` is empty.
    """
    if not items:
        raise EmptyEnumerationError(f"Cannot enumerate zero items ({mode.value})")

    rendered = [f"`{item}`" if quote else str(item) for item in items]

    if mode is EnumerationMode.PLAIN_COMMA or len(rendered) == 1:
        return ", ".join(rendered)
    return f"{', '.join(rendered[:-1])} or {rendered[-1]}"

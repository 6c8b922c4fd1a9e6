"""Errors raised while composing a system prompt."""

from __future__ import annotations


class PromptCompositionError(Exception):
    """Base class for prompt composition failures."""


class EmptyEnumerationError(PromptCompositionError, ValueError):
    """A section tried to enumerate zero items as prose."""


class MalformedToolError(PromptCompositionError, ValueError):
    """A tool descriptor is missing its name or origin server."""

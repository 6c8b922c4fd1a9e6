"""Tests for the core mandates and user memory sections."""

from __future__ import annotations

from prompt_composer.prompts.mandates import render_core_mandates, render_user_memory

from .helpers import make_snapshot


class TestCoreMandates:
    def test_single_filename(self):
        result = render_core_mandates(make_snapshot(context_filenames=("GEMINI.md",)))
        assert "Instructions found in `GEMINI.md` files are foundational mandates." in result

    def test_two_filenames(self):
        snapshot = make_snapshot(context_filenames=("GEMINI.md", "CUSTOM.md"))
        result = render_core_mandates(snapshot)
        assert "Instructions found in `GEMINI.md` or `CUSTOM.md` files" in result

    def test_three_filenames(self):
        snapshot = make_snapshot(context_filenames=("GEMINI.md", "CUSTOM.md", "ANOTHER.md"))
        result = render_core_mandates(snapshot)
        assert (
            "Instructions found in `GEMINI.md`, `CUSTOM.md` or `ANOTHER.md` "
            "files are foundational mandates."
        ) in result

    def test_discovery_order_is_kept(self):
        snapshot = make_snapshot(context_filenames=("Z.md", "A.md"))
        assert "`Z.md` or `A.md`" in render_core_mandates(snapshot)

    def test_empty_filenames_fall_back_to_default(self):
        result = render_core_mandates(make_snapshot(context_filenames=()))
        assert "Instructions found in `GEMINI.md` files" in result

    def test_interactive_asks_for_confirmation(self):
        result = render_core_mandates(make_snapshot(interactive=True))
        assert "Confirm Ambiguity" in result
        assert "Act Autonomously" not in result

    def test_non_interactive_acts_autonomously(self):
        result = render_core_mandates(make_snapshot(interactive=False))
        assert "Act Autonomously" in result
        assert "Confirm Ambiguity" not in result

    def test_starts_with_header(self):
        assert render_core_mandates(make_snapshot()).startswith("# Core Mandates")


class TestUserMemory:
    def test_no_memory(self):
        assert render_user_memory(make_snapshot(), None) is None

    def test_blank_memory(self):
        assert render_user_memory(make_snapshot(), "  \n ") is None

    def test_header_uses_plain_comma(self):
        snapshot = make_snapshot(context_filenames=("GEMINI.md", "CUSTOM.md"))
        result = render_user_memory(snapshot, "Some memory content")
        assert result == "# Contextual Instructions (GEMINI.md, CUSTOM.md)\nSome memory content"

    def test_header_never_uses_or(self):
        files = ("GEMINI.md", "CUSTOM.md", "ANOTHER.md")
        snapshot = make_snapshot(context_filenames=files)
        header = render_user_memory(snapshot, "mem").splitlines()[0]
        assert header == "# Contextual Instructions (GEMINI.md, CUSTOM.md, ANOTHER.md)"
        assert "`CUSTOM.md` or `ANOTHER.md`" in render_core_mandates(snapshot)

    def test_empty_filenames_fall_back_to_default(self):
        result = render_user_memory(make_snapshot(context_filenames=()), "mem")
        assert result.startswith("# Contextual Instructions (GEMINI.md)")

    def test_memory_content_is_kept(self):
        memory = "line one\n\n  - indented bullet\n"
        result = render_user_memory(make_snapshot(), memory)
        assert result.endswith("line one\n\n  - indented bullet")

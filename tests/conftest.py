"""Shared fixtures for prompt composer tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from prompt_composer import context_files


@pytest.fixture
def mock_config() -> MagicMock:
    """A configuration double exposing the getters the composer queries."""
    config = MagicMock()
    config.get_tool_registry.return_value.get_all_tool_names.return_value = []
    config.get_tool_registry.return_value.get_all_tools.return_value = []
    config.get_enable_shell_output_efficiency.return_value = True
    config.storage.get_project_temp_dir.return_value = "/tmp/project-temp"
    config.storage.get_plans_dir.return_value = "/tmp/project-temp/plans"
    config.is_interactive.return_value = True
    config.is_interactive_shell_enabled.return_value = True
    config.get_skill_manager.return_value.get_skills.return_value = []
    config.get_active_model.return_value = "gemini-3-pro-preview"
    config.get_agent_registry.return_value.get_all_definitions.return_value = []
    config.get_approved_plan_path.return_value = None
    config.get_approval_mode.return_value = None
    config.is_git_repository.return_value = False
    return config


@pytest.fixture(autouse=True)
def _reset_context_filenames(monkeypatch):
    monkeypatch.delenv("CONTEXT_FILENAMES", raising=False)
    context_files.reset_context_filenames()
    yield
    context_files.reset_context_filenames()

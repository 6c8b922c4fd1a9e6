"""Tests for the optional sections."""

from __future__ import annotations

from prompt_composer.catalog import AgentDefinition, SkillDefinition
from prompt_composer.prompts.base import (
    AUTONOMOUS_PREAMBLE,
    INTERACTIVE_PREAMBLE,
    render_preamble,
)
from prompt_composer.prompts.catalog import render_skills, render_sub_agents
from prompt_composer.prompts.environment import (
    render_git_repository,
    render_model_identity,
    render_operational_guidelines,
)
from prompt_composer.prompts.mcp import render_external_servers
from prompt_composer.tools.descriptors import LocalTool, RemoteTool

from .helpers import make_snapshot


class TestPreamble:
    def test_interactive(self):
        assert render_preamble(make_snapshot(interactive=True)) == INTERACTIVE_PREAMBLE

    def test_non_interactive(self):
        assert render_preamble(make_snapshot(interactive=False)) == AUTONOMOUS_PREAMBLE


class TestSubAgents:
    def test_inactive_without_agents(self):
        assert render_sub_agents(make_snapshot()) is None

    def test_lists_agents(self):
        snapshot = make_snapshot(agents=(
            AgentDefinition("codebase_investigator", "Explores the codebase."),
            AgentDefinition("reviewer", "Reviews diffs."),
        ))
        result = render_sub_agents(snapshot)
        assert result.startswith("# Available Sub-Agents")
        assert '<subagent name="codebase_investigator">Explores the codebase.</subagent>' in result
        assert result.index("codebase_investigator") < result.index("reviewer")


class TestSkills:
    def test_inactive_without_skills(self):
        assert render_skills(make_snapshot()) is None

    def test_lists_skills(self):
        snapshot = make_snapshot(skills=(
            SkillDefinition("pdf", "Work with PDF files.", "/skills/pdf/SKILL.md"),
            SkillDefinition("sql", "Query databases."),
        ))
        result = render_skills(snapshot)
        assert "<name>pdf</name>" in result
        assert "<description>Work with PDF files.</description>" in result
        assert "<location>/skills/pdf/SKILL.md</location>" in result
        assert result.count("<location>") == 1


class TestExternalServers:
    def test_inactive_with_local_tools_only(self):
        snapshot = make_snapshot(tools=(LocalTool("read_file"),))
        assert render_external_servers(snapshot) is None

    def test_single_server(self):
        snapshot = make_snapshot(tools=(LocalTool("read_file"), RemoteTool("list", "mcp")))
        result = render_external_servers(snapshot)
        assert "the `mcp` MCP server " in result

    def test_servers_deduplicated_in_first_seen_order(self):
        snapshot = make_snapshot(tools=(
            RemoteTool("a", "github"),
            RemoteTool("b", "jira"),
            RemoteTool("c", "github"),
            RemoteTool("d", "slack"),
        ))
        result = render_external_servers(snapshot)
        assert "the `github`, `jira` or `slack` MCP servers" in result


class TestOperationalGuidelines:
    def test_shell_efficiency_flag(self):
        on = render_operational_guidelines(make_snapshot(shell_output_efficiency=True))
        off = render_operational_guidelines(make_snapshot(shell_output_efficiency=False))
        assert "Command Output Efficiency" in on
        assert "Command Output Efficiency" not in off

    def test_interactive_shell_flag(self):
        on = render_operational_guidelines(make_snapshot(interactive_shell=True))
        off = render_operational_guidelines(make_snapshot(interactive_shell=False))
        assert "Interactive shell commands are supported" in on
        assert "git rebase -i" in off

    def test_temp_dir(self):
        result = render_operational_guidelines(make_snapshot())
        assert "`/tmp/project-temp`" in result

    def test_no_temp_dir(self):
        result = render_operational_guidelines(make_snapshot(project_temp_dir=None))
        assert "Temporary Files" not in result


class TestEnvironment:
    def test_git_repository(self):
        assert render_git_repository(make_snapshot(is_git_repository=False)) is None
        assert "# Git Repository" in render_git_repository(make_snapshot(is_git_repository=True))

    def test_model_identity(self):
        result = render_model_identity(make_snapshot(model="gemini-3-pro-preview"))
        assert "`gemini-3-pro-preview`" in result

    def test_blank_model(self):
        assert render_model_identity(make_snapshot(model="  ")) is None

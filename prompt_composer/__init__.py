"""Prompt composition engine for an autonomous coding agent."""

from .catalog import AgentDefinition, SkillDefinition
from .config import PromptConfig
from .errors import EmptyEnumerationError, MalformedToolError, PromptCompositionError
from .prompts import PromptProvider, build_system_prompt
from .snapshot import ApprovalMode, ContextSnapshot, take_snapshot
from .tools import LocalTool, RemoteTool, ToolRegistry

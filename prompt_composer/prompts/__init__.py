"""System prompt composition for the coding agent."""

from .assembler import build_system_prompt, default_sections
from .formatting import EnumerationMode, format_enumeration
from .plan_mode import PLAN_MODE_BANNER, filter_plan_mode_tools, format_tool_entry
from .provider import PromptProvider

"""Built-in catalog data: tool groups, aliases, and modes.

Plain data consumed read-only by :func:`crux_toolgate.catalog.container.build_catalog`.
Callers embedding the engine may pass their own tables instead.
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from ..base.models import (
    EXPERIMENT_IMAGE_GENERATION,
    EXPERIMENT_RUN_SLASH_COMMAND,
    GroupOptions,
    ModeConfig,
)
from ..config.defaults import DEFAULT_MODE_SLUG
from .groups import ToolGroupConfig

TOOL_GROUPS: Tuple[ToolGroupConfig, ...] = (
    ToolGroupConfig(
        name="read",
        tools=(
            "read_file",
            "fetch_instructions",
            "search_files",
            "list_files",
            "list_code_definition_names",
            "codebase_search",
        ),
    ),
    ToolGroupConfig(
        name="edit",
        tools=("apply_diff", "write_to_file", "insert_content", "generate_image"),
        custom_tools=("search_and_replace",),
    ),
    ToolGroupConfig(name="browser", tools=("browser_action",)),
    ToolGroupConfig(name="command", tools=("execute_command",)),
    ToolGroupConfig(name="mcp", tools=("use_mcp_tool", "access_mcp_resource")),
    ToolGroupConfig(name="modes", tools=("switch_mode", "new_task")),
)

ALWAYS_AVAILABLE_TOOLS: Tuple[str, ...] = (
    "ask_followup_question",
    "attempt_completion",
    "switch_mode",
    "new_task",
    "update_todo_list",
    "run_slash_command",
)

TOOL_ALIASES: Dict[str, Tuple[str, ...]] = {
    "search_and_replace": ("search_replace",),
    "write_to_file": ("create_file",),
    "apply_diff": ("edit_file",),
}

# Tool -> experiment id that must be on for the mode policy to grant it.
EXPERIMENT_GATED_TOOLS: Mapping[str, str] = {
    "generate_image": EXPERIMENT_IMAGE_GENERATION,
    "run_slash_command": EXPERIMENT_RUN_SLASH_COMMAND,
}

# Tools that write to a path and are therefore subject to a group's fileRegex.
FILE_EDITING_TOOLS: Tuple[str, ...] = (
    "apply_diff",
    "write_to_file",
    "insert_content",
    "search_and_replace",
    "generate_image",
)

BUILTIN_MODES: Tuple[ModeConfig, ...] = (
    ModeConfig(
        slug=DEFAULT_MODE_SLUG,
        name="Code",
        role_definition="A skilled software engineer who writes, edits, and runs code.",
        groups=("read", "edit", "browser", "command", "mcp"),
        is_default=True,
    ),
    ModeConfig(
        slug="architect",
        name="Architect",
        role_definition="A technical lead who plans and documents before implementation.",
        groups=(
            "read",
            ("edit", GroupOptions(file_regex=r"\.md$", description="Markdown files only")),
            "browser",
            "mcp",
        ),
    ),
    ModeConfig(
        slug="ask",
        name="Ask",
        role_definition="A knowledgeable assistant that answers questions without changing files.",
        groups=("read", "browser", "mcp"),
    ),
    ModeConfig(
        slug="debug",
        name="Debug",
        role_definition="An expert at systematic problem diagnosis.",
        groups=("read", "edit", "browser", "command", "mcp"),
    ),
    ModeConfig(
        slug="orchestrator",
        name="Orchestrator",
        role_definition="A coordinator that delegates work to specialized modes.",
        groups=(),
    ),
)


__all__ = [
    "TOOL_GROUPS",
    "ALWAYS_AVAILABLE_TOOLS",
    "TOOL_ALIASES",
    "EXPERIMENT_GATED_TOOLS",
    "FILE_EDITING_TOOLS",
    "BUILTIN_MODES",
    "DEFAULT_MODE_SLUG",
]

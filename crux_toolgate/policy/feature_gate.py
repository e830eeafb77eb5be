"""Environment feature gate.

A data-driven table of :class:`GateRule` rows, each pairing a tool with a
predicate over the call's :class:`GateContext`. A tool whose predicate
reports the capability unavailable is removed together with its whole alias
group, so an alias never outlives its gated canonical tool.

The gate only subtracts. It runs after model customization, so a model's
``includedTools`` can never re-enable a tool the environment lacks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Iterable, Optional, Tuple

from ..base.models import EXPERIMENT_IMAGE_GENERATION, EXPERIMENT_RUN_SLASH_COMMAND, Experiments, RuntimeSettings
from ..catalog.aliases import AliasRegistry
from ..hub.base import ResourceHub, hub_has_resources


@dataclass(frozen=True)
class GateContext:
    """Immutable environment snapshot evaluated by the gate rules."""

    settings: RuntimeSettings = field(default_factory=RuntimeSettings)
    experiments: Experiments = field(default_factory=Experiments)
    resource_hub: Optional[ResourceHub] = None

    @classmethod
    def build(cls, settings: Any = None, experiments: Any = None, resource_hub: Any = None) -> "GateContext":
        return cls(RuntimeSettings.coerce(settings), Experiments.coerce(experiments), resource_hub)


@dataclass(frozen=True)
class GateRule:
    """Removes ``tool`` whenever ``is_available(ctx)`` is False."""

    tool: str
    reason: str
    is_available: Callable[[GateContext], bool]


def _code_index_ready(ctx: GateContext) -> bool:
    return ctx.settings.code_index_ready


def _todo_list_enabled(ctx: GateContext) -> bool:
    return ctx.settings.todo_list_enabled


def _image_generation_enabled(ctx: GateContext) -> bool:
    return ctx.experiments.is_enabled(EXPERIMENT_IMAGE_GENERATION)


def _run_slash_command_enabled(ctx: GateContext) -> bool:
    return ctx.experiments.is_enabled(EXPERIMENT_RUN_SLASH_COMMAND)


def _browser_tool_enabled(ctx: GateContext) -> bool:
    return ctx.settings.browser_tool_enabled


def _diff_enabled(ctx: GateContext) -> bool:
    return ctx.settings.diff_enabled


def _hub_has_resources(ctx: GateContext) -> bool:
    return hub_has_resources(ctx.resource_hub)


DEFAULT_GATE_RULES: Tuple[GateRule, ...] = (
    GateRule("codebase_search", "code index not enabled, configured, and initialized", _code_index_ready),
    GateRule("update_todo_list", "todo list disabled", _todo_list_enabled),
    GateRule("generate_image", "imageGeneration experiment off", _image_generation_enabled),
    GateRule("run_slash_command", "runSlashCommand experiment off", _run_slash_command_enabled),
    GateRule("browser_action", "browser tool disabled", _browser_tool_enabled),
    GateRule("apply_diff", "diff editing disabled", _diff_enabled),
    GateRule("access_mcp_resource", "no MCP server exposes resources", _hub_has_resources),
)


class FeatureGate:
    """Applies a gate table to tool name sets."""

    def __init__(self, aliases: AliasRegistry, rules: Iterable[GateRule] = DEFAULT_GATE_RULES) -> None:
        self.aliases = aliases
        self.rules: Tuple[GateRule, ...] = tuple(rules)

    def unavailable(self, ctx: GateContext) -> FrozenSet[str]:
        """Canonical names of every gated tool in ``ctx``."""
        return frozenset(rule.tool for rule in self.rules if not rule.is_available(ctx))

    def apply(self, names: Iterable[str], ctx: GateContext) -> FrozenSet[str]:
        """Return ``names`` minus every gated tool and its aliases."""
        removed = set()
        for tool in self.unavailable(ctx):
            removed.update(self.aliases.alias_group(tool))
        return frozenset(n for n in names if n not in removed)

    def is_gated(self, tool: str, ctx: GateContext) -> bool:
        return self.aliases.resolve_alias(tool) in self.unavailable(ctx)

    def reasons(self, ctx: GateContext) -> dict[str, str]:
        """Gated tool -> human-readable reason, for diagnostics."""
        return {rule.tool: rule.reason for rule in self.rules if not rule.is_available(ctx)}


__all__ = ["GateContext", "GateRule", "DEFAULT_GATE_RULES", "FeatureGate"]

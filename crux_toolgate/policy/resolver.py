"""Tool resolver: the single entry point that turns policy inputs into the
list of tool definitions presented to the model.

Pipeline (``ToolResolver.resolve``):

1. Resolve the mode (custom first, fallback to default).
2. Base set: tools the mode grants (``ModePolicy``).
3. Model overrides: excludes, then group-gated includes (``ModelCustomizer``).
4. Alias expansion: canonicalize, then widen to every alias sibling.
5. Environment pruning (``FeatureGate``).
6. Emit matching candidates in input order, relabelled with the model's
   preferred alias; definitions without a function block are dropped and
   presented names are de-duplicated (first wins).

Resolution is deterministic and total for a valid catalog. The module-level
functions delegate to a process-wide resolver bound to the current catalog
snapshot, rebuilt automatically after a catalog reload.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Experiments, ModeConfig, ModelInfo, ToolDefinition, enabled_experiments
from ..catalog.container import ToolCatalog, default_catalog
from ..config.defaults import EXTERNAL_TOOL_GATE
from .feature_gate import DEFAULT_GATE_RULES, FeatureGate, GateContext, GateRule
from .mode_policy import CustomModes, ModePolicy
from .model_customizer import CustomizationResult, ModelCustomizer

_logger = get_logger("resolver")


@dataclass(frozen=True)
class Resolution:
    """Full outcome of one resolution call.

    Attributes:
        mode: The mode actually applied (after fallback).
        allowed: Final allowed names, canonical and alias, after gating.
        alias_renames: Canonical name -> presented alias.
        tools: Emitted tool definitions, in candidate order.
        gated: Tools removed by the feature gate, with reasons.
    """

    mode: ModeConfig
    allowed: FrozenSet[str]
    alias_renames: Dict[str, str] = field(default_factory=dict)
    tools: List[ToolDefinition] = field(default_factory=list)
    gated: Dict[str, str] = field(default_factory=dict)

    @property
    def tool_names(self) -> List[str]:
        return [t.name for t in self.tools]


class ToolResolver:
    """Composes mode policy, model customization, alias expansion and gating."""

    def __init__(self, catalog: ToolCatalog, rules: Iterable[GateRule] = DEFAULT_GATE_RULES) -> None:
        self.catalog = catalog
        self.modes = ModePolicy(catalog)
        self.customizer = ModelCustomizer(catalog)
        self.gate = FeatureGate(catalog.aliases, rules)

    # ---- Set computation ----
    def _allowed(
        self,
        mode: ModeConfig,
        experiments: Experiments,
        model_info: Optional[ModelInfo],
        gate_ctx: GateContext,
    ) -> Tuple[FrozenSet[str], CustomizationResult]:
        base = frozenset(
            t for t in self.modes.tools_for_mode(mode) if self.modes.is_allowed_in(t, mode, experiments)
        )
        customized = self.customizer.apply(base, mode, model_info)
        aliases = self.catalog.aliases
        widened: Set[str] = set()
        for canonical in aliases.canonicalize(customized.allowed_tools):
            widened.update(aliases.alias_group(canonical))
        return self.gate.apply(widened, gate_ctx), customized

    def resolve(
        self,
        candidate_tools: Iterable[Any] = (),
        mode: Optional[str] = None,
        custom_modes: CustomModes = None,
        experiments: Any = None,
        model_info: Any = None,
        settings: Any = None,
        resource_hub: Any = None,
        *,
        request_id: Optional[str] = None,
    ) -> Resolution:
        exp = Experiments.coerce(experiments)
        info = ModelInfo.coerce(model_info)
        gate_ctx = GateContext.build(settings, exp, resource_hub)
        mode_config = self.modes.resolve(mode, custom_modes)

        allowed, customized = self._allowed(mode_config, exp, info, gate_ctx)
        renames = customized.alias_renames

        tools: List[ToolDefinition] = []
        presented: Set[str] = set()
        for candidate in candidate_tools:
            definition = ToolDefinition.coerce(candidate)
            if definition is None or definition.name not in allowed:
                continue
            definition = definition.renamed(renames.get(definition.name, definition.name))
            if definition.name in presented:
                continue
            presented.add(definition.name)
            tools.append(definition)

        gated = self.gate.reasons(gate_ctx)
        log_event(
            _logger,
            "resolve.complete",
            LogContext(mode=mode_config.slug, model=info.id if info else None, request_id=request_id),
            level=logging.DEBUG,
            requested_mode=mode,
            allowed=len(allowed),
            emitted=len(tools),
            renamed=len(renames) or None,
            gated=set(gated),
            experiments=enabled_experiments(exp) or None,
        )
        return Resolution(mode=mode_config, allowed=allowed, alias_renames=dict(renames), tools=tools, gated=gated)

    def resolve_available_tools(self, candidate_tools: Iterable[Any], *args: Any, **kwargs: Any) -> List[ToolDefinition]:
        """Return the tool definitions to present; see :meth:`resolve`."""
        return self.resolve(candidate_tools, *args, **kwargs).tools

    def allowed_tool_names(
        self,
        mode: Optional[str] = None,
        custom_modes: CustomModes = None,
        experiments: Any = None,
        model_info: Any = None,
        settings: Any = None,
        resource_hub: Any = None,
    ) -> FrozenSet[str]:
        """Final allowed name set (canonical names and aliases) without candidates."""
        return self.resolve((), mode, custom_modes, experiments, model_info, settings, resource_hub).allowed

    # ---- Single-tool queries ----
    def is_tool_allowed_in_mode(
        self,
        tool: str,
        mode: Optional[str] = None,
        custom_modes: CustomModes = None,
        experiments: Any = None,
        settings: Any = None,
        model_info: Any = None,
        resource_hub: Any = None,
    ) -> bool:
        """Same decision as membership in :meth:`allowed_tool_names`, for one name."""
        exp = Experiments.coerce(experiments)
        gate_ctx = GateContext.build(settings, exp, resource_hub)
        aliases = self.catalog.aliases
        canonical = aliases.resolve_alias(tool)
        if self.gate.is_gated(canonical, gate_ctx):
            return False
        mode_config = self.modes.resolve(mode, custom_modes)
        in_base = self.modes.is_allowed_in(canonical, mode_config, exp)
        info = ModelInfo.coerce(model_info)
        if info is None:
            return in_base
        if in_base and canonical not in aliases.canonicalize(info.excluded_tools):
            return True
        return canonical in aliases.canonicalize(info.included_tools) and self.customizer.admits_include(
            canonical, mode_config
        )

    def tools_for_group(
        self,
        group: str,
        mode: Optional[str] = None,
        custom_modes: CustomModes = None,
        experiments: Any = None,
        settings: Any = None,
        resource_hub: Any = None,
    ) -> List[str]:
        """Ordered ``tools`` of ``group`` the mode and environment allow; ``[]`` for unknown groups."""
        return [
            t
            for t in self.catalog.groups.tools_in(group)
            if self.is_tool_allowed_in_mode(t, mode, custom_modes, experiments, settings, resource_hub=resource_hub)
        ]

    def filter_external_tool_set(
        self,
        tools: Sequence[Any],
        mode: Optional[str] = None,
        custom_modes: CustomModes = None,
        experiments: Any = None,
    ) -> List[Any]:
        """Return MCP server tools unchanged when the mode grants ``use_mcp_tool``, else ``[]``."""
        if self.modes.is_allowed(EXTERNAL_TOOL_GATE, mode, custom_modes, experiments):
            return list(tools)
        return []


_default_lock = threading.Lock()
_default_resolver: Optional[ToolResolver] = None


def get_default_resolver() -> ToolResolver:
    """Return a resolver bound to the current process-wide catalog snapshot."""
    global _default_resolver
    catalog = default_catalog()
    with _default_lock:
        if _default_resolver is None or _default_resolver.catalog is not catalog:
            _default_resolver = ToolResolver(catalog)
        return _default_resolver


def resolve_available_tools(
    candidate_tools: Iterable[Any],
    mode: Optional[str] = None,
    custom_modes: CustomModes = None,
    experiments: Any = None,
    model_info: Any = None,
    settings: Any = None,
    resource_hub: Any = None,
) -> List[ToolDefinition]:
    return get_default_resolver().resolve_available_tools(
        candidate_tools, mode, custom_modes, experiments, model_info, settings, resource_hub
    )


def is_tool_allowed_in_mode(
    tool: str,
    mode: Optional[str] = None,
    custom_modes: CustomModes = None,
    experiments: Any = None,
    settings: Any = None,
    model_info: Any = None,
    resource_hub: Any = None,
) -> bool:
    return get_default_resolver().is_tool_allowed_in_mode(
        tool, mode, custom_modes, experiments, settings, model_info, resource_hub
    )


def tools_for_group(
    group: str,
    mode: Optional[str] = None,
    custom_modes: CustomModes = None,
    experiments: Any = None,
    settings: Any = None,
    resource_hub: Any = None,
) -> List[str]:
    return get_default_resolver().tools_for_group(group, mode, custom_modes, experiments, settings, resource_hub)


def filter_external_tool_set(
    tools: Sequence[Any],
    mode: Optional[str] = None,
    custom_modes: CustomModes = None,
    experiments: Any = None,
) -> List[Any]:
    return get_default_resolver().filter_external_tool_set(tools, mode, custom_modes, experiments)


def resolve_tool_alias(name: str) -> str:
    return default_catalog().aliases.resolve_alias(name)


def get_tool_alias_group(name: str) -> List[str]:
    return default_catalog().aliases.alias_group(name)


def apply_model_tool_customization(
    allowed_tools: Iterable[str], mode_config: ModeConfig, model_info: Any = None
) -> CustomizationResult:
    return get_default_resolver().customizer.apply(allowed_tools, mode_config, model_info)


__all__ = [
    "Resolution",
    "ToolResolver",
    "get_default_resolver",
    "resolve_available_tools",
    "is_tool_allowed_in_mode",
    "tools_for_group",
    "filter_external_tool_set",
    "resolve_tool_alias",
    "get_tool_alias_group",
    "apply_model_tool_customization",
]

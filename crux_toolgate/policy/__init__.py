"""Tool policy layer: mode policy, model customization, feature gate, resolver."""

from .feature_gate import DEFAULT_GATE_RULES, FeatureGate, GateContext, GateRule
from .mode_policy import ModePolicy
from .model_customizer import CustomizationResult, ModelCustomizer
from .resolver import (
    Resolution,
    ToolResolver,
    apply_model_tool_customization,
    filter_external_tool_set,
    get_default_resolver,
    get_tool_alias_group,
    is_tool_allowed_in_mode,
    resolve_available_tools,
    resolve_tool_alias,
    tools_for_group,
)

__all__ = [
    "ModePolicy",
    "ModelCustomizer",
    "CustomizationResult",
    "FeatureGate",
    "GateContext",
    "GateRule",
    "DEFAULT_GATE_RULES",
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

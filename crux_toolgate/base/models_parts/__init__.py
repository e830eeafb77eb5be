"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`crux_toolgate.base.models_parts` if needed, while `crux_toolgate.base.models`
remains the primary stable import path.
"""

from .tool_definition import FunctionSpec, ToolDefinition
from .mode_config import GroupEntry, GroupOptions, ModeConfig
from .model_info import ModelInfo
from .experiments import Experiments
from .runtime_settings import RuntimeSettings

__all__ = [
    "FunctionSpec",
    "ToolDefinition",
    "GroupEntry",
    "GroupOptions",
    "ModeConfig",
    "ModelInfo",
    "Experiments",
    "RuntimeSettings",
]

"""
Tool policy domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``crux_toolgate.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.tool_definition import FunctionSpec, ToolDefinition
from .models_parts.mode_config import GroupEntry, GroupOptions, ModeConfig
from .models_parts.model_info import ModelInfo
from .models_parts.experiments import (
    EXPERIMENT_IMAGE_GENERATION,
    EXPERIMENT_MULTI_FILE_APPLY_DIFF,
    EXPERIMENT_PREVENT_FOCUS_DISRUPTION,
    EXPERIMENT_RUN_SLASH_COMMAND,
    Experiments,
    enabled_experiments,
)
from .models_parts.runtime_settings import RuntimeSettings

__all__ = [
    "FunctionSpec",
    "ToolDefinition",
    "GroupEntry",
    "GroupOptions",
    "ModeConfig",
    "ModelInfo",
    "Experiments",
    "enabled_experiments",
    "RuntimeSettings",
    "EXPERIMENT_IMAGE_GENERATION",
    "EXPERIMENT_RUN_SLASH_COMMAND",
    "EXPERIMENT_MULTI_FILE_APPLY_DIFF",
    "EXPERIMENT_PREVENT_FOCUS_DISRUPTION",
]

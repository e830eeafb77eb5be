"""
Toolgate Base Package

Exports the domain-agnostic building blocks shared by every layer:

- Errors: normalized tool policy error taxonomy
- Models (DTOs): immutable per-call inputs and tool definitions
- Logging: structured JSON logging helpers
"""

from .errors import (
    ConfigLoadError,
    ConfigurationIntegrityError,
    ErrorCode,
    FileRestrictionError,
    ToolPolicyError,
)
from .logging import LogContext, configure_logger, get_logger, log_event
from .models import (
    Experiments,
    FunctionSpec,
    GroupEntry,
    GroupOptions,
    ModeConfig,
    ModelInfo,
    RuntimeSettings,
    ToolDefinition,
)

__all__ = [
    "ConfigLoadError",
    "ConfigurationIntegrityError",
    "ErrorCode",
    "FileRestrictionError",
    "ToolPolicyError",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "Experiments",
    "FunctionSpec",
    "GroupEntry",
    "GroupOptions",
    "ModeConfig",
    "ModelInfo",
    "RuntimeSettings",
    "ToolDefinition",
]

"""
Configuration file loading failure.

Raised when an external settings or custom-modes document cannot be read or
does not have the expected shape, and when caller-supplied documents (candidate
tools, model info) fail validation at the CLI or HTTP boundary.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .policy_error import ToolPolicyError


@dataclass
class ConfigLoadError(ToolPolicyError):
    """External configuration could not be loaded or validated."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "invalid configuration"
    path: Optional[str] = None


__all__ = ["ConfigLoadError"]

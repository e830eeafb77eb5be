"""Unified tool policy error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_toolgate.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.policy_error import ToolPolicyError
from .errors_parts.integrity_error import ConfigurationIntegrityError
from .errors_parts.file_restriction_error import FileRestrictionError
from .errors_parts.config_load_error import ConfigLoadError

__all__ = [
    "ErrorCode",
    "ToolPolicyError",
    "ConfigurationIntegrityError",
    "FileRestrictionError",
    "ConfigLoadError",
]

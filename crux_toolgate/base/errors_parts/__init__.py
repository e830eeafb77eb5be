"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_toolgate.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .policy_error import ToolPolicyError
from .integrity_error import ConfigurationIntegrityError
from .file_restriction_error import FileRestrictionError
from .config_load_error import ConfigLoadError

__all__ = [
    "ErrorCode",
    "ToolPolicyError",
    "ConfigurationIntegrityError",
    "FileRestrictionError",
    "ConfigLoadError",
]

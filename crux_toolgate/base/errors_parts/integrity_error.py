"""
Boot-time catalog integrity failure.

Raised while building the alias registry, group catalog, or mode registry when
the static data violates an invariant (duplicate alias, alias colliding with a
tool name, tool listed in two groups, missing or duplicated default mode). The
process must not start with an inconsistent catalog.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .policy_error import ToolPolicyError


@dataclass
class ConfigurationIntegrityError(ToolPolicyError):
    """Static catalog data violates a registry invariant."""

    code: ErrorCode = ErrorCode.CONFLICT
    message: str = "catalog integrity violation"


__all__ = ["ConfigurationIntegrityError"]

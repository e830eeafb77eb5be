"""
File restriction violation for group-scoped edit permissions.

A mode may permit the ``edit`` group only for paths matching a regular
expression (for example ``\\.md$``). Attempting to edit any other path through
such a mode raises this error from ``ModePolicy.check_file_access``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .policy_error import ToolPolicyError


@dataclass
class FileRestrictionError(ToolPolicyError):
    """Tool targets a path outside the mode's file pattern.

    Attributes:
        file_path: The rejected path.
        pattern: The ``file_regex`` the path failed to match.
    """

    code: ErrorCode = ErrorCode.FORBIDDEN
    message: str = "file restricted by mode"
    file_path: Optional[str] = None
    pattern: Optional[str] = None


__all__ = ["FileRestrictionError"]

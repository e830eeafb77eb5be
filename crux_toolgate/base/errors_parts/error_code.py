"""
Normalized tool policy error codes (taxonomy).

Defines the `ErrorCode` enumeration used across the catalog, policy, and
configuration layers. Values are lowercase snake_case and are considered a
stable public contract for logging and the CLI/service error envelopes.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]

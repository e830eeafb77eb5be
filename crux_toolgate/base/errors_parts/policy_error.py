"""
Structured tool policy error exception type.

Base class for every error raised by the tool capability resolution engine.
Carries a normalized `ErrorCode` plus the tool/mode the failure relates to so
that structured logs and CLI output can report it without string parsing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class ToolPolicyError(Exception):
    """Represents a structured tool policy error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        tool: Tool identifier involved in the failure, when relevant.
        mode: Mode slug involved in the failure, when relevant.
    """

    code: ErrorCode
    message: str
    tool: Optional[str] = None
    mode: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining code, tool, mode, and message."""
        scope = ":".join(p for p in (self.mode, self.tool) if p) or "-"
        return f"{scope} {self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly envelope used by the CLI and HTTP service."""
        out: Dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.tool:
            out["tool"] = self.tool
        if self.mode:
            out["mode"] = self.mode
        return out


__all__ = ["ToolPolicyError"]

"""
Candidate tool definition DTO (OpenAI chat-completions function tool shape).

The calling agent runtime supplies one ``ToolDefinition`` per capability it
could present to the model. The resolver only filters and relabels these
entries; it never invents definitions. Entries that are not function tools
(custom/freeform tools without a ``function`` block) are never emitted.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FunctionSpec(BaseModel):
    """Function block of a tool definition.

    Attributes:
        name: Presented tool name. Canonical identifier or an alias.
        description: Model-facing description.
        parameters: JSON schema of the arguments.
        strict: Optional strict-schema hint passed through untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    description: str = ""
    parameters: Dict[str, Any] = Field(default_factory=dict)
    strict: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("tool name must not be blank")
        return v


class ToolDefinition(BaseModel):
    """A single candidate tool as presented to the model API."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "function"
    function: FunctionSpec

    @property
    def name(self) -> str:
        return self.function.name

    def renamed(self, name: str) -> "ToolDefinition":
        """Return a copy presented under ``name``; the original is untouched."""
        if name == self.function.name:
            return self
        return self.model_copy(update={"function": self.function.model_copy(update={"name": name})})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    @classmethod
    def coerce(cls, obj: Any) -> Optional["ToolDefinition"]:
        """Best-effort conversion of a candidate entry.

        Returns ``None`` for entries without a function block so callers can
        drop them silently. Malformed function blocks still raise pydantic's
        ``ValidationError``.
        """
        if isinstance(obj, ToolDefinition):
            return obj
        if isinstance(obj, Mapping) and obj.get("function"):
            return cls.model_validate(dict(obj))
        return None


__all__ = ["FunctionSpec", "ToolDefinition"]

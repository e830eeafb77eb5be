"""
Per-request model facts consulted by tool customization.

Only the tool override fields matter to the resolver; the DTO ignores any
other keys so full provider model-info documents can be passed straight in.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelInfo(BaseModel):
    """Model-declared tool overrides.

    Attributes:
        id: Optional model identifier, used for log context only.
        excluded_tools: Identifiers or aliases to subtract from the mode's set.
        included_tools: Identifiers or aliases to add, gated by group membership.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    excluded_tools: Tuple[str, ...] = Field(default=(), alias="excludedTools")
    included_tools: Tuple[str, ...] = Field(default=(), alias="includedTools")

    @field_validator("excluded_tools", "included_tools", mode="before")
    @classmethod
    def _null_means_no_override(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def coerce(cls, value: Any) -> Optional["ModelInfo"]:
        """Accept ``None``, a mapping (camelCase or snake_case), or an instance."""
        if value is None or isinstance(value, ModelInfo):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"cannot build ModelInfo from {type(value).__name__}")


__all__ = ["ModelInfo"]

"""
Runtime environment facts consulted by the feature gate.

Replaces a loosely typed settings bag with an explicit, immutable struct. Each
field has a defined default: the code index is assumed unavailable until all
three index facts are reported true, while user toggles (todo list, diffs,
browser) default to enabled and only an explicit ``False`` disables them.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class RuntimeSettings(BaseModel):
    """Immutable environment snapshot for one resolution call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    code_index_enabled: bool = Field(default=False, alias="codeIndexEnabled")
    code_index_configured: bool = Field(default=False, alias="codeIndexConfigured")
    code_index_initialized: bool = Field(default=False, alias="codeIndexInitialized")
    todo_list_enabled: bool = Field(default=True, alias="todoListEnabled")
    diff_enabled: bool = Field(default=True, alias="diffEnabled")
    browser_tool_enabled: bool = Field(default=True, alias="browserToolEnabled")

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def code_index_ready(self) -> bool:
        return self.code_index_enabled and self.code_index_configured and self.code_index_initialized

    @classmethod
    def coerce(cls, value: Any) -> "RuntimeSettings":
        if isinstance(value, RuntimeSettings):
            return value
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"cannot build RuntimeSettings from {type(value).__name__}")


__all__ = ["RuntimeSettings"]

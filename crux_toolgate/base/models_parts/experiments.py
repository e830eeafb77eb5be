"""
Experiment flags snapshot.

Experiments gate preview capabilities. Unknown keys in an incoming mapping are
ignored; every recognized flag defaults to off.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

EXPERIMENT_IMAGE_GENERATION = "imageGeneration"
EXPERIMENT_RUN_SLASH_COMMAND = "runSlashCommand"
EXPERIMENT_MULTI_FILE_APPLY_DIFF = "multiFileApplyDiff"
EXPERIMENT_PREVENT_FOCUS_DISRUPTION = "preventFocusDisruption"


class Experiments(BaseModel):
    """Immutable experiment flags for one resolution call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    image_generation: bool = Field(default=False, alias=EXPERIMENT_IMAGE_GENERATION)
    run_slash_command: bool = Field(default=False, alias=EXPERIMENT_RUN_SLASH_COMMAND)
    multi_file_apply_diff: bool = Field(default=False, alias=EXPERIMENT_MULTI_FILE_APPLY_DIFF)
    prevent_focus_disruption: bool = Field(default=False, alias=EXPERIMENT_PREVENT_FOCUS_DISRUPTION)

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_off(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def is_enabled(self, experiment_id: str) -> bool:
        """Return the flag for an experiment id (camelCase) or field name."""
        for field_name, info in type(self).model_fields.items():
            if experiment_id in (field_name, info.alias):
                return bool(getattr(self, field_name))
        return False

    @classmethod
    def coerce(cls, value: Any) -> "Experiments":
        if isinstance(value, Experiments):
            return value
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"cannot build Experiments from {type(value).__name__}")


def enabled_experiments(value: Optional[Experiments]) -> list[str]:
    """List enabled experiment ids, for logging."""
    if value is None:
        return []
    data = value.model_dump(by_alias=True)
    return sorted(k for k, v in data.items() if v)


__all__ = [
    "Experiments",
    "enabled_experiments",
    "EXPERIMENT_IMAGE_GENERATION",
    "EXPERIMENT_RUN_SLASH_COMMAND",
    "EXPERIMENT_MULTI_FILE_APPLY_DIFF",
    "EXPERIMENT_PREVENT_FOCUS_DISRUPTION",
]

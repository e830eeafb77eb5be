"""
Mode configuration DTOs.

A mode is a named behavior profile. Its ``groups`` list is the allow-list of
tool groups; each entry is either a bare group name or a ``(name, options)``
pair where options restrict the group (currently a file pattern for edits).

Accepts the JSON/YAML custom-mode document shape used by project and global
mode files::

    slug: docs-writer
    name: Docs Writer
    groups:
      - read
      - [edit, {fileRegex: "\\.md$", description: Markdown files only}]
"""
from __future__ import annotations

import re
from typing import Any, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GroupOptions(BaseModel):
    """Restriction payload attached to a permitted group."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_regex: Optional[str] = Field(default=None, alias="fileRegex")
    description: Optional[str] = None

    @field_validator("file_regex")
    @classmethod
    def _regex_compiles(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"invalid fileRegex {v!r}: {e}") from e
        return v

    def matches(self, file_path: str) -> bool:
        """Return True when no pattern is set or ``file_path`` matches it."""
        if self.file_regex is None:
            return True
        return re.search(self.file_regex, file_path) is not None


GroupEntry = Union[str, Tuple[str, GroupOptions]]


class ModeConfig(BaseModel):
    """A mode definition (built-in or user supplied).

    Attributes:
        slug: Unique mode identifier, e.g. ``"code"``.
        name: Display name; defaults to the slug.
        role_definition: Prompt text describing the mode's persona.
        groups: Ordered group entries permitted by the mode.
        is_default: Marks the fallback mode. Exactly one built-in mode sets it.
        source: Where the definition came from.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    slug: str
    name: str = ""
    role_definition: str = Field(default="", alias="roleDefinition")
    groups: Tuple[GroupEntry, ...] = ()
    is_default: bool = Field(default=False, alias="isDefault")
    source: Literal["builtin", "project", "global"] = "builtin"

    @field_validator("slug")
    @classmethod
    def _slug_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("mode slug must not be blank")
        return v

    @model_validator(mode="before")
    @classmethod
    def _name_defaults_to_slug(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not data.get("name") and data.get("slug"):
            data = {**data, "name": data["slug"]}
        return data

    def group_names(self) -> List[str]:
        """Return permitted group names in declaration order."""
        return [entry if isinstance(entry, str) else entry[0] for entry in self.groups]

    def group_options(self, group: str) -> Optional[GroupOptions]:
        """Return the restriction payload for ``group`` (``None`` if unrestricted or absent)."""
        for entry in self.groups:
            if isinstance(entry, tuple) and entry[0] == group:
                return entry[1]
        return None

    def permits_group(self, group: str) -> bool:
        return group in self.group_names()


__all__ = ["GroupOptions", "GroupEntry", "ModeConfig"]

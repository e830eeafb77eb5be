"""Tool group catalog.

A tool group is a named bucket of related tools with two partitions:

- ``tools``: granted whenever a mode permits the group.
- ``custom_tools``: opt-in only. Never granted by the mode alone; a model
  override (``includedTools``) can surface them inside a permitted group.

Invariant: a tool identifier belongs to at most one group (across both
partitions). The catalog validates this at construction and raises
:class:`ConfigurationIntegrityError` otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..base.errors import ConfigurationIntegrityError


@dataclass(frozen=True)
class ToolGroupConfig:
    """Static definition of a single tool group."""

    name: str
    tools: Tuple[str, ...] = ()
    custom_tools: Tuple[str, ...] = ()

    def all_tools(self) -> Tuple[str, ...]:
        return self.tools + self.custom_tools

    @classmethod
    def from_mapping(cls, name: str, data: Mapping[str, Any]) -> "ToolGroupConfig":
        """Build from the ``{"tools": [...], "customTools": [...]}`` document shape."""
        custom = data.get("custom_tools", data.get("customTools", ()))
        return cls(name=name, tools=tuple(data.get("tools", ())), custom_tools=tuple(custom or ()))


class GroupCatalog:
    """Read-only mapping from group name to the tools it grants.

    Attributes:
        always_available: Tools granted in every mode regardless of groups.
    """

    def __init__(self, groups: Iterable[ToolGroupConfig], always_available: Iterable[str] = ()) -> None:
        self._groups: Dict[str, ToolGroupConfig] = {}
        self._owner: Dict[str, str] = {}
        for group in groups:
            self._add(group)
        self.always_available: FrozenSet[str] = frozenset(always_available)
        for tool in self.always_available:
            if not tool or not tool.strip():
                raise ConfigurationIntegrityError(message="always-available tool name must not be blank")

    def _add(self, group: ToolGroupConfig) -> None:
        if not group.name or not group.name.strip():
            raise ConfigurationIntegrityError(message="tool group name must not be blank")
        if group.name in self._groups:
            raise ConfigurationIntegrityError(message=f'Duplicate tool group "{group.name}"')
        for tool in group.all_tools():
            if not tool or not tool.strip():
                raise ConfigurationIntegrityError(message=f'Blank tool name in group "{group.name}"')
            owner = self._owner.get(tool)
            if owner is not None:
                raise ConfigurationIntegrityError(
                    message=f'Tool "{tool}" listed in group "{group.name}" is already owned by group "{owner}"',
                    tool=tool,
                )
            self._owner[tool] = group.name
        self._groups[group.name] = group

    @classmethod
    def from_mapping(
        cls, groups: Mapping[str, Mapping[str, Any]], always_available: Iterable[str] = ()
    ) -> "GroupCatalog":
        return cls((ToolGroupConfig.from_mapping(n, d) for n, d in groups.items()), always_available)

    def get(self, group: str) -> Optional[ToolGroupConfig]:
        return self._groups.get(group)

    def group_of(self, tool: str) -> Optional[str]:
        """Return the owning group of ``tool`` (either partition), or ``None``."""
        return self._owner.get(tool)

    def tools_in(self, group: str) -> Tuple[str, ...]:
        """Return the default-granted tools of ``group`` (empty for unknown groups)."""
        cfg = self._groups.get(group)
        return cfg.tools if cfg else ()

    def names(self) -> List[str]:
        return list(self._groups)

    def all_tool_names(self) -> FrozenSet[str]:
        """Every identifier known to the catalog, including always-available tools."""
        return frozenset(self._owner) | self.always_available

    def __iter__(self) -> Iterator[ToolGroupConfig]:
        return iter(self._groups.values())

    def __contains__(self, group: object) -> bool:
        return group in self._groups

    def __len__(self) -> int:
        return len(self._groups)


__all__ = ["ToolGroupConfig", "GroupCatalog"]

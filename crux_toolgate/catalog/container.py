"""Tool catalog container.

Goals:
- Bundle the immutable catalog pieces (groups, aliases, modes) into one value
  that is passed explicitly into the resolver.
- Offer a process-wide holder whose snapshot can be swapped atomically for
  hot reload without readers ever observing a half-built catalog.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..base.logging import get_logger, log_event
from ..base.models import ModeConfig
from . import defaults
from .aliases import AliasRegistry
from .groups import GroupCatalog, ToolGroupConfig
from .modes import ModeRegistry

_logger = get_logger("catalog")


@dataclass(frozen=True)
class ToolCatalog:
    """Immutable bundle of the static catalog data.

    Attributes:
        groups: Group membership table.
        aliases: Frozen alias registry.
        modes: Built-in mode registry.
        experiment_gated: Tool -> experiment id required for the mode policy to grant it.
        file_editing_tools: Tools subject to a group's ``file_regex`` restriction.
    """

    groups: GroupCatalog
    aliases: AliasRegistry
    modes: ModeRegistry
    experiment_gated: Mapping[str, str]
    file_editing_tools: frozenset


def build_catalog(
    groups: Optional[Iterable[ToolGroupConfig]] = None,
    always_available: Optional[Iterable[str]] = None,
    aliases: Optional[Mapping[str, Iterable[str]]] = None,
    modes: Optional[Iterable[ModeConfig]] = None,
    *,
    experiment_gated: Optional[Mapping[str, str]] = None,
    file_editing_tools: Optional[Iterable[str]] = None,
) -> ToolCatalog:
    """Validate and assemble a catalog; ``None`` arguments use the built-in data.

    Raises:
        ConfigurationIntegrityError: any group, alias, or mode invariant is violated.
    """
    group_catalog = GroupCatalog(
        defaults.TOOL_GROUPS if groups is None else groups,
        defaults.ALWAYS_AVAILABLE_TOOLS if always_available is None else always_available,
    )
    alias_registry = AliasRegistry.build(
        group_catalog.all_tool_names(),
        defaults.TOOL_ALIASES if aliases is None else aliases,
    )
    mode_registry = ModeRegistry(defaults.BUILTIN_MODES if modes is None else modes)
    catalog = ToolCatalog(
        groups=group_catalog,
        aliases=alias_registry,
        modes=mode_registry,
        experiment_gated=dict(defaults.EXPERIMENT_GATED_TOOLS if experiment_gated is None else experiment_gated),
        file_editing_tools=frozenset(
            defaults.FILE_EDITING_TOOLS if file_editing_tools is None else file_editing_tools
        ),
    )
    log_event(
        _logger,
        "catalog.built",
        groups=len(group_catalog),
        tools=len(group_catalog.all_tool_names()),
        aliases=len(alias_registry),
        modes=len(mode_registry),
    )
    return catalog


class CatalogHolder:
    """Thread-safe reference to the current :class:`ToolCatalog`.

    Readers take a snapshot with :meth:`current` and keep using it for the
    whole resolution; :meth:`reload` never mutates a published catalog.
    """

    def __init__(self, catalog: Optional[ToolCatalog] = None) -> None:
        self._lock = threading.Lock()
        self._catalog = catalog

    def current(self) -> ToolCatalog:
        with self._lock:
            if self._catalog is None:
                self._catalog = build_catalog()
            return self._catalog

    def reload(self, **kwargs) -> ToolCatalog:
        """Rebuild from ``kwargs`` (see :func:`build_catalog`) and swap it in.

        A failed build raises and leaves the current catalog in place.
        """
        catalog = build_catalog(**kwargs)
        with self._lock:
            self._catalog = catalog
        log_event(_logger, "catalog.reloaded", groups=len(catalog.groups), aliases=len(catalog.aliases))
        return catalog

    def replace(self, catalog: ToolCatalog) -> None:
        with self._lock:
            self._catalog = catalog


_holder = CatalogHolder()


def get_catalog_holder() -> CatalogHolder:
    return _holder


def default_catalog() -> ToolCatalog:
    """Return the process-wide catalog snapshot."""
    return _holder.current()


__all__ = [
    "ToolCatalog",
    "build_catalog",
    "CatalogHolder",
    "get_catalog_holder",
    "default_catalog",
]

"""Static tool catalog: groups, aliases, built-in modes, and the container
that bundles them for the resolver."""

from .aliases import AliasRegistry
from .container import CatalogHolder, ToolCatalog, build_catalog, default_catalog, get_catalog_holder
from .groups import GroupCatalog, ToolGroupConfig
from .modes import ModeRegistry, coerce_modes

__all__ = [
    "AliasRegistry",
    "GroupCatalog",
    "ToolGroupConfig",
    "ModeRegistry",
    "coerce_modes",
    "ToolCatalog",
    "build_catalog",
    "CatalogHolder",
    "get_catalog_holder",
    "default_catalog",
]

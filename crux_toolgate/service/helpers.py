"""Shared helpers for the CLI and HTTP presentation layers.

Both front ends accept the same loosely shaped inputs (JSON/YAML documents,
request bodies) and convert them into the engine's DTOs here, so neither
layer carries policy logic of its own.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from ..base.errors import ConfigLoadError
from ..base.models import ModeConfig, ModelInfo, ToolDefinition
from ..catalog.container import ToolCatalog
from ..config import parse_custom_modes
from ..hub import InMemoryResourceHub
from ..policy import Resolution, ToolResolver


def build_hub(servers: Optional[Any]) -> Optional[InMemoryResourceHub]:
    """Return an in-memory hub for a server list (or ``{"servers": [...]}``); ``None`` when absent."""
    if servers is None:
        return None
    entries = servers.get("servers", []) if isinstance(servers, Mapping) else servers
    if not isinstance(entries, list):
        raise ConfigLoadError(message="MCP servers must be a list")
    try:
        return InMemoryResourceHub(entries)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(message=f"invalid MCP server list: {e}") from e


def coerce_custom_modes(document: Any, fallback: Sequence[ModeConfig] = ()) -> Sequence[ModeConfig]:
    """Validate inline custom modes; an absent document yields ``fallback``."""
    if document is None:
        return fallback
    return parse_custom_modes(document)


def coerce_candidates(entries: Any, path: Optional[str] = None) -> List[ToolDefinition]:
    """Validate candidate tool definitions; entries without a function block are dropped."""
    if not isinstance(entries, list):
        raise ConfigLoadError(message="candidate tools must be a list", path=path)
    out: List[ToolDefinition] = []
    for index, entry in enumerate(entries):
        try:
            definition = ToolDefinition.coerce(entry)
        except ValidationError as e:
            raise ConfigLoadError(message=f"invalid candidate tool at index {index}: {e}", path=path) from e
        if definition is not None:
            out.append(definition)
    return out


def coerce_model_info(document: Any) -> Optional[ModelInfo]:
    if document is not None and not isinstance(document, (Mapping, ModelInfo)):
        raise ConfigLoadError(message="model info must be a mapping")
    try:
        return ModelInfo.coerce(document)
    except ValidationError as e:
        raise ConfigLoadError(message=f"invalid model info: {e}") from e


def synthesize_candidates(catalog: ToolCatalog) -> List[Dict[str, Any]]:
    """Minimal function definitions for every canonical tool in the catalog, sorted by name."""
    return [
        {"type": "function", "function": {"name": name, "description": "", "parameters": {}}}
        for name in sorted(catalog.groups.all_tool_names())
    ]


def describe_modes(resolver: ToolResolver, custom_modes: Sequence[ModeConfig] = ()) -> List[Dict[str, Any]]:
    registry = resolver.catalog.modes
    return [
        {
            "slug": m.slug,
            "name": m.name,
            "source": m.source,
            "groups": m.group_names(),
            "default": m.slug == registry.default_slug,
        }
        for m in registry.all_modes(custom_modes)
    ]


def resolution_payload(resolution: Resolution) -> Dict[str, Any]:
    return {
        "mode": resolution.mode.slug,
        "tools": [t.to_dict() for t in resolution.tools],
        "names": resolution.tool_names,
        "renamed": resolution.alias_renames,
        "gated": resolution.gated,
    }


def experiment_overrides(names: Iterable[str]) -> Dict[str, bool]:
    return {n: True for n in names}


__all__ = [
    "build_hub",
    "coerce_custom_modes",
    "coerce_candidates",
    "coerce_model_info",
    "synthesize_candidates",
    "describe_modes",
    "resolution_payload",
    "experiment_overrides",
]

"""Per-model tool overrides.

Models may declare ``excludedTools`` and ``includedTools``. Excludes are
applied first, then includes are evaluated against the running set. An
include is admitted only when the tool's owning group (either partition) is
permitted by the mode, which is how opt-in ``custom_tools`` surface. Naming an
include by alias records a rename so the tool is presented under that alias.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ModeConfig, ModelInfo
from ..catalog.container import ToolCatalog

_logger = get_logger("model_customizer")


@dataclass(frozen=True)
class CustomizationResult:
    """Outcome of :meth:`ModelCustomizer.apply`.

    Attributes:
        allowed_tools: Canonical tool names after excludes and includes.
        alias_renames: Canonical name -> alias it should be presented as.
    """

    allowed_tools: FrozenSet[str]
    alias_renames: Dict[str, str] = field(default_factory=dict)


class ModelCustomizer:
    def __init__(self, catalog: ToolCatalog) -> None:
        self.catalog = catalog

    def admits_include(self, tool: str, mode: ModeConfig) -> bool:
        """True when ``tool`` (alias or canonical) belongs to a group ``mode`` permits."""
        group = self.catalog.groups.group_of(self.catalog.aliases.resolve_alias(tool))
        return group is not None and mode.permits_group(group)

    def apply(self, base_allowed: Iterable[str], mode: ModeConfig, model_info: Any = None) -> CustomizationResult:
        info = ModelInfo.coerce(model_info)
        if info is None:
            return CustomizationResult(frozenset(base_allowed), {})

        aliases = self.catalog.aliases
        result = set(base_allowed)
        renames: Dict[str, str] = {}

        for tool in info.excluded_tools:
            result.discard(aliases.resolve_alias(tool))

        for tool in info.included_tools:
            canonical = aliases.resolve_alias(tool)
            if not self.admits_include(canonical, mode):
                log_event(
                    _logger,
                    "model.include_rejected",
                    LogContext(mode=mode.slug, model=info.id),
                    level=logging.DEBUG,
                    tool=tool,
                    group=self.catalog.groups.group_of(canonical),
                )
                continue
            result.add(canonical)
            if tool != canonical:
                renames[canonical] = tool

        return CustomizationResult(frozenset(result), renames)


__all__ = ["CustomizationResult", "ModelCustomizer"]

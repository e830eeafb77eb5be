"""Mode policy: which tools a mode grants before model and environment
adjustments.

Decision order for one tool (``is_allowed``):

1. Always-available tools are granted in every mode.
2. Experiment-gated tools are denied while their experiment is off.
3. The tool must be in the ``tools`` partition of a group the mode permits.
   ``custom_tools`` are never granted here.
4. If the permitting group carries a ``file_regex`` and a ``file_path`` is
   given for a file-editing tool, the path must match. Without a path the
   restriction is satisfiable, so the tool stays available.

Mode lookup never fails: an unknown, blank, or missing slug falls back to the
default mode and emits a ``mode.fallback`` warning event.
"""

from __future__ import annotations

import logging
from typing import Any, FrozenSet, Iterable, Optional, Union

from ..base.errors import FileRestrictionError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Experiments, GroupEntry, GroupOptions, ModeConfig
from ..catalog.container import ToolCatalog
from ..catalog.modes import coerce_modes

_logger = get_logger("mode_policy")

CustomModes = Optional[Iterable[Any]]


class ModePolicy:
    """Mode-level tool permissions over a fixed catalog."""

    def __init__(self, catalog: ToolCatalog) -> None:
        self.catalog = catalog

    # ---- Mode lookup ----
    def resolve(self, slug: Optional[str], custom_modes: CustomModes = None) -> ModeConfig:
        """Return the mode for ``slug``; custom modes shadow built-ins of the same slug."""
        customs = coerce_modes(custom_modes)
        registry = self.catalog.modes
        found = registry.get(slug, customs)
        if found is not None:
            return found
        fallback = registry.get(registry.default_slug, customs)
        if slug:
            log_event(
                _logger,
                "mode.fallback",
                LogContext(mode=slug),
                level=logging.WARNING,
                fallback=fallback.slug,
            )
        return fallback

    # ---- Tool sets ----
    def tools_for_mode(self, groups: Union[ModeConfig, Iterable[GroupEntry]]) -> FrozenSet[str]:
        """Union of the permitted groups' ``tools`` plus always-available tools.

        Unknown group names contribute nothing.
        """
        entries = groups.groups if isinstance(groups, ModeConfig) else groups
        out = set(self.catalog.groups.always_available)
        for entry in entries:
            name = entry if isinstance(entry, str) else entry[0]
            out.update(self.catalog.groups.tools_in(name))
        return frozenset(out)

    # ---- Single-tool checks ----
    def _permitting_options(self, tool: str, mode: ModeConfig) -> tuple[bool, Optional[GroupOptions]]:
        group = self.catalog.groups.group_of(tool)
        if group is None or tool not in self.catalog.groups.tools_in(group):
            return False, None
        if not mode.permits_group(group):
            return False, None
        return True, mode.group_options(group)

    def is_allowed_in(
        self,
        tool: str,
        mode: ModeConfig,
        experiments: Any = None,
        file_path: Optional[str] = None,
    ) -> bool:
        """``is_allowed`` against an already resolved mode."""
        if tool in self.catalog.groups.always_available:
            return True
        if not self._experiment_allows(tool, experiments):
            return False
        permitted, options = self._permitting_options(tool, mode)
        if not permitted:
            return False
        if options is not None and file_path is not None and tool in self.catalog.file_editing_tools:
            return options.matches(file_path)
        return True

    def is_allowed(
        self,
        tool: str,
        slug: Optional[str],
        custom_modes: CustomModes = None,
        experiments: Any = None,
        file_path: Optional[str] = None,
    ) -> bool:
        return self.is_allowed_in(tool, self.resolve(slug, custom_modes), experiments, file_path)

    def is_allowed_any_alias(
        self,
        tool: str,
        slug: Optional[str],
        custom_modes: CustomModes = None,
        experiments: Any = None,
        file_path: Optional[str] = None,
    ) -> bool:
        """True when any member of ``tool``'s alias group passes :meth:`is_allowed`."""
        mode = self.resolve(slug, custom_modes)
        return any(
            self.is_allowed_in(name, mode, experiments, file_path)
            for name in self.catalog.aliases.alias_group(tool)
        )

    def check_file_access(
        self,
        tool: str,
        slug: Optional[str],
        custom_modes: CustomModes = None,
        file_path: Optional[str] = None,
    ) -> None:
        """Raise :class:`FileRestrictionError` if ``tool`` may not edit ``file_path``.

        Only file-editing tools in a group carrying ``file_regex`` are
        checked; everything else passes. Aliases are resolved first.
        """
        canonical = self.catalog.aliases.resolve_alias(tool)
        if file_path is None or canonical not in self.catalog.file_editing_tools:
            return
        mode = self.resolve(slug, custom_modes)
        permitted, options = self._permitting_options(canonical, mode)
        if not permitted or options is None or options.matches(file_path):
            return
        raise FileRestrictionError(
            message=(
                f'mode "{mode.slug}" can only edit files matching "{options.file_regex}"'
                f'{f" ({options.description})" if options.description else ""}; got "{file_path}"'
            ),
            tool=tool,
            mode=mode.slug,
            file_path=file_path,
            pattern=options.file_regex,
        )

    def _experiment_allows(self, tool: str, experiments: Any) -> bool:
        experiment_id = self.catalog.experiment_gated.get(tool)
        if experiment_id is None:
            return True
        return Experiments.coerce(experiments).is_enabled(experiment_id)


__all__ = ["ModePolicy", "CustomModes"]

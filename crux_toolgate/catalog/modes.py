"""Mode registry.

Holds the built-in :class:`ModeConfig` records and answers slug lookups,
letting per-call custom modes shadow built-ins of the same slug.

Invariant: exactly one built-in mode is flagged ``is_default``. Violations
raise :class:`ConfigurationIntegrityError` at construction.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..base.errors import ConfigurationIntegrityError
from ..base.models import ModeConfig


def coerce_modes(custom_modes: Optional[Iterable[Any]]) -> Tuple[ModeConfig, ...]:
    """Normalize caller-supplied custom modes to ``ModeConfig`` instances.

    Mappings are validated with pydantic; a mapping without an explicit
    ``source`` is treated as a project mode.
    """
    if not custom_modes:
        return ()
    out: List[ModeConfig] = []
    for mode in custom_modes:
        if isinstance(mode, ModeConfig):
            out.append(mode)
        elif isinstance(mode, Mapping):
            out.append(ModeConfig.model_validate({"source": "project", **mode}))
        else:
            raise TypeError(f"custom mode must be ModeConfig or mapping, got {type(mode).__name__}")
    return tuple(out)


class ModeRegistry:
    """Read-only registry of built-in modes."""

    def __init__(self, modes: Iterable[ModeConfig]) -> None:
        self._modes: Dict[str, ModeConfig] = {}
        for mode in modes:
            if mode.slug in self._modes:
                raise ConfigurationIntegrityError(message=f'Duplicate mode slug "{mode.slug}"', mode=mode.slug)
            self._modes[mode.slug] = mode
        defaults = [m.slug for m in self._modes.values() if m.is_default]
        if len(defaults) != 1:
            raise ConfigurationIntegrityError(
                message=f"exactly one default mode required, found {len(defaults)}: {defaults}"
            )
        self._default_slug = defaults[0]

    @property
    def default_slug(self) -> str:
        return self._default_slug

    def builtin(self) -> List[ModeConfig]:
        return list(self._modes.values())

    def get(self, slug: Optional[str], custom_modes: Sequence[ModeConfig] = ()) -> Optional[ModeConfig]:
        """Find ``slug`` among custom modes first, then built-ins."""
        if not slug:
            return None
        for mode in custom_modes:
            if mode.slug == slug:
                return mode
        return self._modes.get(slug)

    def all_modes(self, custom_modes: Sequence[ModeConfig] = ()) -> List[ModeConfig]:
        """Built-ins with custom overrides applied in place, then new custom modes."""
        overrides: Dict[str, ModeConfig] = {}
        for m in custom_modes:
            overrides.setdefault(m.slug, m)
        merged = [overrides.pop(m.slug, m) for m in self._modes.values()]
        merged.extend(m for m in custom_modes if m.slug in overrides and overrides[m.slug] is m)
        return merged

    def __contains__(self, slug: object) -> bool:
        return slug in self._modes

    def __len__(self) -> int:
        return len(self._modes)


__all__ = ["ModeRegistry", "coerce_modes"]

"""Tool alias registry.

Maps canonical tool identifiers to alternate presentation names and back.
Aliases are purely a naming concern: policy operates on the canonical
capability, and any alias of an allowed capability may be presented.

Registration is validated eagerly and fails loudly with
:class:`ConfigurationIntegrityError`; conflicts indicate a static authoring
bug, never a runtime condition. A registry built via :meth:`AliasRegistry.build`
is frozen and read-only afterwards.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Tuple

from ..base.errors import ConfigurationIntegrityError


class AliasRegistry:
    """Bidirectional canonical <-> alias table.

    Contract:
        - ``register(canonical, aliases)`` validates every alias before
          mutating anything, so a failed call leaves the registry unchanged.
        - Given conflict-free input, registration order does not affect the
          final maps.
        - Queries are total: unknown names resolve to themselves.
    """

    def __init__(self, known_tools: Iterable[str] = ()) -> None:
        self._known: FrozenSet[str] = frozenset(known_tools)
        self._aliases: Dict[str, Tuple[str, ...]] = {}
        self._alias_to_canonical: Dict[str, str] = {}
        self._frozen = False

    @classmethod
    def build(cls, known_tools: Iterable[str], alias_map: Mapping[str, Iterable[str]]) -> "AliasRegistry":
        """Register every ``canonical -> aliases`` entry and freeze the result."""
        registry = cls(known_tools)
        for canonical, aliases in alias_map.items():
            registry.register(canonical, aliases)
        registry.freeze()
        return registry

    def register(self, canonical: str, aliases: Iterable[str]) -> None:
        """Register the aliases of one canonical tool.

        Raises:
            ConfigurationIntegrityError: registry frozen, blank names, the
                canonical already registered or itself an alias, or an alias
                that is duplicated, already claimed, a canonical name in the
                registry, or a known tool identifier.
        """
        if self._frozen:
            raise ConfigurationIntegrityError(message="alias registry is frozen", tool=canonical)
        names = tuple(aliases)
        if not names:
            return
        if not canonical or not canonical.strip():
            raise ConfigurationIntegrityError(message="canonical tool name must not be blank")
        if canonical in self._aliases:
            raise ConfigurationIntegrityError(
                message=f'Tool "{canonical}" already has registered aliases', tool=canonical
            )
        if canonical in self._alias_to_canonical:
            raise ConfigurationIntegrityError(
                message=f'Tool "{canonical}" is already an alias of "{self._alias_to_canonical[canonical]}"',
                tool=canonical,
            )
        seen: set[str] = set()
        for alias in names:
            if not alias or not alias.strip():
                raise ConfigurationIntegrityError(message="alias must not be blank", tool=canonical)
            if alias == canonical or alias in seen:
                raise ConfigurationIntegrityError(
                    message=f'Alias "{alias}" repeated for tool "{canonical}"', tool=canonical
                )
            if alias in self._alias_to_canonical:
                raise ConfigurationIntegrityError(
                    message=(
                        f'Duplicate tool alias "{alias}" - already registered for tool '
                        f'"{self._alias_to_canonical[alias]}"'
                    ),
                    tool=canonical,
                )
            if alias in self._aliases:
                raise ConfigurationIntegrityError(
                    message=f'Alias "{alias}" conflicts with canonical tool name in alias registry',
                    tool=canonical,
                )
            if alias in self._known:
                raise ConfigurationIntegrityError(
                    message=f'Alias "{alias}" conflicts with existing tool name', tool=canonical
                )
            seen.add(alias)

        self._aliases[canonical] = names
        for alias in names:
            self._alias_to_canonical[alias] = canonical

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---- Queries ----
    def resolve_alias(self, name: str) -> str:
        """Return the canonical name for ``name`` (identity if unknown or canonical)."""
        return self._alias_to_canonical.get(name, name)

    def canonicalize(self, names: Iterable[str]) -> FrozenSet[str]:
        return frozenset(self.resolve_alias(n) for n in names)

    def alias_group(self, name: str) -> List[str]:
        """Return ``[canonical, alias1, ...]`` for any member of an alias group.

        Names outside any alias group yield a singleton list.
        """
        canonical = self.resolve_alias(name)
        aliases = self._aliases.get(canonical)
        if aliases is None:
            return [name]
        return [canonical, *aliases]

    def aliases_of(self, canonical: str) -> Tuple[str, ...]:
        return self._aliases.get(canonical, ())

    def is_alias(self, name: str) -> bool:
        return name in self._alias_to_canonical

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self._aliases.items())

    def __contains__(self, name: object) -> bool:
        return name in self._aliases or name in self._alias_to_canonical

    def __len__(self) -> int:
        return len(self._alias_to_canonical)


__all__ = ["AliasRegistry"]

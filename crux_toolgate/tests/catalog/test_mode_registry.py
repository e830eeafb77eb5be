"""Built-in mode registry rules."""

from __future__ import annotations

import pytest

from crux_toolgate.base.errors import ConfigurationIntegrityError
from crux_toolgate.base.models import ModeConfig
from crux_toolgate.catalog import ModeRegistry, coerce_modes
from crux_toolgate.catalog.defaults import BUILTIN_MODES, DEFAULT_MODE_SLUG


def test_builtin_modes_have_single_default() -> None:
    registry = ModeRegistry(BUILTIN_MODES)
    assert registry.default_slug == DEFAULT_MODE_SLUG == "code"  # nosec B101
    assert "architect" in registry  # nosec B101


def test_default_count_must_be_exactly_one() -> None:
    with pytest.raises(ConfigurationIntegrityError):
        ModeRegistry([ModeConfig(slug="a"), ModeConfig(slug="b")])
    with pytest.raises(ConfigurationIntegrityError):
        ModeRegistry([ModeConfig(slug="a", is_default=True), ModeConfig(slug="b", is_default=True)])
    with pytest.raises(ConfigurationIntegrityError, match="Duplicate mode slug"):
        ModeRegistry([ModeConfig(slug="a", is_default=True), ModeConfig(slug="a")])


def test_custom_modes_shadow_builtins() -> None:
    registry = ModeRegistry(BUILTIN_MODES)
    custom = coerce_modes([{"slug": "code", "groups": ["read"]}, {"slug": "reviewer", "groups": ["read"]}])
    assert custom[0].source == "project"  # nosec B101
    assert registry.get("code", custom).group_names() == ["read"]  # nosec B101
    assert registry.get("code").group_names() == ["read", "edit", "browser", "command", "mcp"]  # nosec B101
    assert registry.get("missing", custom) is None  # nosec B101
    assert registry.get(None) is None  # nosec B101

    slugs = [m.slug for m in registry.all_modes(custom)]
    assert slugs == ["code", "architect", "ask", "debug", "orchestrator", "reviewer"]  # nosec B101
    assert registry.all_modes(custom)[0] is custom[0]  # nosec B101


def test_coerce_modes_rejects_other_types() -> None:
    assert coerce_modes(None) == ()  # nosec B101
    with pytest.raises(TypeError):
        coerce_modes(["code"])

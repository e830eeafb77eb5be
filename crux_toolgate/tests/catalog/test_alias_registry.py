"""Alias registry invariants and queries."""

from __future__ import annotations

import pytest

from crux_toolgate.base.errors import ConfigurationIntegrityError, ErrorCode
from crux_toolgate.catalog import AliasRegistry

KNOWN = ("read_file", "write_to_file", "apply_diff", "search_and_replace")


def test_resolve_and_alias_group() -> None:
    reg = AliasRegistry.build(KNOWN, {"write_to_file": ("create_file", "new_file")})
    assert reg.resolve_alias("create_file") == "write_to_file"  # nosec B101
    assert reg.resolve_alias("write_to_file") == "write_to_file"  # nosec B101
    assert reg.resolve_alias("unknown_tool") == "unknown_tool"  # nosec B101
    assert reg.alias_group("new_file") == ["write_to_file", "create_file", "new_file"]  # nosec B101
    assert reg.alias_group("write_to_file") == ["write_to_file", "create_file", "new_file"]  # nosec B101
    assert reg.alias_group("read_file") == ["read_file"]  # nosec B101
    assert reg.canonicalize(["create_file", "read_file"]) == frozenset({"write_to_file", "read_file"})  # nosec B101
    assert reg.is_alias("create_file") and not reg.is_alias("write_to_file")  # nosec B101
    assert "create_file" in reg and "write_to_file" in reg and "read_file" not in reg  # nosec B101


def test_duplicate_alias_is_rejected() -> None:
    reg = AliasRegistry(KNOWN)
    reg.register("write_to_file", ["create_file"])
    with pytest.raises(ConfigurationIntegrityError, match="Duplicate tool alias") as exc:
        reg.register("apply_diff", ["create_file"])
    assert exc.value.code is ErrorCode.CONFLICT  # nosec B101


def test_alias_colliding_with_known_tool_is_rejected() -> None:
    reg = AliasRegistry(KNOWN)
    with pytest.raises(ConfigurationIntegrityError, match="existing tool name"):
        reg.register("write_to_file", ["read_file"])


def test_alias_equal_to_registered_canonical_is_rejected() -> None:
    reg = AliasRegistry(())
    reg.register("alpha", ["a1"])
    with pytest.raises(ConfigurationIntegrityError, match="canonical tool name"):
        reg.register("beta", ["alpha"])


def test_canonical_registered_twice_or_as_alias_is_rejected() -> None:
    reg = AliasRegistry(KNOWN)
    reg.register("write_to_file", ["create_file"])
    with pytest.raises(ConfigurationIntegrityError):
        reg.register("write_to_file", ["make_file"])
    with pytest.raises(ConfigurationIntegrityError):
        reg.register("create_file", ["mk"])


def test_failed_registration_leaves_registry_unchanged() -> None:
    reg = AliasRegistry(KNOWN)
    with pytest.raises(ConfigurationIntegrityError):
        reg.register("apply_diff", ["edit_file", "read_file"])
    assert len(reg) == 0  # nosec B101
    assert reg.resolve_alias("edit_file") == "edit_file"  # nosec B101


def test_blank_names_and_empty_lists() -> None:
    reg = AliasRegistry(KNOWN)
    reg.register("apply_diff", [])
    assert len(reg) == 0  # nosec B101
    with pytest.raises(ConfigurationIntegrityError):
        reg.register("apply_diff", [" "])
    with pytest.raises(ConfigurationIntegrityError):
        reg.register("", ["x"])


def test_registration_order_does_not_change_result() -> None:
    forward = AliasRegistry.build(KNOWN, {"write_to_file": ("create_file",), "apply_diff": ("edit_file",)})
    backward = AliasRegistry.build(KNOWN, {"apply_diff": ("edit_file",), "write_to_file": ("create_file",)})
    assert dict(forward.items()) == dict(backward.items())  # nosec B101


def test_built_registry_is_frozen() -> None:
    reg = AliasRegistry.build(KNOWN, {})
    assert reg.frozen  # nosec B101
    with pytest.raises(ConfigurationIntegrityError, match="frozen"):
        reg.register("apply_diff", ["edit_file"])

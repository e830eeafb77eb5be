"""Group catalog membership and integrity checks."""

from __future__ import annotations

import pytest

from crux_toolgate.base.errors import ConfigurationIntegrityError
from crux_toolgate.catalog import GroupCatalog, ToolGroupConfig


def _catalog() -> GroupCatalog:
    return GroupCatalog.from_mapping(
        {
            "read": {"tools": ["read_file", "list_files"]},
            "edit": {"tools": ["write_to_file"], "customTools": ["search_and_replace"]},
        },
        always_available=["attempt_completion"],
    )


def test_lookup_covers_both_partitions() -> None:
    groups = _catalog()
    assert groups.group_of("list_files") == "read"  # nosec B101
    assert groups.group_of("search_and_replace") == "edit"  # nosec B101
    assert groups.group_of("nope") is None  # nosec B101
    assert groups.tools_in("edit") == ("write_to_file",)  # nosec B101
    assert groups.tools_in("missing") == ()  # nosec B101
    assert groups.get("edit").all_tools() == ("write_to_file", "search_and_replace")  # nosec B101
    assert groups.names() == ["read", "edit"]  # nosec B101
    assert "edit" in groups and len(groups) == 2  # nosec B101


def test_all_tool_names_includes_always_available() -> None:
    assert _catalog().all_tool_names() == frozenset(  # nosec B101
        {"read_file", "list_files", "write_to_file", "search_and_replace", "attempt_completion"}
    )


def test_tool_in_two_groups_is_rejected() -> None:
    with pytest.raises(ConfigurationIntegrityError, match="already owned"):
        GroupCatalog(
            [
                ToolGroupConfig("edit", tools=("write_to_file",)),
                ToolGroupConfig("other", custom_tools=("write_to_file",)),
            ]
        )


def test_duplicate_and_blank_groups_are_rejected() -> None:
    with pytest.raises(ConfigurationIntegrityError):
        GroupCatalog([ToolGroupConfig("a"), ToolGroupConfig("a")])
    with pytest.raises(ConfigurationIntegrityError):
        GroupCatalog([ToolGroupConfig(" ")])
    with pytest.raises(ConfigurationIntegrityError):
        GroupCatalog([ToolGroupConfig("a", tools=("",))])

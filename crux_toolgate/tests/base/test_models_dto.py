"""DTO validation tests for the per-call policy inputs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crux_toolgate.base.models import (
    Experiments,
    GroupOptions,
    ModeConfig,
    ModelInfo,
    RuntimeSettings,
    ToolDefinition,
    enabled_experiments,
)
from crux_toolgate.tests.utils import assert_true, tool


def test_mode_config_accepts_document_shape() -> None:
    mode = ModeConfig.model_validate(
        {
            "slug": "docs",
            "roleDefinition": "writes docs",
            "groups": ["read", ["edit", {"fileRegex": r"\.md$", "description": "Markdown"}]],
        }
    )
    assert mode.group_names() == ["read", "edit"]  # nosec B101
    options = mode.group_options("edit")
    assert_true(isinstance(options, GroupOptions), "edit entry should carry options")
    assert options.file_regex == r"\.md$"  # nosec B101
    assert mode.group_options("read") is None  # nosec B101
    assert mode.name == "docs"  # nosec B101
    assert mode.role_definition == "writes docs"  # nosec B101
    assert mode.source == "builtin"  # nosec B101


def test_mode_config_rejects_blank_slug_and_bad_regex() -> None:
    with pytest.raises(ValidationError):
        ModeConfig(slug="   ")
    with pytest.raises(ValidationError):
        ModeConfig.model_validate({"slug": "x", "groups": [["edit", {"fileRegex": "("}]]})


def test_group_options_matching() -> None:
    assert GroupOptions().matches("anything.py")  # nosec B101
    md = GroupOptions(file_regex=r"\.md$")
    assert md.matches("docs/readme.md")  # nosec B101
    assert not md.matches("src/app.py")  # nosec B101


def test_model_info_aliases_and_coerce() -> None:
    info = ModelInfo.coerce({"id": "m1", "excludedTools": ["apply_diff"], "includedTools": ["search_replace"]})
    assert info.excluded_tools == ("apply_diff",)  # nosec B101
    assert info.included_tools == ("search_replace",)  # nosec B101
    assert ModelInfo.coerce(None) is None  # nosec B101
    assert ModelInfo.coerce(info) is info  # nosec B101
    with pytest.raises(TypeError):
        ModelInfo.coerce(42)


def test_experiments_lookup_by_id_or_field() -> None:
    exp = Experiments.coerce({"imageGeneration": True, "unknownFlag": True})
    assert exp.is_enabled("imageGeneration")  # nosec B101
    assert exp.is_enabled("image_generation")  # nosec B101
    assert not exp.is_enabled("runSlashCommand")  # nosec B101
    assert not exp.is_enabled("unknownFlag")  # nosec B101
    assert enabled_experiments(exp) == ["imageGeneration"]  # nosec B101


def test_runtime_settings_defaults() -> None:
    settings = RuntimeSettings()
    assert not settings.code_index_ready  # nosec B101
    assert settings.todo_list_enabled and settings.diff_enabled and settings.browser_tool_enabled  # nosec B101
    ready = RuntimeSettings.coerce(
        {"codeIndexEnabled": True, "codeIndexConfigured": True, "codeIndexInitialized": True}
    )
    assert ready.code_index_ready  # nosec B101


def test_tool_definition_coerce_and_rename() -> None:
    assert ToolDefinition.coerce({"type": "custom", "custom": {"name": "x"}}) is None  # nosec B101
    definition = ToolDefinition.coerce(tool("write_to_file"))
    renamed = definition.renamed("create_file")
    assert renamed.name == "create_file"  # nosec B101
    assert definition.name == "write_to_file"  # nosec B101
    assert renamed.to_dict()["function"]["parameters"] == {"type": "object"}  # nosec B101
    assert definition.renamed("write_to_file") is definition  # nosec B101


def test_null_override_fields_mean_no_override() -> None:
    info = ModelInfo.coerce({"id": "m1", "excludedTools": None, "includedTools": None})
    assert info is not None  # nosec B101
    assert info.excluded_tools == () and info.included_tools == ()  # nosec B101

    settings = RuntimeSettings.coerce({"diffEnabled": None, "codeIndexEnabled": None})
    assert settings.diff_enabled is True and settings.code_index_enabled is False  # nosec B101

    experiments = Experiments.coerce({"imageGeneration": None})
    assert experiments.is_enabled("imageGeneration") is False  # nosec B101

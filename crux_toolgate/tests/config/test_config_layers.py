"""Layered configuration: file, environment and explicit overrides."""

from __future__ import annotations

import json

import pytest

from crux_toolgate.base.errors import ConfigLoadError
from crux_toolgate.config import (
    clear_config_cache,
    get_custom_modes,
    get_experiments,
    get_runtime_settings,
    load_custom_modes,
)
from crux_toolgate.config.env import env_overrides, parse_bool

CONFIG_YAML = """
settings:
  diffEnabled: false
  codeIndexEnabled: true
experiments:
  imageGeneration: true
customModes:
  - slug: docs-writer
    name: Docs Writer
    groups:
      - read
      - [edit, {fileRegex: "\\\\.md$"}]
"""


@pytest.fixture()
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "toolgate.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    monkeypatch.setenv("TOOLGATE_CONFIG_FILE", str(path))
    clear_config_cache()
    return path


def test_defaults_without_configuration() -> None:
    settings = get_runtime_settings()
    assert settings.diff_enabled and not settings.code_index_enabled  # nosec B101
    assert not get_experiments().image_generation  # nosec B101
    assert get_custom_modes() == ()  # nosec B101


def test_file_layer(config_file) -> None:
    settings = get_runtime_settings()
    assert settings.diff_enabled is False and settings.code_index_enabled is True  # nosec B101
    assert get_experiments().image_generation is True  # nosec B101
    modes = get_custom_modes()
    assert [m.slug for m in modes] == ["docs-writer"]  # nosec B101
    assert modes[0].group_options("edit").matches("README.md")  # nosec B101
    assert modes[0].source == "project"  # nosec B101


def test_env_beats_file_and_overrides_beat_env(config_file, monkeypatch) -> None:
    monkeypatch.setenv("TOOLGATE_DIFF_ENABLED", "yes")
    monkeypatch.setenv("TOOLGATE_EXPERIMENTS", "runSlashCommand, ")
    assert get_runtime_settings().diff_enabled is True  # nosec B101
    assert get_runtime_settings({"diffEnabled": False}).diff_enabled is False  # nosec B101
    assert get_runtime_settings({"diff_enabled": False}).diff_enabled is False  # nosec B101
    exp = get_experiments()
    assert exp.image_generation and exp.run_slash_command  # nosec B101
    assert get_experiments({"imageGeneration": False}).image_generation is False  # nosec B101


def test_parse_bool_and_env_overrides() -> None:
    assert parse_bool("ON") is True and parse_bool("0") is False  # nosec B101
    assert parse_bool("maybe") is None and parse_bool(None) is None  # nosec B101
    env = {"TOOLGATE_TODO_LIST_ENABLED": "false", "TOOLGATE_BROWSER_TOOL_ENABLED": "??", "TOOLGATE_EXPERIMENTS": "a,b"}
    assert env_overrides(env) == {  # nosec B101
        "settings": {"todo_list_enabled": False},
        "experiments": {"a": True, "b": True},
    }


def test_load_custom_modes_json_list(tmp_path) -> None:
    path = tmp_path / "modes.json"
    path.write_text(json.dumps([{"slug": "reviewer", "groups": ["read"]}]), encoding="utf-8")
    modes = load_custom_modes(path, source="global")
    assert modes[0].slug == "reviewer" and modes[0].source == "global"  # nosec B101


def test_custom_modes_file_env_wins_over_config(config_file, tmp_path, monkeypatch) -> None:
    path = tmp_path / "modes.json"
    path.write_text(json.dumps({"customModes": [{"slug": "reviewer"}]}), encoding="utf-8")
    monkeypatch.setenv("TOOLGATE_CUSTOM_MODES_FILE", str(path))
    clear_config_cache()
    assert [m.slug for m in get_custom_modes()] == ["reviewer"]  # nosec B101


@pytest.mark.parametrize(
    "content",
    [
        "customModes: [unclosed",
        json.dumps({"customModes": [{"slug": "bad", "groups": [["edit", {"fileRegex": "("}]]}]}),
        json.dumps({"customModes": {"slug": "not-a-list"}}),
        json.dumps({"customModes": ["code"]}),
    ],
)
def test_malformed_custom_modes_raise_config_load_error(tmp_path, content) -> None:
    path = tmp_path / "modes.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigLoadError) as exc:
        load_custom_modes(path)
    assert exc.value.path == str(path)  # nosec B101


def test_missing_file_raises_config_load_error(tmp_path) -> None:
    with pytest.raises(ConfigLoadError, match="cannot read"):
        load_custom_modes(tmp_path / "absent.yaml")


def test_non_mapping_config_root_is_rejected(tmp_path, monkeypatch) -> None:
    path = tmp_path / "toolgate.json"
    path.write_text("[1, 2]", encoding="utf-8")
    monkeypatch.setenv("TOOLGATE_CONFIG_FILE", str(path))
    clear_config_cache()
    with pytest.raises(ConfigLoadError):
        get_runtime_settings()

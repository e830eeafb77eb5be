"""Unified configuration layer for toolgate.

Goals
-----
* Centralize defaults for runtime settings and experiment flags.
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (the ``RuntimeSettings`` / ``Experiments`` field defaults)
    2. Optional external config file (JSON or YAML) pointed to by TOOLGATE_CONFIG_FILE
    3. Environment variables (TOOLGATE_TODO_LIST_ENABLED, TOOLGATE_EXPERIMENTS, ...)
    4. In-code overrides passed to the helper
* Load custom mode documents (``customModes``) from JSON or YAML.

External Config File
--------------------
JSON is tried first, then YAML. Structure example:

```
settings:
  codeIndexEnabled: true
  diffEnabled: false
experiments:
  imageGeneration: true
customModes:
  - slug: docs-writer
    name: Docs Writer
    groups: [read, [edit, {fileRegex: "\\.md$"}]]
```

Public API
----------
* get_runtime_settings(overrides: dict | None = None) -> RuntimeSettings
* get_experiments(overrides: dict | None = None) -> Experiments
* load_custom_modes(path) -> tuple[ModeConfig, ...]
* get_custom_modes() -> tuple[ModeConfig, ...]
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Type

import yaml
from pydantic import BaseModel, ValidationError

from ..base.errors import ConfigLoadError
from ..base.logging import get_logger, log_event
from ..base.models import Experiments, ModeConfig, RuntimeSettings
from .env import (
    CONFIG_FILE_ENV,
    CUSTOM_MODES_FILE_ENV,
    experiments_env_overrides,
    settings_env_overrides,
)

_logger = get_logger("config")

_FILE_CACHE: Optional[Dict[str, Any]] = None
_MODES_CACHE: Optional[Tuple[ModeConfig, ...]] = None


def load_document(path: Path) -> Any:
    """Read ``path`` as JSON, falling back to YAML.

    Raises
    ------
    ConfigLoadError
        The file cannot be read or is neither valid JSON nor valid YAML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(message=f"cannot read {path}: {e}", path=str(path)) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(message=f"malformed JSON/YAML in {path}: {e}", path=str(path)) from e


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    data = load_document(Path(path))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(message=f"config root must be a mapping in {path}", path=path)
    _FILE_CACHE = data
    log_event(_logger, "config.loaded", path=path, sections=sorted(data))
    return data


def _field_keys(model: Type[BaseModel], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate camelCase aliases to field names; unknown keys are dropped."""
    lookup: Dict[str, str] = {}
    for name, info in model.model_fields.items():
        lookup[name] = name
        if info.alias:
            lookup[info.alias] = name
    return {lookup[k]: v for k, v in data.items() if k in lookup}


def _section(name: str) -> Mapping[str, Any]:
    section = _load_external_config().get(name) or {}
    if not isinstance(section, Mapping):
        raise ConfigLoadError(message=f'config section "{name}" must be a mapping')
    return section


def _build(model: Type[BaseModel], *layers: Mapping[str, Any]) -> Any:
    merged: Dict[str, Any] = {}
    for layer in layers:
        merged |= _field_keys(model, layer)
    try:
        return model.model_validate(merged)
    except ValidationError as e:
        raise ConfigLoadError(message=f"invalid {model.__name__}: {e}") from e


def get_runtime_settings(overrides: Optional[Mapping[str, Any]] = None) -> RuntimeSettings:
    """Return merged runtime settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    return _build(RuntimeSettings, _section("settings"), settings_env_overrides(), overrides or {})


def get_experiments(overrides: Optional[Mapping[str, Any]] = None) -> Experiments:
    """Return merged experiment flags (same merge order as settings)."""
    return _build(Experiments, _section("experiments"), experiments_env_overrides(), overrides or {})


def parse_custom_modes(document: Any, *, source: str = "project", path: Optional[str] = None) -> Tuple[ModeConfig, ...]:
    """Validate a ``customModes`` document (mapping with that key, or a bare list)."""
    if document is None:
        return ()
    entries = document.get("customModes", []) if isinstance(document, Mapping) else document
    if not isinstance(entries, list):
        raise ConfigLoadError(message="customModes must be a list", path=path)
    modes = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ConfigLoadError(message="each custom mode must be a mapping", path=path)
        try:
            modes.append(ModeConfig.model_validate({"source": source, **entry}))
        except ValidationError as e:
            raise ConfigLoadError(
                message=f'invalid custom mode "{entry.get("slug", "?")}": {e}', mode=entry.get("slug"), path=path
            ) from e
    return tuple(modes)


def load_custom_modes(path: str | os.PathLike[str], *, source: str = "project") -> Tuple[ModeConfig, ...]:
    """Load custom modes from a JSON or YAML file.

    Raises
    ------
    ConfigLoadError
        The file is missing or unreadable, malformed, or a mode fails validation
        (including a ``fileRegex`` that does not compile).
    """
    p = Path(path)
    modes = parse_custom_modes(load_document(p), source=source, path=str(p))
    log_event(_logger, "config.loaded", path=str(p), custom_modes=[m.slug for m in modes])
    return modes


def get_custom_modes() -> Tuple[ModeConfig, ...]:
    """Custom modes from TOOLGATE_CUSTOM_MODES_FILE, else the config file's ``customModes``."""
    global _MODES_CACHE
    if _MODES_CACHE is not None:
        return _MODES_CACHE
    path = os.getenv(CUSTOM_MODES_FILE_ENV)
    if path:
        _MODES_CACHE = load_custom_modes(path)
    else:
        _MODES_CACHE = parse_custom_modes(_load_external_config(), path=os.getenv(CONFIG_FILE_ENV))
    return _MODES_CACHE


def clear_config_cache() -> None:
    """Forget cached file contents (tests and hot reload)."""
    global _FILE_CACHE, _MODES_CACHE
    _FILE_CACHE = None
    _MODES_CACHE = None


__all__ = [
    "load_document",
    "get_runtime_settings",
    "get_experiments",
    "parse_custom_modes",
    "load_custom_modes",
    "get_custom_modes",
    "clear_config_cache",
]

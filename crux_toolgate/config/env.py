"""crux_toolgate.config.env
========================

Centralized environment variable names and parsing helpers for toolgate
configuration.

Design Notes
------------
- ``SETTINGS_ENV_MAP`` maps each ``RuntimeSettings`` field to its variable.
- Experiments are enabled with a comma-separated list of experiment ids in
  ``TOOLGATE_EXPERIMENTS`` (e.g. ``imageGeneration,runSlashCommand``).
- Helpers never raise on unset or unparseable values; such variables are
  simply ignored so the next configuration layer applies.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

CONFIG_FILE_ENV = "TOOLGATE_CONFIG_FILE"
CUSTOM_MODES_FILE_ENV = "TOOLGATE_CUSTOM_MODES_FILE"
EXPERIMENTS_ENV = "TOOLGATE_EXPERIMENTS"

SETTINGS_ENV_MAP: Dict[str, str] = {
    "code_index_enabled": "TOOLGATE_CODE_INDEX_ENABLED",
    "code_index_configured": "TOOLGATE_CODE_INDEX_CONFIGURED",
    "code_index_initialized": "TOOLGATE_CODE_INDEX_INITIALIZED",
    "todo_list_enabled": "TOOLGATE_TODO_LIST_ENABLED",
    "diff_enabled": "TOOLGATE_DIFF_ENABLED",
    "browser_tool_enabled": "TOOLGATE_BROWSER_TOOL_ENABLED",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish string.

    Parameters
    ----------
    value: Optional[str]
        Raw environment value.

    Returns
    -------
    Optional[bool]
        ``True``/``False`` for recognized spellings, ``None`` otherwise.
    """
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def settings_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, bool]:
    """Return ``RuntimeSettings`` field overrides present in the environment."""
    env = os.environ if environ is None else environ
    out: Dict[str, bool] = {}
    for field, var in SETTINGS_ENV_MAP.items():
        parsed = parse_bool(env.get(var))
        if parsed is not None:
            out[field] = parsed
    return out


def experiments_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, bool]:
    """Return ``{experiment_id: True}`` for each id listed in ``TOOLGATE_EXPERIMENTS``."""
    env = os.environ if environ is None else environ
    raw = env.get(EXPERIMENTS_ENV) or ""
    return {name.strip(): True for name in raw.split(",") if name.strip()}


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Dict[str, bool]]:
    """Both override layers, keyed ``settings`` and ``experiments``."""
    return {
        "settings": settings_env_overrides(environ),
        "experiments": experiments_env_overrides(environ),
    }


__all__ = [
    "CONFIG_FILE_ENV",
    "CUSTOM_MODES_FILE_ENV",
    "EXPERIMENTS_ENV",
    "SETTINGS_ENV_MAP",
    "parse_bool",
    "settings_env_overrides",
    "experiments_env_overrides",
    "env_overrides",
]

"""Pytest configuration for the toolgate test suite.

Every test runs against a clean configuration: ``TOOLGATE_*`` variables are
removed, file caches are cleared and the process-wide catalog snapshot is
restored afterwards so hot-reload tests cannot leak into other modules.
"""

from __future__ import annotations

import os
from typing import Iterator, List

import pytest

from crux_toolgate.base.logging import get_logger
from crux_toolgate.base.models import ModeConfig
from crux_toolgate.catalog import ToolCatalog, ToolGroupConfig, build_catalog, get_catalog_holder
from crux_toolgate.config import clear_config_cache
from crux_toolgate.policy import ToolResolver
from crux_toolgate.tests.utils import tool


@pytest.fixture(autouse=True)
def toolgate_isolation(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip toolgate env vars and restore the shared catalog after each test."""

    for var in list(os.environ):
        if var.startswith("TOOLGATE_"):
            monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    # re-point the console handler at the current sys.stderr
    get_logger()
    holder = get_catalog_holder()
    snapshot = holder.current()
    yield
    holder.replace(snapshot)
    clear_config_cache()


@pytest.fixture()
def catalog() -> ToolCatalog:
    """A freshly built catalog from the built-in data."""

    return build_catalog()


@pytest.fixture()
def resolver(catalog: ToolCatalog) -> ToolResolver:
    return ToolResolver(catalog)


@pytest.fixture()
def all_candidates(catalog: ToolCatalog) -> List[dict]:
    """Definitions for every canonical tool, in sorted order."""

    return [tool(name) for name in sorted(catalog.groups.all_tool_names())]


@pytest.fixture()
def scenario_catalog() -> ToolCatalog:
    """Small catalog with a ``core`` and an ``edit`` group and one aliased custom tool."""

    return build_catalog(
        groups=(
            ToolGroupConfig("core", tools=("read_file", "codebase_search")),
            ToolGroupConfig("edit", tools=("apply_diff", "write_to_file"), custom_tools=("search_and_replace",)),
            ToolGroupConfig("command", tools=("execute_command",)),
        ),
        always_available=("attempt_completion",),
        aliases={"search_and_replace": ("search_replace_alias",)},
        modes=(
            ModeConfig(slug="builder", groups=("core", "edit"), is_default=True),
            ModeConfig(slug="runner", groups=("command",)),
        ),
    )

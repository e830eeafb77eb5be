"""crux_toolgate package

Tool capability resolution engine: decides, for one assistant invocation,
exactly which callable tools the assistant may use.

Purpose:
    Reconcile the active mode's tool groups, experiment flags, per-model
    ``excludedTools``/``includedTools`` overrides and environment availability
    into one deterministic tool list. Resolution is a pure synchronous
    function over the supplied state; it never executes tools or performs I/O.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ToolPolicyError`, :class:`ConfigurationIntegrityError`,
      :class:`FileRestrictionError`, :class:`ConfigLoadError`, :class:`ErrorCode`
    - DTOs: :class:`ModeConfig`, :class:`ModelInfo`, :class:`Experiments`,
      :class:`RuntimeSettings`, :class:`ToolDefinition`
    - Catalog: :func:`build_catalog`, :func:`default_catalog`, :class:`ToolCatalog`
    - Resolution: :class:`ToolResolver` and the module-level helpers bound to
      the default catalog (``resolve_available_tools``, ``is_tool_allowed_in_mode``,
      ``tools_for_group``, ``filter_external_tool_set``, ``resolve_tool_alias``,
      ``get_tool_alias_group``, ``apply_model_tool_customization``)

Notes:
    - The HTTP service and CLI live under ``crux_toolgate.service`` and are not
      imported here, so embedding callers do not pull in FastAPI.
"""

__version__ = "0.1.0"

from .base.errors import (
    ConfigLoadError,
    ConfigurationIntegrityError,
    ErrorCode,
    FileRestrictionError,
    ToolPolicyError,
)
from .base.models import Experiments, GroupOptions, ModeConfig, ModelInfo, RuntimeSettings, ToolDefinition
from .catalog import CatalogHolder, ToolCatalog, build_catalog, default_catalog, get_catalog_holder
from .hub import InMemoryResourceHub, McpServer, ResourceHub
from .policy import (
    CustomizationResult,
    Resolution,
    ToolResolver,
    apply_model_tool_customization,
    filter_external_tool_set,
    get_tool_alias_group,
    is_tool_allowed_in_mode,
    resolve_available_tools,
    resolve_tool_alias,
    tools_for_group,
)

__all__ = [
    "__version__",
    "ToolPolicyError",
    "ConfigurationIntegrityError",
    "FileRestrictionError",
    "ConfigLoadError",
    "ErrorCode",
    "Experiments",
    "GroupOptions",
    "ModeConfig",
    "ModelInfo",
    "RuntimeSettings",
    "ToolDefinition",
    "ToolCatalog",
    "CatalogHolder",
    "build_catalog",
    "default_catalog",
    "get_catalog_holder",
    "InMemoryResourceHub",
    "McpServer",
    "ResourceHub",
    "CustomizationResult",
    "Resolution",
    "ToolResolver",
    "resolve_available_tools",
    "is_tool_allowed_in_mode",
    "tools_for_group",
    "filter_external_tool_set",
    "resolve_tool_alias",
    "get_tool_alias_group",
    "apply_model_tool_customization",
]

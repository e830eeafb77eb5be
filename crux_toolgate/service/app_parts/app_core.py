from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, Field

from crux_toolgate.base.errors import ErrorCode, FileRestrictionError
from crux_toolgate.config import get_custom_modes, get_experiments, get_runtime_settings
from crux_toolgate.policy import get_default_resolver
from crux_toolgate.service.helpers import (
    build_hub,
    coerce_candidates,
    coerce_custom_modes,
    coerce_model_info,
    describe_modes,
    resolution_payload,
)

STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.CONFLICT: 409,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.VALIDATION: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INTERNAL: 500,
}


class PolicyBody(BaseModel):
    """Policy inputs shared by the resolve and check endpoints.

    Omitted settings and experiments fall back to the service configuration;
    explicit values are layered on top of it.
    """

    mode: Optional[str] = None
    custom_modes: Optional[List[Dict[str, Any]]] = Field(default=None, alias="customModes")
    experiments: Dict[str, bool] = Field(default_factory=dict)
    settings: Dict[str, Any] = Field(default_factory=dict)
    model_info: Optional[Dict[str, Any]] = Field(default=None, alias="modelInfo")
    mcp_servers: Optional[List[Dict[str, Any]]] = Field(default=None, alias="mcpServers")

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class ResolveBody(PolicyBody):
    """Resolve request: candidate tool definitions plus policy inputs."""

    tools: List[Dict[str, Any]] = Field(default_factory=list)


class CheckBody(PolicyBody):
    """Single-tool check request."""

    tool: str
    file_path: Optional[str] = Field(default=None, alias="filePath")


def _inputs(body: PolicyBody) -> Dict[str, Any]:
    return {
        "custom_modes": coerce_custom_modes(body.custom_modes, get_custom_modes()),
        "experiments": get_experiments(body.experiments),
        "settings": get_runtime_settings(body.settings),
        "resource_hub": build_hub(body.mcp_servers),
    }


def _build_modes_response() -> Dict[str, Any]:
    resolver = get_default_resolver()
    return {
        "ok": True,
        "default": resolver.catalog.modes.default_slug,
        "modes": describe_modes(resolver, get_custom_modes()),
    }


def _handle_resolve(body: ResolveBody) -> Dict[str, Any]:
    resolution = get_default_resolver().resolve(
        coerce_candidates(body.tools), body.mode, model_info=coerce_model_info(body.model_info), **_inputs(body)
    )
    return {"ok": True, **resolution_payload(resolution)}


def _handle_check(body: CheckBody) -> Dict[str, Any]:
    resolver = get_default_resolver()
    inputs = _inputs(body)
    mode = resolver.modes.resolve(body.mode, inputs["custom_modes"])
    allowed = resolver.is_tool_allowed_in_mode(
        body.tool,
        body.mode,
        inputs["custom_modes"],
        inputs["experiments"],
        inputs["settings"],
        coerce_model_info(body.model_info),
        inputs["resource_hub"],
    )
    out: Dict[str, Any] = {"ok": True, "tool": body.tool, "mode": mode.slug, "allowed": allowed}
    if allowed and body.file_path:
        try:
            resolver.modes.check_file_access(body.tool, body.mode, inputs["custom_modes"], body.file_path)
        except FileRestrictionError as e:
            out |= {"allowed": False, "reason": e.message}
    return out


def _build_group_response(group: str, mode: Optional[str]) -> Dict[str, Any]:
    resolver = get_default_resolver()
    if group not in resolver.catalog.groups:
        raise HTTPException(status_code=404, detail=f"unknown tool group: {group}")
    custom_modes = get_custom_modes()
    tools = resolver.tools_for_group(
        group,
        mode,
        custom_modes,
        get_experiments(),
        get_runtime_settings(),
    )
    return {"ok": True, "group": group, "mode": resolver.modes.resolve(mode, custom_modes).slug, "tools": tools}

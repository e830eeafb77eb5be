from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crux_toolgate import __version__
from crux_toolgate.base.errors import ToolPolicyError
from crux_toolgate.base.logging import get_logger, log_event
from crux_toolgate.config.defaults import TOOLGATE_SERVICE_CORS_DEFAULT_ORIGINS

from .app_parts.app_core import (
    STATUS_BY_CODE,
    CheckBody,
    ResolveBody,
    _build_group_response,
    _build_modes_response,
    _handle_check,
    _handle_resolve,
)

_logger = get_logger("service")

app = FastAPI(title="Toolgate Service", version=__version__)


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("TOOLGATE_SERVICE_CORS_ORIGINS", TOOLGATE_SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ToolPolicyError)
async def _policy_error_handler(request: Request, exc: ToolPolicyError) -> JSONResponse:
    """Render policy and configuration errors as a JSON envelope."""
    log_event(_logger, "service.error", path=request.url.path, code=exc.code.value)
    return JSONResponse(status_code=STATUS_BY_CODE.get(exc.code, 400), content={"ok": False, "error": exc.to_dict()})


# ---------------------------------------------------------------------------
# Health and catalog endpoints
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Check the health status of the service."""
    return {"ok": True}


@app.get("/api/modes")
def get_modes() -> Dict[str, Any]:
    """List built-in modes merged with configured custom modes."""
    return _build_modes_response()


@app.get("/api/groups/{group}")
def get_group(group: str, mode: Optional[str] = None) -> Dict[str, Any]:
    """Return the tools of ``group`` allowed in ``mode`` under the service configuration."""
    return _build_group_response(group, mode)


# ---------------------------------------------------------------------------
# Resolution endpoints
# ---------------------------------------------------------------------------


@app.post("/api/tools/resolve")
def post_resolve(body: ResolveBody) -> Dict[str, Any]:
    """Filter and relabel the supplied candidate tools for one invocation."""
    return _handle_resolve(body)


@app.post("/api/tools/check")
def post_check(body: CheckBody) -> Dict[str, Any]:
    """Check whether a single tool (canonical or alias) is allowed."""
    return _handle_check(body)
